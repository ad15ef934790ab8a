"""The ``stringx`` command: run one string algorithm over texts from argv or stdin."""

import sys

import configargparse

import stringx
import stringx.configutils
import stringx.timing
import stringx.utils
from stringx import compare, convert, copying, replace, trim
from stringx.chars import IsAnyOf
from stringx.sequences import string_length
from stringx.split import SplitMode, isplit_token, split_chars, split_token


def _needs(args, option):
    if getattr(args, option) is None:
        raise ValueError(f"{args.operation} needs --{option}")
    return getattr(args, option)


def _predicate(args):
    return IsAnyOf(args.chars) if args.chars else None


def _length(args, text):
    return str(string_length(text))


def _equals(args, text):
    fn = compare.iequals if args.ignore_case else compare.equals
    return fn(text, _needs(args, "pattern"))


def _starts_with(args, text):
    fn = compare.istarts_with if args.ignore_case else compare.starts_with
    return fn(text, _needs(args, "pattern"))


def _ends_with(args, text):
    fn = compare.iends_with if args.ignore_case else compare.ends_with
    return fn(text, _needs(args, "pattern"))


def _contains(args, text):
    fn = compare.icontains if args.ignore_case else compare.contains
    return fn(text, _needs(args, "pattern"))


def _lower(args, text):
    return convert.to_lower_copy(text)


def _upper(args, text):
    return convert.to_upper_copy(text)


def _trim(args, text):
    return trim.trim_copy(text, _predicate(args))


def _trim_start(args, text):
    return trim.trim_start_copy(text, _predicate(args))


def _trim_end(args, text):
    return trim.trim_end_copy(text, _predicate(args))


def _replace(args, text):
    fn = replace.ireplace_all_copy if args.ignore_case else replace.replace_all_copy
    return fn(text, _needs(args, "pattern"), args.replacement)


def _split_mode(args):
    return SplitMode.SKIP_EMPTY if args.skip_empty else SplitMode.ALL


def _split(args, text):
    separator = _needs(args, "separator")
    if args.ignore_case:
        sections = isplit_token([], text, separator, _split_mode(args))
    else:
        sections = split_token([], text, separator, _split_mode(args))
    return copying.join(str, sections, args.output_separator)


def _split_chars(args, text):
    sections = split_chars([], text, _needs(args, "chars"), _split_mode(args))
    return copying.join(str, sections, args.output_separator)


# Operation name -> (handler, prints true/false)
OPERATIONS = {
    "length": (_length, False),
    "equals": (_equals, True),
    "starts-with": (_starts_with, True),
    "ends-with": (_ends_with, True),
    "contains": (_contains, True),
    "lower": (_lower, False),
    "upper": (_upper, False),
    "trim": (_trim, False),
    "trim-start": (_trim_start, False),
    "trim-end": (_trim_end, False),
    "replace": (_replace, False),
    "split": (_split, False),
    "split-chars": (_split_chars, False),
}


def add_arguments(cap):
    cap.add("operation", choices=sorted(list(OPERATIONS) + ["join"]), help="The algorithm to run")
    cap.add("texts", nargs="*", metavar="TEXT", help="Texts to process. Lines of stdin if none are given.")
    cap.add("--pattern", help="Pattern for equals, starts-with, ends-with, contains and replace")
    cap.add("--replacement", default="", help="Replacement for replace")
    cap.add("--separator", help="Separator for split, and the glue for join")
    cap.add("--chars", help="Characters for split-chars and the trim operations (default: white space)")
    cap.add("--output-separator", default="\n", help="Printed between the sections of split and split-chars")
    stringx.utils.add_flag_argument(cap, "ignore-case", help="Compare ignoring the character casing.")
    stringx.utils.add_flag_argument(cap, "skip-empty", help="Drop empty sections when splitting.")
    stringx.utils.add_flag_argument(cap, "timing", help="Report how long the operation took.")
    cap.add("-v", "--verbose", action="count", default=0, help="Output verbosity. Add more v's to make it more verbose")


def create_parser(description, argv=None):
    if argv is None:
        argv = sys.argv[1:]
    verbose = argv.count("-v") + argv.count("--verbose")
    config_files = stringx.configutils.get_existing_config_files(verbose=verbose)
    cap = configargparse.ArgumentParser(
        description=description,
        formatter_class=configargparse.ArgumentDefaultsHelpFormatter,
        default_config_files=config_files,
        args_for_setting_config_path=["-c", "--config"],
        ignore_unknown_config_file_keys=True,
        auto_env_var_prefix="STRINGX_",
    )
    return cap


def _read_texts(args):
    if args.texts:
        return args.texts
    return [line.rstrip("\n") for line in sys.stdin]


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    cap = create_parser("Run a string algorithm over each TEXT", argv=argv)
    add_arguments(cap)
    # argparse stops filling TEXT at the first option, texts after options come back as extras
    args, extra_texts = cap.parse_known_args(argv)
    unknown = [arg for arg in extra_texts if arg.startswith("-") and arg != "-"]
    if unknown:
        cap.error(f"unrecognized arguments: {' '.join(unknown)}")
    args.texts = args.texts + extra_texts

    if args.verbose >= 2:
        explicit_config = stringx.configutils.extract_value_from_argv("config", argv)
        if explicit_config:
            print(f"Config file from the command line: {explicit_config}", file=sys.stderr)
    if args.verbose >= 3:
        print(f"stringx {stringx.__version__} {args}", file=sys.stderr)

    timer = stringx.timing.Timer(enabled=args.timing)
    texts = _read_texts(args)
    status = 0
    try:
        if args.operation == "join":
            with timer.time_operation("join"):
                print(copying.join(str, texts, args.separator or ""))
        else:
            handler, is_boolean = OPERATIONS[args.operation]
            for text in texts:
                with timer.time_operation(args.operation):
                    result = handler(args, text)
                if is_boolean:
                    print("true" if result else "false")
                    if not result:
                        status = 1
                else:
                    print(result)
                if args.verbose >= 1:
                    print(f"{args.operation} {text!r} -> {result!r}", file=sys.stderr)
    except (ValueError, TypeError) as exc:
        print(f"stringx: {exc}", file=sys.stderr)
        return 1
    finally:
        timer.report(args.verbose)

    return status
