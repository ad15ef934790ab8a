"""Locate stringx config files and peek at argv before full parsing."""

import os
import sys

CONFIG_FILENAME = "stringx.conf"


def default_user_config_dir() -> str:
    xdg = os.environ.get("XDG_CONFIG_HOME") or os.path.join(os.path.expanduser("~"), ".config")
    return os.path.join(xdg, "stringx")


def default_system_config_dir() -> str:
    return "/etc/xdg/stringx"


def extract_value_from_argv(key, argv=None, default=None):
    """Extract the value for the given key from the argv.
    Return the given default if no key was identified.

    Both ``--key=value`` and ``--key value`` are understood.
    """
    if argv is None:
        argv = sys.argv

    flag = "--" + key
    for index, arg in enumerate(argv):
        if arg.startswith(flag + "="):
            return arg.split("=", 1)[1]
        if arg == flag and index + 1 < len(argv):
            return argv[index + 1]
    return default


def default_config_files(filename=CONFIG_FILENAME, user_config_dir=None, system_config_dir=None, cwd=None):
    """Candidate config files, lowest priority first.

    configargparse lets later files override earlier ones, so the system
    file comes first and the file in the working directory last.
    """
    if user_config_dir is None:
        user_config_dir = default_user_config_dir()
    if system_config_dir is None:
        system_config_dir = default_system_config_dir()
    if cwd is None:
        cwd = os.getcwd()

    candidates = [
        os.path.join(system_config_dir, filename),
        os.path.join(user_config_dir, filename),
        os.path.join(cwd, filename),
    ]
    # The same file can appear twice if e.g. the working directory is the user config dir
    return list(dict.fromkeys(os.path.realpath(candidate) for candidate in candidates))


def get_existing_config_files(
    filename=CONFIG_FILENAME, user_config_dir=None, system_config_dir=None, cwd=None, verbose=0
):
    """The default config files that exist, lowest priority first."""
    existing = [
        path
        for path in default_config_files(filename, user_config_dir, system_config_dir, cwd)
        if os.path.isfile(path)
    ]
    if verbose >= 2:
        print(f"Config files: {existing}", file=sys.stderr)
    return existing
