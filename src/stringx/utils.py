import argparse


def add_flag_argument(
    parser: argparse.ArgumentParser,
    name: str,
    dest: str | None = None,
    default: bool = False,
    help: str | None = None
) -> None:
    """ Add a flag argument to an ArgumentParser instance.
        Either the --flag is present or the --no-flag is present.
        The flag never takes a value, so it cannot swallow a positional
        argument that follows it. Config files set it with ``name = true``.
    """
    dest = dest or name.replace("-", "_")
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        f"--{name}", dest=dest, default=default, action="store_true", help=f"{help} Use --no-{name} to turn it off."
    )
    group.add_argument(f"--no-{name}", dest=dest, action="store_false")
