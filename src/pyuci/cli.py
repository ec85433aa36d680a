from __future__ import annotations

import argparse
import logging
import sys

from .errors import NotFoundError, UciError
from .exporters import available_formats, get_exporter
from .model import UciConfig
from .storage import load_config, save_config

logger = logging.getLogger(__name__)


def _split_path(path: str, *, need_section: bool = True) -> tuple[str, str, str]:
    """Split ``package.section.option`` into its parts; missing parts are ``""``."""
    package, _, rest = path.partition(".")
    section, _, option = rest.partition(".")
    if not package or (need_section and not section):
        raise ValueError(f"invalid path {path!r}: expected PACKAGE.SECTION[.OPTION]")
    return package, section, option


def _split_assignment(arg: str) -> tuple[str, str]:
    path, sep, value = arg.partition("=")
    if not sep:
        raise ValueError(f"invalid assignment {arg!r}: expected PATH=VALUE")
    return path, value


def _load(args: argparse.Namespace, package: str) -> UciConfig:
    return load_config(package, args.dir)


def _save(args: argparse.Namespace, config: UciConfig) -> None:
    path = save_config(config, args.dir)
    logger.info("wrote %s", path)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def show_cmd(args: argparse.Namespace) -> int:
    config = _load(args, args.package)
    sys.stdout.write(get_exporter(args.format).export(config))
    return 0


def get_cmd(args: argparse.Namespace) -> int:
    package, section, option = _split_path(args.path)
    config = _load(args, package)
    if not option:
        sec_type, _ = config.get_section(section)
        print(sec_type)
        return 0
    _, values = config.get_option(section, option)
    print(" ".join(values))
    return 0


def set_cmd(args: argparse.Namespace) -> int:
    path, value = _split_assignment(args.assignment)
    package, section, option = _split_path(path)
    config = _load(args, package)
    if option:
        config.set_option(section, option, value)
    else:
        config.add_section(value, section)
    _save(args, config)
    return 0


def add_cmd(args: argparse.Namespace) -> int:
    config = _load(args, args.package)
    name = config.add_section(args.section_type)
    _save(args, config)
    print(name)
    return 0


def add_list_cmd(args: argparse.Namespace) -> int:
    path, value = _split_assignment(args.assignment)
    package, section, option = _split_path(path)
    if not option:
        raise ValueError(f"invalid path {path!r}: expected PACKAGE.SECTION.OPTION")
    config = _load(args, package)
    config.add_list(section, option, value)
    _save(args, config)
    return 0


def delete_cmd(args: argparse.Namespace) -> int:
    package, section, option = _split_path(args.path)
    config = _load(args, package)
    if option:
        removed = config.del_option(section, option)
    else:
        removed = config.del_section(section)
    if not removed:
        raise NotFoundError(f"{args.path} not found")
    _save(args, config)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pyuci", description="Read and edit UCI configuration packages."
    )
    parser.add_argument("--dir", help="Directory holding the package files")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    subparsers = parser.add_subparsers(dest="cmd")

    p_show = subparsers.add_parser("show", help="Print a package.")
    p_show.add_argument("package")
    p_show.add_argument("--as", dest="format", choices=available_formats(), default="uci")
    p_show.set_defaults(func=show_cmd)

    p_get = subparsers.add_parser("get", help="Print a section type or option value.")
    p_get.add_argument("path", metavar="PACKAGE.SECTION[.OPTION]")
    p_get.set_defaults(func=get_cmd)

    p_set = subparsers.add_parser("set", help="Set an option or create a named section.")
    p_set.add_argument("assignment", metavar="PACKAGE.SECTION[.OPTION]=VALUE")
    p_set.set_defaults(func=set_cmd)

    p_add = subparsers.add_parser("add", help="Add an anonymous section.")
    p_add.add_argument("package")
    p_add.add_argument("section_type", metavar="TYPE")
    p_add.set_defaults(func=add_cmd)

    p_add_list = subparsers.add_parser("add_list", help="Append a value to a list option.")
    p_add_list.add_argument("assignment", metavar="PACKAGE.SECTION.OPTION=VALUE")
    p_add_list.set_defaults(func=add_list_cmd)

    p_delete = subparsers.add_parser("delete", help="Delete a section or option.")
    p_delete.add_argument("path", metavar="PACKAGE.SECTION[.OPTION]")
    p_delete.set_defaults(func=delete_cmd)

    return parser


def _setup_logging(verbose: bool) -> None:
    root = logging.getLogger("pyuci")
    if verbose and not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s:%(message)s"))
        root.addHandler(handler)
        root.setLevel(logging.DEBUG)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)
    func = getattr(args, "func", None)
    if func is None:
        parser.print_help()
        return 1
    try:
        return int(func(args))
    except NotFoundError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except (UciError, ValueError) as exc:
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
