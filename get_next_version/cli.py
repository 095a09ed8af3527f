import logging
import sys
from typing import List, Optional

from get_next_version.errors import ArgumentConflictError, TagResolverError, UnknownArgumentError
from get_next_version.resolver import Options, run
from get_next_version.settings import Settings
from get_next_version.versioning import BumpMode

logger = logging.getLogger(__name__)

USAGE = """\
usage: get-next-version [-help] [-latest | -next | -major | -patch] [-verbose]

Print the most recent git tag, or the next release tag.

  -h, -help      show this message and exit
  -latest        print the latest tag (default)
  -next          print the next minor release tag
  -major         print the next major release tag
  -patch         print the next patch release tag
  -v, -verbose   print the latest and next tags as a table

Flags are case-insensitive and may start with any number of dashes."""


class HelpRequested(Exception):
    pass


def _normalize(arg: str) -> str:
    if not arg.startswith("-"):
        return ""
    return arg.lstrip("-").lower()


def parse_args(argv: List[str]) -> Options:
    verbose = False
    latest_flag = None
    mode = BumpMode.NONE
    # the bump flag as typed, for error messages
    mode_flag = None

    for arg in argv:
        flag = _normalize(arg)
        if flag in ("h", "help"):
            raise HelpRequested()
        elif flag in ("v", "verbose"):
            verbose = True
        elif flag == "latest":
            latest_flag = arg
        elif flag == "next":
            if mode is BumpMode.NONE:
                mode, mode_flag = BumpMode.MINOR, arg
        elif flag == "major":
            if mode is BumpMode.PATCH:
                raise ArgumentConflictError(f"{mode_flag} and {arg} cannot be used together")
            mode, mode_flag = BumpMode.MAJOR, arg
        elif flag == "patch":
            if mode is BumpMode.MAJOR:
                raise ArgumentConflictError(f"{mode_flag} and {arg} cannot be used together")
            mode, mode_flag = BumpMode.PATCH, arg
        else:
            raise UnknownArgumentError(f"unknown argument {arg!r}")

    if latest_flag and mode is not BumpMode.NONE:
        raise ArgumentConflictError(f"{latest_flag} cannot be used with {mode_flag}")

    return Options(verbose=verbose, latest=latest_flag is not None, bump=mode)


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv

    try:
        options = parse_args(argv)
    except HelpRequested:
        print(USAGE)
        return 0
    except TagResolverError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    try:
        settings = Settings.from_env()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    level = logging.WARNING if settings.log_level is None else settings.log_level
    logging.basicConfig(level=level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")

    try:
        output = run(options, settings=settings)
    except TagResolverError as e:
        logger.debug("resolution failed (%s)", e.kind)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0
