import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from get_next_version.git import ensure_tag_is_new, get_latest_tag, locate_repository_root
from get_next_version.settings import Settings
from get_next_version.versioning import BumpMode, bump, format_tag, parse_version

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Options:
    verbose: bool = False
    latest: bool = False
    bump: BumpMode = BumpMode.NONE


def render_table(rows: List[Tuple[str, str]]) -> str:
    width = max(len(label) for label, _ in rows) + 1
    return "\n".join(f"{label + ':':<{width}} {value}" for label, value in rows)


def run(options: Options, root: Optional[Path] = None, settings: Optional[Settings] = None) -> str:
    """Resolve the latest tag and, when a bump is requested, the next one.

    Args:
        options: parsed command line options.
        root: repository root; located from ``settings.start_dir`` when omitted.
        settings: process configuration, read from the environment when omitted.

    Returns:
        The text to print: the resulting tag, or a labelled table in verbose mode.
    """
    settings = settings or Settings.from_env()
    if root is None:
        root = locate_repository_root(settings.start_dir, git=settings.git)

    latest = get_latest_tag(root, git=settings.git)
    rows = [("latest tag", latest)]

    if options.latest or options.bump is BumpMode.NONE:
        result = latest
    else:
        next_version = bump(parse_version(latest), options.bump)
        result = format_tag(next_version)
        # round-trip through the parser so only well-formed tags are proposed
        parse_version(result)
        ensure_tag_is_new(root, result, git=settings.git)
        logger.debug("%s bump: %s -> %s", options.bump.value, latest, result)
        rows.append(("next tag", result))

    if options.verbose:
        return render_table(rows)
    return result
