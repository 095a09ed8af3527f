"""Read-only git queries used to resolve release tags.

Every call takes the repository root explicitly and runs git with it as the
working directory; the process itself never changes directory.
"""

import logging
import subprocess
from pathlib import Path
from typing import List

from get_next_version.errors import GitCommandError, NoTagFoundError, RepoNotFoundError, TagCollisionError

logger = logging.getLogger(__name__)

NOT_A_REPOSITORY = "not a git repository"
# stderr of `git describe` when HEAD has no tag to describe, or no commits yet
NO_TAG_MESSAGES = ("no names found", "cannot describe", "no tags can describe", "not a valid object name head")


def _run_git(args: List[str], cwd: Path, git: str = "git") -> subprocess.CompletedProcess:
    logger.debug("running %s %s in %s", git, " ".join(args), cwd)
    try:
        return subprocess.run(
            [git, *args],
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            check=False,
        )
    except OSError as e:
        raise RepoNotFoundError(f"could not run {git} in {cwd}: {e}") from e


def _git_failure(result: subprocess.CompletedProcess, root: Path) -> Exception:
    detail = result.stderr.strip()
    if NOT_A_REPOSITORY in detail.lower():
        return RepoNotFoundError(f"{root} is not a git repository: {detail}")
    return GitCommandError(f"git {' '.join(result.args[1:])} failed with exit code {result.returncode}: {detail}")


def locate_repository_root(start: Path, git: str = "git") -> Path:
    """Return the top-level directory of the repository containing ``start``."""
    start = Path(start)
    if not start.is_dir():
        raise RepoNotFoundError(f"{start} is not a directory")

    result = _run_git(["rev-parse", "--show-toplevel"], cwd=start, git=git)
    if result.returncode != 0:
        raise RepoNotFoundError(f"no git repository found at or above {start}")

    root = Path(result.stdout.strip())
    logger.debug("repository root: %s", root)
    return root


def get_latest_tag(root: Path, git: str = "git") -> str:
    """Return the nearest tag reachable from HEAD, without the describe suffix."""
    result = _run_git(["describe", "--tags", "--abbrev=0"], cwd=root, git=git)
    tag = result.stdout.strip()
    if result.returncode != 0:
        detail = result.stderr.strip()
        if any(message in detail.lower() for message in NO_TAG_MESSAGES):
            raise NoTagFoundError(f"no tag found in {root}: {detail}")
        raise _git_failure(result, root)
    if not tag:
        raise NoTagFoundError(f"no tag found in {root}")

    logger.debug("latest tag: %s", tag)
    return tag


def tag_exists(root: Path, tag: str, git: str = "git") -> bool:
    """Return True if ``tag`` already names a commit-ish in the repository.

    Any ref counts, not only tags: a branch or an object name with the same
    spelling would make the new tag ambiguous.
    """
    result = _run_git(["rev-parse", "--verify", "--quiet", f"{tag}^{{commit}}"], cwd=root, git=git)
    if result.returncode == 0:
        return True
    # --verify --quiet exits 1 for a missing ref, anything else is a git failure
    if result.returncode == 1:
        return False
    raise _git_failure(result, root)


def ensure_tag_is_new(root: Path, tag: str, git: str = "git") -> None:
    """Raise TagCollisionError if ``tag`` already exists in the repository."""
    if tag_exists(root, tag, git=git):
        raise TagCollisionError(f"{tag} already exists in {root}")
