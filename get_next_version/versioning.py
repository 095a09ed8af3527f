import enum
import re

import semver

from get_next_version.errors import MalformedTagError

MAJOR_REGEX = re.compile(r"v(\d+)", re.ASCII)
NUMBER_REGEX = re.compile(r"\d+", re.ASCII)


class BumpMode(enum.Enum):
    NONE = "none"
    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"


def parse_version(tag: str) -> semver.Version:
    """Parse a ``vX.Y.Z`` tag into a version.

    Raises:
        MalformedTagError: the tag does not have three dot separated fields,
            or the first field lacks the ``v`` prefix.
    """
    parts = tag.split(".")
    if len(parts) != 3:
        raise MalformedTagError(f"tag {tag!r} should have 3 elements, found {len(parts)}")

    match = MAJOR_REGEX.fullmatch(parts[0])
    if not match:
        raise MalformedTagError(f"tag {tag!r} should start with 'v' followed by the major version")

    for part in parts[1:]:
        if not NUMBER_REGEX.fullmatch(part):
            raise MalformedTagError(f"tag {tag!r} has a non-numeric element {part!r}")

    return semver.Version(int(match.group(1)), int(parts[1]), int(parts[2]))


def bump(version: semver.Version, mode: BumpMode) -> semver.Version:
    if mode is BumpMode.MAJOR:
        return version.bump_major()
    if mode is BumpMode.MINOR:
        return version.bump_minor()
    if mode is BumpMode.PATCH:
        return version.bump_patch()
    return version


def format_tag(version: semver.Version) -> str:
    return f"v{version.major}.{version.minor}.{version.patch}"
