from get_next_version.errors import (
    ArgumentConflictError,
    GitCommandError,
    MalformedTagError,
    NoTagFoundError,
    RepoNotFoundError,
    TagCollisionError,
    TagResolverError,
    UnknownArgumentError,
)
from get_next_version.git import ensure_tag_is_new, get_latest_tag, locate_repository_root
from get_next_version.resolver import Options, run
from get_next_version.versioning import BumpMode, bump, format_tag, parse_version

__all__ = [
    "ArgumentConflictError",
    "BumpMode",
    "GitCommandError",
    "MalformedTagError",
    "NoTagFoundError",
    "Options",
    "RepoNotFoundError",
    "TagCollisionError",
    "TagResolverError",
    "UnknownArgumentError",
    "bump",
    "ensure_tag_is_new",
    "format_tag",
    "get_latest_tag",
    "locate_repository_root",
    "parse_version",
    "run",
]
