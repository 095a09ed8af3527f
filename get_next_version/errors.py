"""Error types raised while resolving release tags."""


class TagResolverError(Exception):
    """Base error, carries a short machine-readable ``kind`` and a message."""

    kind = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class RepoNotFoundError(TagResolverError):
    kind = "repo-not-found"


class NoTagFoundError(TagResolverError):
    kind = "no-tag-found"


class MalformedTagError(TagResolverError):
    kind = "malformed-tag"


class TagCollisionError(TagResolverError):
    kind = "tag-collision"


class ArgumentConflictError(TagResolverError):
    kind = "argument-conflict"


class UnknownArgumentError(TagResolverError):
    kind = "unknown-argument"


class GitCommandError(TagResolverError):
    kind = "git-failed"
