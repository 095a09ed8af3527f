import subprocess

import pytest

GIT_CONFIG = [
    "-c",
    "user.name=Release Bot",
    "-c",
    "user.email=release@example.com",
    "-c",
    "commit.gpgsign=false",
    "-c",
    "tag.gpgsign=false",
]


class GitRepo:
    def __init__(self, path):
        self.path = path

    def git(self, *args):
        return subprocess.run(
            ["git", *GIT_CONFIG, *args], cwd=self.path, check=True, capture_output=True, text=True
        ).stdout.strip()

    def commit(self, message="commit"):
        self.git("commit", "--allow-empty", "-m", message)

    def tag(self, name):
        self.git("tag", name)


@pytest.fixture
def git_repo(tmp_path):
    path = tmp_path / "repo"
    path.mkdir()
    repo = GitRepo(path)
    repo.git("init", "-q")
    return repo


@pytest.fixture
def tagged_repo(git_repo):
    git_repo.commit("initial")
    git_repo.tag("v1.2.3")
    return git_repo


@pytest.fixture
def plain_dir(tmp_path, monkeypatch):
    """A directory outside any git repository."""
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    path = tmp_path / "plain"
    path.mkdir()
    return path


@pytest.fixture
def failing_git(tmp_path):
    """A stand-in git executable that always fails with a fatal error."""
    script = tmp_path / "failing-git"
    script.write_text("#!/bin/sh\necho 'fatal: bad object HEAD' >&2\nexit 128\n")
    script.chmod(0o755)
    return str(script)
