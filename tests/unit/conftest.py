"""
Pytest configuration for unit tests.

Provides session fixtures, a recording git runner, and an isolated git
environment for tests that shell out to a real git binary.
"""
import shutil
import subprocess
import pytest

from greenwall.git_runner import GitRunner, GitToolError
from greenwall.session import SessionConfig


requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


class RecordingGitRunner(GitRunner):
    """GitRunner that records commands instead of running them."""

    def __init__(self, repo_dir, fail_on=None):
        super().__init__(repo_dir)
        self.calls = []
        self.envs = []
        self.fail_on = fail_on

    def run(self, args, env=None):
        self.calls.append(list(args))
        self.envs.append(env)
        if self.fail_on and args[0] == self.fail_on:
            raise GitToolError(f"git {args[0]} failed", ['git', *args], "simulated failure")
        return subprocess.CompletedProcess(['git', *args], 0, stdout='', stderr='')


@pytest.fixture(autouse=True)
def isolated_git_env(tmp_path_factory, monkeypatch):
    """Keep user and system git config out of the tests."""
    global_config = tmp_path_factory.mktemp("gitconfig") / "config"
    global_config.write_text("[init]\n\tdefaultBranch = main\n")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(global_config))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path_factory.getbasetemp()))


@pytest.fixture
def project_dir(tmp_path):
    return tmp_path / "contribution_project"


@pytest.fixture
def session(project_dir):
    """Session writing into a temporary project directory."""
    return SessionConfig(
        user_name="Test User",
        user_email="test@example.com",
        intensity=1.0,
        project_dir=project_dir,
        seed=1234
    )


@pytest.fixture
def recording_git(project_dir):
    return RecordingGitRunner(project_dir)
