"""
Git invocation for greenwall.

All git commands run with an explicit working directory; nothing here relies
on the process current directory.
"""
import os
import logging
import subprocess
from pathlib import Path
from datetime import datetime
from typing import List, Optional, Dict


logger = logging.getLogger(__name__)

GIT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class GitToolError(Exception):
    """Raised when git is missing or exits non-zero."""

    def __init__(self, message: str, command: Optional[List[str]] = None, stderr: str = ""):
        super().__init__(message)
        self.command = command or []
        self.stderr = stderr


def format_git_date(timestamp: datetime) -> str:
    """Format a timestamp the way --date and GIT_COMMITTER_DATE accept it."""
    return timestamp.strftime(GIT_DATE_FORMAT)


class GitRunner:
    """Runs git commands inside one repository directory."""

    def __init__(self, repo_dir: Path, git_executable: str = "git"):
        """
        Initialize git runner.

        Args:
            repo_dir: Repository working directory every command runs in
            git_executable: git binary name or path
        """
        self.repo_dir = repo_dir
        self.git_executable = git_executable

    def run(self, args: List[str], env: Optional[Dict[str, str]] = None) -> subprocess.CompletedProcess:
        """
        Run one git command and wait for it.

        Args:
            args: Arguments after the git executable
            env: Extra environment variables for this invocation

        Returns:
            CompletedProcess result

        Raises:
            GitToolError: If git can't be started or exits non-zero
        """
        command = [self.git_executable, *args]
        full_env = None
        if env:
            full_env = {**os.environ, **env}

        logger.debug(f"Running {' '.join(command)} in {self.repo_dir}")

        try:
            result = subprocess.run(
                command,
                cwd=self.repo_dir,
                env=full_env,
                capture_output=True,
                text=True
            )
        except FileNotFoundError as e:
            if not Path(self.repo_dir).is_dir():
                raise GitToolError(f"Repository directory does not exist: {self.repo_dir}", command) from e
            raise GitToolError(f"git executable not found: {self.git_executable}", command) from e
        except NotADirectoryError as e:
            raise GitToolError(f"Repository directory is not usable: {self.repo_dir}", command) from e

        if result.returncode != 0:
            stderr = (result.stderr or result.stdout or "").strip()
            raise GitToolError(
                f"'{' '.join(command)}' exited {result.returncode}: {stderr}",
                command,
                stderr
            )

        return result

    def init(self):
        self.run(['init'])

    def set_identity(self, user_name: str, user_email: str):
        """Set repository-local author identity."""
        self.run(['config', 'user.name', user_name])
        self.run(['config', 'user.email', user_email])

    def add(self, path: str):
        self.run(['add', path])

    def commit(self, message: str, date: Optional[datetime] = None, allow_empty: bool = False):
        """
        Record a commit.

        Args:
            message: Commit message
            date: Backdate both author and committer dates to this timestamp
            allow_empty: Record the commit even when nothing changed
        """
        args = ['commit']
        env = None

        if allow_empty:
            args.append('--allow-empty')

        if date is not None:
            git_date = format_git_date(date)
            args.append(f'--date={git_date}')
            env = {'GIT_COMMITTER_DATE': git_date}

        args.extend(['-m', message])
        self.run(args, env=env)

    def commit_dates(self) -> List[datetime]:
        """Committer dates of every commit on HEAD, oldest first."""
        result = self.run(['log', '--reverse', '--format=%cd', '--date=format:%Y-%m-%d %H:%M:%S'])
        return [
            datetime.strptime(line, GIT_DATE_FORMAT)
            for line in result.stdout.splitlines()
            if line.strip()
        ]
