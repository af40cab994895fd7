"""
Repository bootstrap for greenwall.

Creates a fresh repository in the session's project directory. Any previous
contents of that directory are removed first.
"""
import shutil
import logging
from typing import Optional

from greenwall.git_runner import GitRunner, GitToolError
from greenwall.results import StepResult, ErrorKind
from greenwall.session import SessionConfig


logger = logging.getLogger(__name__)

README_NAME = "README.md"
README_CONTENT = "# Contribution Project\nThis is a project to track various contributions and updates."
INITIAL_COMMIT_MESSAGE = "Initial commit"


class RepositoryBootstrapper:
    """
    Prepares a ready-to-commit repository.

    Steps:
    1. Remove the project directory if it exists, then recreate it
    2. git init
    3. Set user.name and user.email
    4. Write README.md and commit it

    No rollback: a failure part way leaves whatever was already created.
    """

    def __init__(self, session: SessionConfig, git: Optional[GitRunner] = None):
        self.session = session
        self.project_dir = session.project_dir
        self.git = git or GitRunner(self.project_dir)

    def setup_repo(self) -> StepResult:
        """Bootstrap the repository and report the outcome."""
        try:
            self._reset_directory()

            self.git.init()
            self.git.set_identity(self.session.user_name, self.session.user_email)

            readme_path = self.project_dir / README_NAME
            readme_path.write_text(README_CONTENT, encoding='utf-8')

            self.git.add(README_NAME)
            self.git.commit(INITIAL_COMMIT_MESSAGE)

        except GitToolError as e:
            logger.error(f"Error setting up repository: {e}")
            return StepResult.failed(ErrorKind.TOOL, str(e), path=self.project_dir)

        except OSError as e:
            logger.error(f"Error setting up repository: {e}")
            return StepResult.failed(ErrorKind.FILESYSTEM, str(e), path=self.project_dir)

        logger.info(f"Initialized repository at {self.project_dir}")
        return StepResult.ok(path=self.project_dir)

    def _reset_directory(self):
        """Replace the project directory with an empty one."""
        if self.project_dir.exists():
            logger.info(f"Removing existing directory {self.project_dir}")
            if self.project_dir.is_dir() and not self.project_dir.is_symlink():
                shutil.rmtree(self.project_dir)
            else:
                self.project_dir.unlink()

        self.project_dir.mkdir(parents=True)
