"""
Contribution writer: one entry file and one backdated commit per call.
"""
import logging
from datetime import date, datetime
from typing import Optional

from greenwall.git_runner import GitRunner, GitToolError, format_git_date
from greenwall.results import StepResult, ErrorKind
from greenwall.session import SessionConfig, DATA_DIRNAME


logger = logging.getLogger(__name__)

COMMIT_MESSAGE = "Update project documentation and features"


def entry_filename(day: date) -> str:
    """Relative path of the entry file for a day, e.g. data/entry_20240315.txt."""
    return f"{DATA_DIRNAME}/entry_{day.strftime('%Y%m%d')}.txt"


def entry_content(day: date) -> str:
    """Placeholder entry text for a day."""
    return (
        f"Project update for {day.isoformat()}\n"
        "- Added new feature implementation details\n"
        "- Updated documentation\n"
        "- Fixed reported issues\n"
    )


class ContributionWriter:
    """
    Writes entry files and records backdated commits in one repository.

    Commits on a day that already has an entry rewrite the same file with the
    same content; those commits are recorded empty.
    """

    def __init__(self, session: SessionConfig, git: Optional[GitRunner] = None):
        self.project_dir = session.project_dir
        self.data_dir = session.data_dir
        self.git = git or GitRunner(self.project_dir)

    def make_contribution(self, timestamp: datetime) -> StepResult:
        """
        Write the entry for timestamp's day and commit it dated at timestamp.

        Args:
            timestamp: Author and committer date for the commit

        Returns:
            StepResult; error_kind is FILESYSTEM if the write failed and TOOL
            if staging or committing failed
        """
        relative_path = entry_filename(timestamp.date())
        full_path = self.project_dir / relative_path

        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            full_path.write_text(entry_content(timestamp.date()), encoding='utf-8')
        except OSError as e:
            logger.error(f"Error making contribution for {format_git_date(timestamp)}: {e}")
            return StepResult.failed(ErrorKind.FILESYSTEM, str(e), path=full_path, timestamp=timestamp)

        try:
            self.git.add(relative_path)
            self.git.commit(COMMIT_MESSAGE, date=timestamp, allow_empty=True)
        except GitToolError as e:
            logger.error(f"Error making contribution for {format_git_date(timestamp)}: {e}")
            return StepResult.failed(ErrorKind.TOOL, str(e), path=full_path, timestamp=timestamp)

        logger.debug(f"Committed {relative_path} at {format_git_date(timestamp)}")
        return StepResult.ok(path=full_path, timestamp=timestamp)
