"""
Top-level run: bootstrap the repository, then generate the pattern.
"""
import random
import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from greenwall.bootstrap import RepositoryBootstrapper
from greenwall.contribution import ContributionWriter
from greenwall.git_runner import GitRunner
from greenwall.pattern import PatternGenerator
from greenwall.results import StepResult, PatternSummary
from greenwall.session import SessionConfig


logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """Outcome of one full run."""
    setup: StepResult
    summary: Optional[PatternSummary] = None

    @property
    def success(self) -> bool:
        if not self.setup.success or self.summary is None:
            return False
        # Fail-open: only a run where every attempted commit failed counts as failed
        return not (self.summary.commits_attempted and self.summary.commits_succeeded == 0)

    @property
    def exit_code(self) -> int:
        return 0 if self.success else 1


def create_contribution_pattern(
    session: SessionConfig,
    start: Optional[date] = None,
    end: Optional[date] = None,
    git: Optional[GitRunner] = None,
    rng: Optional[random.Random] = None
) -> RunResult:
    """
    Bootstrap a fresh repository and fill it with backdated commits.

    Args:
        session: Session configuration
        start: First day (default: one year before end)
        end: Last day (default: today)
        git: Git runner shared by bootstrap and writer (default: one for project_dir)
        rng: Random source (default: seeded from session.seed)

    Returns:
        RunResult; summary is None when bootstrap failed
    """
    git = git or GitRunner(session.project_dir)

    setup = RepositoryBootstrapper(session, git=git).setup_repo()
    if not setup.success:
        logger.error(f"Failed to set up repository ({setup.error_kind.value}): {setup.error_summary}")
        return RunResult(setup=setup)

    writer = ContributionWriter(session, git=git)
    generator = PatternGenerator(session, writer=writer, rng=rng)
    summary = generator.generate(start=start, end=end)

    return RunResult(setup=setup, summary=summary)


def print_summary(session: SessionConfig, result: RunResult):
    """Print the run summary and the manual publishing steps."""
    summary = result.summary
    if summary is None:
        print("❌ Repository setup failed; no contributions were made")
        return

    print(f"✓ Days visited: {summary.days_visited}")
    print(f"✓ Active days: {summary.active_days}")
    print(f"✓ Commits: {summary.commits_succeeded}/{summary.commits_attempted}")

    if not result.success:
        print("\n❌ No contributions could be committed")
        return

    print("\n✅ Contribution pattern created successfully!")
    print("\nNext steps:")
    print("1. Create a new repository on GitHub")
    print(f"2. Run these commands in the {session.project_dir.name} directory:")
    print("   git remote add origin <your-repo-url>")
    print("   git branch -M main")
    print("   git push -u origin main")
