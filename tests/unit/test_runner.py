"""
Unit tests for the top-level run.
"""
import pytest
from datetime import date, timedelta

from greenwall.git_runner import GitRunner
from greenwall.results import StepResult, PatternSummary, ErrorKind
from greenwall.runner import RunResult, create_contribution_pattern, print_summary
from greenwall.session import SessionConfig
from conftest import RecordingGitRunner, requires_git


class TestRunResult:
    """Test run success rules."""

    def test_failed_setup(self):
        result = RunResult(setup=StepResult.failed(ErrorKind.TOOL, "no git"))
        assert not result.success
        assert result.exit_code == 1

    def test_partial_commit_failures_still_succeed(self):
        summary = PatternSummary(commits_attempted=4, commits_succeeded=3)
        assert RunResult(setup=StepResult.ok(), summary=summary).success

    def test_all_commits_failed(self):
        summary = PatternSummary(commits_attempted=4, commits_succeeded=0)
        assert RunResult(setup=StepResult.ok(), summary=summary).exit_code == 1

    def test_no_commits_attempted_succeeds(self):
        """Intensity 0 produces no commits and is still a successful run."""
        assert RunResult(setup=StepResult.ok(), summary=PatternSummary()).success


class TestCreateContributionPattern:
    """Test bootstrap then generate sequencing."""

    def test_bootstrap_failure_skips_generation(self, session, project_dir):
        git = RecordingGitRunner(project_dir, fail_on='init')

        result = create_contribution_pattern(session, git=git)

        assert not result.success
        assert result.summary is None
        assert result.setup.error_kind == ErrorKind.TOOL
        assert git.calls == [['init']]

    def test_shared_runner(self, session, recording_git):
        """Bootstrap and contributions go through the same runner."""
        today = date(2024, 6, 10)
        result = create_contribution_pattern(session, start=today, end=today, git=recording_git)

        assert result.success
        commits = [c for c in recording_git.calls if c[0] == 'commit']
        assert len(commits) == 1 + result.summary.commits_succeeded


@requires_git
class TestEndToEnd:
    """Full run against a real git binary."""

    def test_three_days_full_intensity(self, session):
        """Three active days give 3-15 dated commits plus the initial one."""
        end = date.today()
        start = end - timedelta(days=2)

        result = create_contribution_pattern(session, start=start, end=end)

        assert result.success
        assert result.summary.days_visited == 3
        assert result.summary.active_days == 3

        dates = GitRunner(session.project_dir).commit_dates()
        dated = dates[1:]
        assert 3 <= len(dated) <= 15
        assert len(dated) == result.summary.commits_succeeded

        days = [d.date() for d in dated]
        assert set(days) == {start, start + timedelta(days=1), end}
        assert days == sorted(days)
        for commit_date in dated:
            assert 9 <= commit_date.hour <= 16

        entries = sorted(p.name for p in (session.project_dir / "data").iterdir())
        assert entries == [f"entry_{d.strftime('%Y%m%d')}.txt" for d in sorted(set(days))]

    def test_zero_intensity_only_initial_commit(self, session, project_dir):
        quiet = SessionConfig(
            user_name=session.user_name,
            user_email=session.user_email,
            intensity=0.0,
            project_dir=project_dir
        )
        end = date.today()

        result = create_contribution_pattern(quiet, start=end - timedelta(days=30), end=end)

        assert result.success
        assert len(GitRunner(project_dir).commit_dates()) == 1
        assert not (project_dir / "data").exists()


class TestPrintSummary:
    """Test console output."""

    def test_next_steps_on_success(self, session, capsys):
        summary = PatternSummary(days_visited=3, active_days=2, commits_attempted=4, commits_succeeded=4)

        print_summary(session, RunResult(setup=StepResult.ok(), summary=summary))

        out = capsys.readouterr().out
        assert "Contribution pattern created successfully!" in out
        assert "git remote add origin <your-repo-url>" in out
        assert "git branch -M main" in out
        assert "git push -u origin main" in out
        assert "contribution_project directory" in out
        assert "Commits: 4/4" in out

    def test_setup_failure_message(self, session, capsys):
        print_summary(session, RunResult(setup=StepResult.failed(ErrorKind.FILESYSTEM, "denied")))

        out = capsys.readouterr().out
        assert "setup failed" in out
        assert "Next steps" not in out
