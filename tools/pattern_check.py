#!/usr/bin/env python3
"""
greenwall Pattern Check - verifies a generated contribution history

Reads the commit log of a generated repository and checks that the
backdated commits have the shape greenwall produces:

- the first commit is the initial README commit
- every later commit falls between 09:00 and 16:59
- no day carries more than 5 backdated commits
- commit dates never go backwards
- every dated commit has the entry file for its day

Usage:
    python3 tools/pattern_check.py [repo_dir]

Exit codes:
    0 - History matches the expected pattern
    1 - One or more checks failed
"""
import sys
from collections import Counter
from datetime import date, datetime
from pathlib import Path
from typing import List

from greenwall.contribution import entry_filename
from greenwall.git_runner import GitRunner, GitToolError
from greenwall.pattern import FIRST_HOUR, LAST_HOUR, MAX_COMMITS_PER_DAY
from greenwall.session import DEFAULT_PROJECT_DIRNAME


class PatternChecker:
    """Validates a generated repository's history."""

    def __init__(self, repo_dir: Path):
        self.repo_dir = repo_dir
        self.git = GitRunner(repo_dir)
        self.failures: List[str] = []
        self.dated_commits: List[datetime] = []

    def fail(self, message: str):
        """Record a validation failure."""
        self.failures.append(message)
        print(f"FAIL: {message}")

    def load_history(self) -> bool:
        """Read commit dates; the first commit is the bootstrap commit."""
        try:
            dates = self.git.commit_dates()
        except GitToolError as e:
            self.fail(f"Could not read history: {e}")
            return False

        if not dates:
            self.fail("Repository has no commits")
            return False

        self.dated_commits = dates[1:]
        return True

    def check_hours(self):
        print("\n=== Checking Commit Hours ===")
        for commit_date in self.dated_commits:
            if not FIRST_HOUR <= commit_date.hour <= LAST_HOUR:
                self.fail(f"Commit at {commit_date} is outside {FIRST_HOUR:02d}:00-{LAST_HOUR:02d}:59")

        if not self.failures:
            print(f"✓ {len(self.dated_commits)} commits within working hours")

    def check_daily_counts(self) -> Counter:
        print("\n=== Checking Commits Per Day ===")
        per_day = Counter(commit_date.date() for commit_date in self.dated_commits)
        for day, count in sorted(per_day.items()):
            if count > MAX_COMMITS_PER_DAY:
                self.fail(f"{day} has {count} commits (max {MAX_COMMITS_PER_DAY})")

        print(f"✓ {len(per_day)} active days")
        return per_day

    def check_ordering(self):
        print("\n=== Checking Day Ordering ===")
        previous_day = None
        for commit_date in self.dated_commits:
            if previous_day is not None and commit_date.date() < previous_day:
                self.fail(f"Commit on {commit_date.date()} follows a commit on {previous_day}")
            previous_day = commit_date.date()

    def check_entry_files(self, days: List[date]):
        print("\n=== Checking Entry Files ===")
        for day in days:
            if not (self.repo_dir / entry_filename(day)).exists():
                self.fail(f"Missing entry file {entry_filename(day)}")

    def run_all_checks(self) -> bool:
        """Run all pattern checks."""
        print("greenwall Pattern Check")
        print("=" * 60)

        if not self.load_history():
            return False

        self.check_hours()
        per_day = self.check_daily_counts()
        self.check_ordering()
        self.check_entry_files(sorted(per_day))

        print("\n" + "=" * 60)

        if self.failures:
            print(f"\n❌ FAILED: {len(self.failures)} check(s) failed")
            return False

        print("\n✅ SUCCESS: History matches the contribution pattern")
        return True


def main():
    """Main entry point."""
    repo_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else Path.cwd() / DEFAULT_PROJECT_DIRNAME

    checker = PatternChecker(repo_dir)
    success = checker.run_all_checks()

    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
