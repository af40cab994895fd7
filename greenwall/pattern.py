"""
Contribution pattern generation.

Walks a date range one calendar day at a time. Each day independently:

1. Draw r uniformly in [0, 1); skip the day when r >= intensity
2. Otherwise draw a commit count uniformly in [1, 5]
3. For each commit draw an hour in [9, 16] and a minute in [0, 59]

Same-day timestamps keep draw order; they are not sorted.
"""
import random
import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Iterator, List, Optional, Tuple

from greenwall.contribution import ContributionWriter, entry_filename
from greenwall.results import PatternSummary
from greenwall.session import SessionConfig


logger = logging.getLogger(__name__)

MIN_COMMITS_PER_DAY = 1
MAX_COMMITS_PER_DAY = 5
FIRST_HOUR = 9
LAST_HOUR = 16


@dataclass
class ContributionEvent:
    """One planned backdated commit."""
    timestamp: datetime
    path: str


def default_window(today: Optional[date] = None) -> Tuple[date, date]:
    """
    One-year window ending today, both ends inclusive.

    On Feb 29 the start rolls over to Mar 1 of the previous year.
    """
    if today is None:
        today = date.today()

    try:
        start = today.replace(year=today.year - 1)
    except ValueError:
        start = date(today.year - 1, 3, 1)

    return start, today


def iter_days(start: date, end: date) -> Iterator[date]:
    """Every calendar day from start to end inclusive, ascending."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


class PatternGenerator:
    """Decides how many commits each day gets and writes them."""

    def __init__(
        self,
        session: SessionConfig,
        writer: Optional[ContributionWriter] = None,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize pattern generator.

        Args:
            session: Session configuration (intensity, seed, project_dir)
            writer: Contribution writer (default: one for session.project_dir)
            rng: Random source (default: seeded from session.seed)
        """
        self.intensity = session.intensity
        self.writer = writer or ContributionWriter(session)
        self.rng = rng or random.Random(session.seed)

    def plan_day(self, day: date) -> List[datetime]:
        """Commit timestamps for one day; empty when the day is skipped."""
        if self.rng.random() >= self.intensity:
            return []

        count = self.rng.randint(MIN_COMMITS_PER_DAY, MAX_COMMITS_PER_DAY)

        timestamps = []
        for _ in range(count):
            hour = self.rng.randint(FIRST_HOUR, LAST_HOUR)
            minute = self.rng.randint(0, 59)
            timestamps.append(datetime.combine(day, time(hour, minute)))

        return timestamps

    def plan(self, start: date, end: date) -> Iterator[ContributionEvent]:
        """Planned events for a date range, without touching the repository."""
        for day in iter_days(start, end):
            for timestamp in self.plan_day(day):
                yield ContributionEvent(timestamp=timestamp, path=entry_filename(day))

    def generate(self, start: Optional[date] = None, end: Optional[date] = None) -> PatternSummary:
        """
        Plan and write every commit in the range.

        Commit failures are logged and counted; the walk always continues to
        the end date.

        Args:
            start: First day (default: one year before end)
            end: Last day (default: today)

        Returns:
            PatternSummary for the run
        """
        if start is None or end is None:
            default_start, default_end = default_window(end)
            start = start or default_start
            end = end or default_end

        logger.info(f"Generating contributions from {start} to {end} (intensity {self.intensity})")

        summary = PatternSummary()

        for day in iter_days(start, end):
            summary.days_visited += 1
            timestamps = self.plan_day(day)
            if not timestamps:
                continue

            summary.active_days += 1
            for timestamp in timestamps:
                summary.record(self.writer.make_contribution(timestamp))

        if summary.failures:
            logger.warning(f"{summary.commits_failed} of {summary.commits_attempted} contributions failed")

        return summary
