"""
Step results for bootstrap and contribution operations.

Every operation that touches the filesystem or invokes git reports back
through a StepResult instead of raising, so the caller can tell a failed
write from a failed git invocation without parsing log text.
"""
from enum import Enum
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional, List


class ErrorKind(str, Enum):
    """Failure categories for a single step."""
    FILESYSTEM = "filesystem"   # mkdir, rmtree, file write
    TOOL = "tool"               # git missing or non-zero exit
    PARSE = "parse"             # unparsable user input


@dataclass
class StepResult:
    """Result of one bootstrap or contribution step."""
    success: bool

    # Failure fields
    error_kind: Optional[ErrorKind] = None
    error_summary: Optional[str] = None

    # Common fields
    path: Optional[Path] = None
    timestamp: Optional[datetime] = None

    @classmethod
    def ok(cls, path: Optional[Path] = None, timestamp: Optional[datetime] = None) -> 'StepResult':
        return cls(success=True, path=path, timestamp=timestamp)

    @classmethod
    def failed(
        cls,
        error_kind: ErrorKind,
        error_summary: str,
        path: Optional[Path] = None,
        timestamp: Optional[datetime] = None
    ) -> 'StepResult':
        return cls(
            success=False,
            error_kind=error_kind,
            error_summary=error_summary,
            path=path,
            timestamp=timestamp
        )


@dataclass
class PatternSummary:
    """Aggregate outcome of one pattern generation run."""
    days_visited: int = 0
    active_days: int = 0
    commits_attempted: int = 0
    commits_succeeded: int = 0
    failures: List[StepResult] = field(default_factory=list)

    @property
    def commits_failed(self) -> int:
        return self.commits_attempted - self.commits_succeeded

    def record(self, result: StepResult):
        """Count one contribution attempt."""
        self.commits_attempted += 1
        if result.success:
            self.commits_succeeded += 1
        else:
            self.failures.append(result)
