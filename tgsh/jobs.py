"""Tracking of running jobs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional


class JobError(Exception):
    """Raised on invalid job operations."""


@dataclass
class JobInfo:
    """A child process and the command line that started it."""

    child: Any
    cmd: str


class Jobs:
    """Keeps track of background jobs and the foreground process."""

    def __init__(self) -> None:
        self._next_id = 0
        self._jobs: dict[int, JobInfo] = {}
        self._foreground: Optional[Any] = None

    def push(self, child: Any, cmd: str) -> int:
        """Track a new job and return its id."""
        self._next_id += 1
        self._jobs[self._next_id] = JobInfo(child, cmd)
        return self._next_id

    def __iter__(self) -> Iterator[tuple[int, JobInfo]]:
        return iter(list(self._jobs.items()))

    def __len__(self) -> int:
        return len(self._jobs)

    def retain(self, exit_handler: Callable[[int], None]) -> None:
        """Drop finished jobs, passing each exit status to exit_handler."""
        for job_id, info in list(self._jobs.items()):
            try:
                status = info.child.poll()
            except OSError:
                del self._jobs[job_id]
                continue
            if status is not None:
                exit_handler(status)
                del self._jobs[job_id]

    def set_foreground(self, child: Any) -> None:
        if self._foreground is not None:
            raise JobError("There is already a foreground process")
        self._foreground = child

    def wait_foreground(self) -> int:
        """Wait for the foreground process and return its exit status."""
        child, self._foreground = self._foreground, None
        if child is None:
            raise JobError("No running foreground process")
        try:
            return child.wait()
        except OSError as exc:
            raise JobError(repr(exc)) from exc