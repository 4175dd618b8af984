"""Observable progress and status of an import run."""

import logging
from typing import Callable

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[float], None]
StatusCallback = Callable[[str], None]


class ProgressState:
    """
    Progress value in [0, 1] plus a human-readable status line.

    Progress never decreases within a run. Subscribers are called with the
    new value after every change.
    """

    def __init__(self):
        self._progress = 0.0
        self._status = ""
        self._progress_subscribers: list[ProgressCallback] = []
        self._status_subscribers: list[StatusCallback] = []

    def subscribe_progress(self, callback: ProgressCallback):
        self._progress_subscribers.append(callback)

    def subscribe_status(self, callback: StatusCallback):
        self._status_subscribers.append(callback)

    @property
    def progress(self) -> float:
        return self._progress

    @progress.setter
    def progress(self, value: float):
        value = min(max(value, 0.0), 1.0)
        if value <= self._progress:
            return
        self._progress = value
        for callback in self._progress_subscribers:
            callback(value)

    @property
    def status(self) -> str:
        return self._status

    @status.setter
    def status(self, value: str):
        self._status = value
        logger.info(value)
        for callback in self._status_subscribers:
            callback(value)

    def reset(self):
        """Start over at zero for a new run. Subscribers are not notified."""
        self._progress = 0.0
        self._status = ""
