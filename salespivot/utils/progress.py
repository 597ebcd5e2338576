"""Progress notification helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

logger = logging.getLogger(__name__)

ProgressSink = Callable[[int, str], None]


@dataclass(slots=True)
class ProgressInfo:
    percent: int
    message: str


class LoggingProgressSink:
    def __init__(self, level: int = logging.INFO) -> None:
        self.level = level

    def __call__(self, percent: int, message: str) -> None:
        logger.log(self.level, "[%3d%%] %s", percent, message)


class RecordingProgressSink:
    """Keeps every notification, for callers that render progress after the fact."""

    def __init__(self) -> None:
        self.events: list[ProgressInfo] = []

    def __call__(self, percent: int, message: str) -> None:
        self.events.append(ProgressInfo(percent=percent, message=message))


def notify(sink: ProgressSink | None, percent: int, message: str) -> None:
    """Send a checkpoint without letting the sink affect the run."""
    if sink is None:
        return
    try:
        sink(percent, message)
    except Exception as exc:
        logger.warning("Progress sink failed at %s%%: %s", percent, exc)
