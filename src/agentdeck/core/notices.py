"""
User-facing notices returned by operations that announce their outcome.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class NoticeLevel(StrEnum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Notice:
    """Short title + description pair, shown once to the user."""

    title: str
    description: str
    level: NoticeLevel = NoticeLevel.INFO

    @property
    def is_error(self) -> bool:
        return self.level is NoticeLevel.ERROR


def info(title: str, description: str) -> Notice:
    return Notice(title, description, NoticeLevel.INFO)


def warning(title: str, description: str) -> Notice:
    return Notice(title, description, NoticeLevel.WARNING)


def error(title: str, description: str) -> Notice:
    return Notice(title, description, NoticeLevel.ERROR)
