# chatificial/core/delivery.py

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Protocol, Union

from chatificial.config import (
    MSG_COPIED_TO_CLIPBOARD,
    MSG_NO_TEXT_FILES_FOUND,
    MSG_TOO_LARGE_SAVED_AND_OPENED,
    SCRATCH_FILE_NAME,
)
from chatificial.utils.logger import logger


class Clipboard(Protocol):
    def set_contents(self, text: str) -> None: ...


class ScratchBuffer(Protocol):
    def write(self, name: str, text: str) -> Path: ...
    def open(self, handle: Path) -> None: ...


class Notifier(Protocol):
    def notify(self, message: str) -> None: ...


@dataclass(frozen=True)
class NoFilesFound:
    pass


@dataclass(frozen=True)
class Copied:
    length: int


@dataclass(frozen=True)
class OverflowSavedAndOpened:
    length: int
    max_total_chars: int
    handle: Optional[Path] = field(default=None, compare=False)


Outcome = Union[NoFilesFound, Copied, OverflowSavedAndOpened]


class DeliveryPolicy:
    """
    Routes an aggregate to the clipboard when it fits under the limit and
    to the scratch file otherwise, then tells the user what happened.
    """

    def __init__(self, clipboard: Clipboard, scratch: ScratchBuffer, notifier: Notifier,
                 scratch_name: str = SCRATCH_FILE_NAME):
        self.clipboard = clipboard
        self.scratch = scratch
        self.notifier = notifier
        self.scratch_name = scratch_name

    def deliver(self, aggregate: Optional[str], max_total_chars: int) -> Outcome:
        if aggregate is None:
            self.notifier.notify(MSG_NO_TEXT_FILES_FOUND)
            return NoFilesFound()

        limit = max(1, max_total_chars)
        length = len(aggregate)

        if length > limit:
            # ScratchBufferError propagates: there is no safe fallback for oversized content
            handle = self.scratch.write(self.scratch_name, aggregate)
            self.scratch.open(handle)
            logger.info(f"Output of {length} chars exceeds {limit}; saved to {handle}")
            self.notifier.notify(MSG_TOO_LARGE_SAVED_AND_OPENED.format(length, limit))
            return OverflowSavedAndOpened(length, limit, handle)

        self.clipboard.set_contents(aggregate)
        logger.info(f"Copied {length} chars to clipboard")
        self.notifier.notify(MSG_COPIED_TO_CLIPBOARD.format(length))
        return Copied(length)
