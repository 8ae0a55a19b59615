# chatificial/core/aggregator.py

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Protocol, Sequence

from chatificial.config import MSG_COULD_NOT_READ_FILE_CONTENT
from chatificial.core import template_engine
from chatificial.core.errors import OperationCancelled
from chatificial.core.file_resolver import EligibleFile
from chatificial.core.project_index import ProjectIndex
from chatificial.utils.logger import logger

BLOCK_SEPARATOR = "\n\n"


class CancelEventLike(Protocol):
    """Duck-typed cancel event (e.g., threading.Event)."""
    def is_set(self) -> bool: ...


def read_file_as_utf8(path) -> Optional[str]:
    try:
        with open(path, "rb") as f:
            return f.read().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read {path}: {e}")
        return None


def _check_cancelled(cancel_event: Optional[CancelEventLike]) -> None:
    if cancel_event is not None and cancel_event.is_set():
        logger.info("Aggregation cancelled.")
        raise OperationCancelled("aggregation cancelled")


class Aggregator:
    def __init__(self, project: ProjectIndex, max_workers: Optional[int] = None):
        self.project = project
        self.max_workers = max_workers

    def display_path(self, file: EligibleFile) -> str:
        return self.project.relative_path(file.path) or file.key

    def format_one_file(self, file: EligibleFile, content: Optional[str], template: str) -> str:
        if content is None:
            content = MSG_COULD_NOT_READ_FILE_CONTENT
        return template_engine.apply(template, self.display_path(file), content)

    def aggregate(
        self,
        files: Sequence[EligibleFile],
        template: str,
        cancel_event: Optional[CancelEventLike] = None,
    ) -> Optional[str]:
        """
        Read every file, render it through ``template`` and join the blocks
        with a blank line, in list order. Returns None for an empty list.
        Raises OperationCancelled when ``cancel_event`` gets set.
        """
        if not files:
            return None

        _check_cancelled(cancel_event)
        with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="chatificial-read") as pool:
            contents: List[Optional[str]] = list(pool.map(read_file_as_utf8, [f.path for f in files]))
        _check_cancelled(cancel_event)

        blocks = [self.format_one_file(f, c, template) for f, c in zip(files, contents)]
        output = BLOCK_SEPARATOR.join(blocks)
        logger.info(f"Aggregated {len(files)} file(s) into {len(output)} characters")
        return output
