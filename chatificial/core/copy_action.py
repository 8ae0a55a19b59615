# chatificial/core/copy_action.py

from __future__ import annotations

import os
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Optional, Sequence

from chatificial.core import template_engine
from chatificial.core.aggregator import Aggregator, CancelEventLike
from chatificial.core.delivery import DeliveryPolicy, Outcome
from chatificial.core.errors import OperationCancelled
from chatificial.core.file_resolver import FileSelectionResolver
from chatificial.core.project_index import ProjectIndex
from chatificial.core.settings_manager import Settings, SettingsManager
from chatificial.utils.file_types import FileTypeClassifier
from chatificial.utils.logger import logger


class CopyFileContentAction:
    """
    Copy the content of the selected files and folders.

    Work happens in two phases: collect() resolves and aggregates the
    selection and is safe to run on a worker thread; finish() performs the
    delivery side effects and must run on the thread that owns them.
    perform() chains both. Once dispose() is called, pending and future
    invocations end silently without delivering anything.
    """

    def __init__(
        self,
        project: ProjectIndex,
        settings: SettingsManager,
        delivery: DeliveryPolicy,
        *,
        classifier: Optional[FileTypeClassifier] = None,
        executor: Optional[Executor] = None,
    ):
        self.project = project
        self.settings = settings
        self.delivery = delivery
        self.resolver = FileSelectionResolver(project, classifier)
        self.aggregator = Aggregator(project)
        self._executor = executor
        self._owns_executor = executor is None
        self._disposed = threading.Event()

    @property
    def is_disposed(self) -> bool:
        return self._disposed.is_set()

    def dispose(self) -> None:
        self._disposed.set()
        if self._owns_executor and self._executor is not None:
            self._executor.shutdown(wait=False)

    def _get_executor(self) -> Executor:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="chatificial-action")
        return self._executor

    def collect(
        self,
        roots: Sequence[str | os.PathLike],
        settings: Settings,
        cancel_event: Optional[CancelEventLike] = None,
    ) -> Optional[str]:
        """Resolve ``roots`` and aggregate them; None when nothing is eligible."""
        cancel_event = cancel_event or self._disposed
        if cancel_event.is_set():
            raise OperationCancelled("action disposed")
        files = self.resolver.resolve(roots)
        if not files:
            return None
        template = template_engine.validate(settings.file_template)
        return self.aggregator.aggregate(files, template, cancel_event)

    def submit(self, roots: Sequence[str | os.PathLike], settings: Optional[Settings] = None) -> "Future[Optional[str]]":
        if self.is_disposed:
            raise OperationCancelled("action disposed")
        snapshot = (settings or self.settings.get()).normalized()
        try:
            return self._get_executor().submit(self.collect, list(roots), snapshot)
        except RuntimeError as e:
            # executor shut down by a concurrent dispose()
            if self.is_disposed:
                raise OperationCancelled("action disposed") from e
            raise

    def finish(self, output: Optional[str], settings: Settings) -> Optional[Outcome]:
        if self.is_disposed:
            logger.info("Action disposed before delivery; dropping result.")
            return None
        return self.delivery.deliver(output, max(1, settings.max_total_chars))

    def perform(self, roots: Sequence[str | os.PathLike], settings: Optional[Settings] = None) -> Optional[Outcome]:
        """Run one invocation end to end; None when there is no selection or the action was disposed."""
        if not roots or self.is_disposed:
            return None
        snapshot = (settings or self.settings.get()).normalized()
        try:
            output = self.submit(roots, snapshot).result()
        except OperationCancelled:
            logger.info("Copy cancelled; nothing delivered.")
            return None
        return self.finish(output, snapshot)
