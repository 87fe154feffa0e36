"""Workers pour exécuter les lectures réseau en arrière-plan (QThread) sans bloquer l'UI."""

from __future__ import annotations

import logging
from typing import Any, Callable

from PySide6.QtCore import QObject, QThread, Signal

logger = logging.getLogger(__name__)


class FetchJob(QObject):
    """
    Exécute un callable dans un thread séparé.
    Émet succeeded(result) ou failed(exception), puis finished ; les signaux
    arrivent dans le thread de l'objet (thread UI).
    """

    succeeded = Signal(object)
    failed = Signal(object)
    finished = Signal()

    def __init__(self, fetch: Callable[[], Any], parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._fetch = fetch
        self._thread: QThread | None = None
        self._worker_obj: _FetchWorker | None = None

    def run_async(self) -> None:
        """Lance l'exécution dans un thread dédié."""
        self._thread = QThread()
        self._worker_obj = _FetchWorker(self._fetch)
        self._worker_obj.moveToThread(self._thread)
        self._thread.started.connect(self._worker_obj.run)
        self._worker_obj.succeeded.connect(self._on_succeeded)
        self._worker_obj.failed.connect(self._on_failed)
        self._thread.start()

    def _on_succeeded(self, result: Any) -> None:
        self.succeeded.emit(result)
        self._finish()

    def _on_failed(self, exc: Exception) -> None:
        self.failed.emit(exc)
        self._finish()

    def _finish(self) -> None:
        if self._thread and self._thread.isRunning():
            self._thread.quit()
            if not self._thread.wait(3000):
                logger.warning("Fetch thread did not finish within 3s")
        self.finished.emit()


class _FetchWorker(QObject):
    """Objet qui exécute le fetch dans son thread (connecté via moveToThread)."""

    succeeded = Signal(object)
    failed = Signal(object)

    def __init__(self, fetch: Callable[[], Any]):
        super().__init__()
        self.fetch = fetch

    def run(self) -> None:
        try:
            result = self.fetch()
        except Exception as e:
            logger.debug("Fetch failed in worker thread: %s", e)
            self.failed.emit(e)
            return
        self.succeeded.emit(result)


class QtFetchRunner:
    """Runner de fetch pour le contrôleur : un `FetchJob` par appel, callbacks dans le thread UI."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent
        self._jobs: set[FetchJob] = set()

    @property
    def active_jobs(self) -> int:
        return len(self._jobs)

    def __call__(
        self,
        fetch: Callable[[], Any],
        on_success: Callable[[Any], None],
        on_error: Callable[[Exception], None],
    ) -> None:
        job = FetchJob(fetch, parent=self._parent)
        job.succeeded.connect(on_success)
        job.failed.connect(on_error)
        job.finished.connect(lambda: self._jobs.discard(job))
        # Garder une référence tant que le thread tourne.
        self._jobs.add(job)
        job.run_async()
