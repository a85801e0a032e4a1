from collections.abc import Callable
import logging
import traceback

from PySide6.QtCore import QThreadPool

from mailsurface_qt.workers import Worker

logger = logging.getLogger(__name__)


class WorkerManager:
    """Submits jobs to a thread pool and tracks how many are still out."""

    def __init__(
        self,
        thread_pool: QThreadPool,
        on_default_error: Callable[[str], None] | None = None,
    ) -> None:
        self.thread_pool = thread_pool
        self.on_default_error = on_default_error
        self._in_flight = 0

    @property
    def in_flight(self) -> int:
        return self._in_flight

    def submit(
        self,
        fn: Callable[[], object],
        on_result: Callable[[object], None],
        on_error: Callable[[str], None] | None = None,
    ) -> None:
        error_handler = on_error or self._report_error

        def _deliver(payload: object) -> None:
            try:
                on_result(payload)
            except Exception:
                error_handler(traceback.format_exc())

        worker = Worker(fn, label=getattr(fn, "__name__", "job"))
        worker.signals.result.connect(_deliver)
        worker.signals.error.connect(error_handler)
        worker.signals.finished.connect(self._on_finished)
        self._in_flight += 1
        self.thread_pool.start(worker)

    def _on_finished(self) -> None:
        self._in_flight = max(0, self._in_flight - 1)

    def _report_error(self, trace_text: str) -> None:
        logger.error("Background job failed:\n%s", trace_text)
        if self.on_default_error is not None:
            self.on_default_error(trace_text)


__all__ = ["WorkerManager"]
