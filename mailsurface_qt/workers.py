import logging
import traceback

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

logger = logging.getLogger(__name__)


class WorkerSignals(QObject):
    result = Signal(object)
    error = Signal(str)
    finished = Signal()


class Worker(QRunnable):
    """Runs one background job (attachment fetch plus cid inlining) on the pool.

    Signals are delivered on the receiver's thread, so callbacks connected from
    the UI run back on the UI thread.
    """

    def __init__(self, fn, label="job"):
        super().__init__()
        self.fn = fn
        self.label = label
        self.signals = WorkerSignals()

    @Slot()
    def run(self):
        try:
            payload = self.fn()
        except Exception:
            trace_text = traceback.format_exc()
            logger.debug("Worker %s raised", self.label)
            self.signals.error.emit(trace_text)
        else:
            self.signals.result.emit(payload)
        finally:
            self.signals.finished.emit()
