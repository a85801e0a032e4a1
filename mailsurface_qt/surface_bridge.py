from PySide6.QtCore import QObject, Signal, Slot


class SurfaceBridge(QObject):
    """Object published on the web channel; the surface script posts into it."""

    message_received = Signal(str)

    @Slot(str)
    def postMessage(self, raw):
        self.message_received.emit(raw)


__all__ = ["SurfaceBridge"]
