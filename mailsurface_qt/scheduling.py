from PySide6.QtCore import QTimer


class QtFrameScheduler:
    """Runs callbacks once on the next event-loop pass after a repaint request."""

    def __init__(self, widget=None):
        self._widget = widget

    def schedule_frame(self):
        if self._widget is not None:
            self._widget.update()

    def add_post_frame_callback(self, callback):
        QTimer.singleShot(0, callback)


__all__ = ["QtFrameScheduler"]
