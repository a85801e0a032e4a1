import math

from PySide6.QtCore import QThreadPool, Qt, Signal
from PySide6.QtWidgets import QFrame, QLabel, QPlainTextEdit, QScrollArea, QVBoxLayout, QWidget

from mailsurface.infra.config_store import Config
from mailsurface.render import FallbackView, SandboxedRenderer, create_mail_renderer
from mailsurface.surface.runtime import detect_surface_runtime
from mailsurface_qt.constants import (
    CONTENT_LAYOUT_MARGINS,
    CONTENT_LAYOUT_SPACING,
    EMPTY_SURFACE_HTML,
    FALLBACK_TEXT_STYLE,
    SURFACE_CONTAINER_MARGINS,
)
from mailsurface_qt.helpers.worker_manager import WorkerManager
from mailsurface_qt.scheduling import QtFrameScheduler
from mailsurface_qt.scroll_surface import ScrollAreaSurface


class MailContentWidget(QWidget):
    """Mail detail body: an isolated surface inside a host scroll area.

    Also acts as the surface host for `SandboxedRenderer` (`mount`, `send`,
    `set_listener`). Falls back to a read-only text view when Qt WebEngine is
    unavailable or the config asks for it.
    """

    height_changed = Signal(float)

    def __init__(
        self,
        fetch_attachment,
        config=None,
        runtime_info=None,
        registry=None,
        thread_pool=None,
        parent=None,
    ):
        super().__init__(parent)
        self.config = config or Config()
        self.settings = self.config.surface_settings()
        self.surface_view = None
        self._listener = None
        self._build_ui()

        self.workers = WorkerManager(thread_pool or QThreadPool.globalInstance())
        self.scheduler = QtFrameScheduler(self.scroll_area.viewport())
        self.scroll_surface = ScrollAreaSurface(self.scroll_area)

        runtime = runtime_info or detect_surface_runtime()
        self.renderer = create_mail_renderer(
            runtime,
            lambda: self._build_sandboxed_renderer(fetch_attachment, registry),
            mode=self.settings.renderer_mode,
            default_height=self.settings.default_height,
        )
        self.renderer.initialize()
        self._apply_surface_height(self.renderer.current_height)
        self._show_surface(self.is_sandboxed)

    @property
    def is_sandboxed(self) -> bool:
        return isinstance(self.renderer, SandboxedRenderer)

    def _build_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.scroll_area = QScrollArea()
        self.scroll_area.setObjectName("mailContentScroll")
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.scroll_area.setFrameShape(QFrame.NoFrame)

        content = QWidget()
        content_layout = QVBoxLayout(content)
        content_layout.setContentsMargins(*CONTENT_LAYOUT_MARGINS)
        content_layout.setSpacing(CONTENT_LAYOUT_SPACING)

        self.message_header = QLabel("Select a message")
        self.message_header.setObjectName("messageHeader")
        self.message_header.setWordWrap(True)
        content_layout.addWidget(self.message_header)

        self.surface_frame = QWidget()
        self.surface_frame.setObjectName("surfaceFrame")
        self.surface_layout = QVBoxLayout(self.surface_frame)
        self.surface_layout.setContentsMargins(*SURFACE_CONTAINER_MARGINS)
        self.surface_layout.setSpacing(0)
        content_layout.addWidget(self.surface_frame)

        self.fallback_view = QPlainTextEdit()
        self.fallback_view.setObjectName("fallbackText")
        self.fallback_view.setReadOnly(True)
        self.fallback_view.setTextInteractionFlags(Qt.TextSelectableByMouse | Qt.TextSelectableByKeyboard)
        self.fallback_view.setStyleSheet(FALLBACK_TEXT_STYLE)
        content_layout.addWidget(self.fallback_view)
        content_layout.addStretch(1)

        self.scroll_area.setWidget(content)
        layout.addWidget(self.scroll_area)

    def _build_sandboxed_renderer(self, fetch_attachment, registry):
        # Imported here so hosts without Qt WebEngine can still load this module.
        from mailsurface_qt.surface_view import SurfaceWebView

        self.surface_view = SurfaceWebView(
            "email",
            load_remote_images=self.settings.load_remote_images,
        )
        self.surface_view.setHtml(EMPTY_SURFACE_HTML)
        self.surface_layout.addWidget(self.surface_view)
        return SandboxedRenderer(
            surface_host=self,
            scroll_surface=self.scroll_surface,
            scheduler=self.scheduler,
            submit=self.workers.submit,
            fetch_attachment=fetch_attachment,
            registry=registry,
            on_height_changed=self._apply_surface_height,
            channel_tag=self.settings.channel_tag,
            default_height=self.settings.default_height,
            debounce_ms=self.settings.debounce_ms,
        )

    def _show_surface(self, sandboxed):
        self.surface_frame.setVisible(sandboxed)
        self.fallback_view.setVisible(not sandboxed)

    def show_mail(self, mail, header_text=None):
        if header_text is not None:
            self.message_header.setText(header_text)
        result = self.renderer.render(mail)
        if isinstance(result, FallbackView):
            self.fallback_view.setPlainText(result.text)
            self.fallback_view.setMinimumHeight(int(self.renderer.current_height))
        return result

    def scroll_surface_to(self, offset):
        if not self.is_sandboxed:
            return False
        return self.renderer.scroll_surface_to(offset)

    def mount(self, reference, document):
        if self.surface_view is None:
            return
        self.surface_view.load_document(reference.view_type, document)
        self.scroll_area.verticalScrollBar().setValue(0)

    def send(self, raw):
        if self.surface_view is not None:
            self.surface_view.send(raw)

    def set_listener(self, callback):
        if self.surface_view is None:
            return
        signal = self.surface_view.bridge.message_received
        if self._listener is not None:
            signal.disconnect(self._listener)
        self._listener = callback
        if callback is not None:
            signal.connect(callback)

    def _apply_surface_height(self, height):
        top, bottom = SURFACE_CONTAINER_MARGINS[1], SURFACE_CONTAINER_MARGINS[3]
        self.surface_frame.setFixedHeight(int(math.ceil(height)) + top + bottom)
        self.height_changed.emit(float(height))

    def dispose(self):
        self.renderer.dispose()
        if self.surface_view is not None:
            self.surface_view.dispose()

    def closeEvent(self, event):
        self.dispose()
        super().closeEvent(event)


__all__ = ["MailContentWidget"]
