import logging
import os

from PySide6.QtGui import QDesktopServices
from PySide6.QtWebEngineCore import QWebEnginePage

from mailsurface_qt.constants import JS_CONSOLE_DEBUG_ENV
from mailsurface_qt.webview_utils import is_external_link_scheme, is_js_noise_message, is_local_console_source

logger = logging.getLogger(__name__)


def open_external_url(url):
    if not is_external_link_scheme(url.scheme()):
        logger.debug("Blocked link with scheme %r", url.scheme())
        return False
    return QDesktopServices.openUrl(url)


class _ExternalLinkPage(QWebEnginePage):
    """Receives target=_blank navigations and hands them to the desktop browser."""

    def acceptNavigationRequest(self, url, _nav_type, _is_main_frame):
        open_external_url(url)
        self.deleteLater()
        return False


class SurfaceWebEnginePage(QWebEnginePage):
    def __init__(self, surface_name, parent=None):
        super().__init__(parent)
        self._surface_name = surface_name

    def acceptNavigationRequest(self, url, nav_type, is_main_frame):
        if nav_type == QWebEnginePage.NavigationType.NavigationTypeLinkClicked:
            open_external_url(url)
            return False
        return super().acceptNavigationRequest(url, nav_type, is_main_frame)

    def createWindow(self, _window_type):
        return _ExternalLinkPage(self)

    def javaScriptConsoleMessage(self, level, message, line_number, source_id):
        if os.getenv(JS_CONSOLE_DEBUG_ENV, "").strip() == "1":
            super().javaScriptConsoleMessage(level, message, line_number, source_id)
            return
        if is_js_noise_message(message):
            return
        if is_local_console_source(source_id):
            if level == QWebEnginePage.JavaScriptConsoleMessageLevel.ErrorMessageLevel:
                logger.error("[WEB][%s] %s (%s:%s)", self._surface_name, message, source_id, line_number)
            return


__all__ = ["SurfaceWebEnginePage", "open_external_url"]
