import logging
import os
import tempfile

from PySide6.QtCore import QFile, QIODevice, QUrl
from PySide6.QtWebChannel import QWebChannel
from PySide6.QtWebEngineCore import QWebEngineScript, QWebEngineSettings
from PySide6.QtWebEngineWidgets import QWebEngineView

from mailsurface.constants import SURFACE_BRIDGE_OBJECT_NAME
from mailsurface.surface.errors import SurfaceUnavailableError
from mailsurface_qt.constants import QWEBCHANNEL_SCRIPT_NAME, QWEBCHANNEL_SCRIPT_RESOURCE
from mailsurface_qt.surface_bridge import SurfaceBridge
from mailsurface_qt.webview_page import SurfaceWebEnginePage
from mailsurface_qt.webview_utils import build_receive_script

logger = logging.getLogger(__name__)

# setHtml() goes through a data: URL and silently fails past 2 MB.
SET_HTML_LIMIT_BYTES = 2 * 1024 * 1024 - 64 * 1024


def load_qwebchannel_source():
    resource = QFile(QWEBCHANNEL_SCRIPT_RESOURCE)
    if not resource.open(QIODevice.OpenModeFlag.ReadOnly):
        raise SurfaceUnavailableError("qwebchannel.js resource is not available.")
    try:
        return bytes(resource.readAll()).decode("utf-8")
    finally:
        resource.close()


class SurfaceWebView(QWebEngineView):
    """Isolated web surface; talks to the host only through its bridge."""

    def __init__(self, surface_name="mail", load_remote_images=True, parent=None):
        super().__init__(parent)
        self._page = SurfaceWebEnginePage(surface_name, self)
        self.setPage(self._page)
        self.bridge = SurfaceBridge(self)
        self._web_channel = QWebChannel(self._page)
        self._web_channel.registerObject(SURFACE_BRIDGE_OBJECT_NAME, self.bridge)
        self._page.setWebChannel(self._web_channel)
        self._install_channel_script()

        settings = self._page.settings()
        settings.setAttribute(QWebEngineSettings.JavascriptEnabled, True)
        settings.setAttribute(QWebEngineSettings.AutoLoadImages, True)
        settings.setAttribute(QWebEngineSettings.LocalContentCanAccessRemoteUrls, bool(load_remote_images))
        settings.setAttribute(QWebEngineSettings.JavascriptCanOpenWindows, False)
        settings.setAttribute(QWebEngineSettings.ShowScrollBars, False)

        self.current_view_type = None
        self._temp_document_path = None

    def _install_channel_script(self):
        script = QWebEngineScript()
        script.setName(QWEBCHANNEL_SCRIPT_NAME)
        script.setSourceCode(load_qwebchannel_source())
        script.setInjectionPoint(QWebEngineScript.InjectionPoint.DocumentCreation)
        script.setWorldId(QWebEngineScript.ScriptWorldId.MainWorld)
        script.setRunsOnSubFrames(False)
        self._page.scripts().insert(script)

    def load_document(self, view_type, document):
        self.current_view_type = view_type
        self._discard_temp_document()
        payload = (document or "").encode("utf-8")
        if len(payload) <= SET_HTML_LIMIT_BYTES:
            self.setHtml(document)
            return
        fd, path = tempfile.mkstemp(prefix="mailsurface-", suffix=".html")
        with os.fdopen(fd, "wb") as handle:
            handle.write(payload)
        self._temp_document_path = path
        self.load(QUrl.fromLocalFile(path))

    def send(self, raw):
        self._page.runJavaScript(build_receive_script(raw))

    def dispose(self):
        self._discard_temp_document()
        self.current_view_type = None

    def _discard_temp_document(self):
        path, self._temp_document_path = self._temp_document_path, None
        if not path:
            return
        try:
            os.remove(path)
        except OSError as exc:
            logger.debug("Could not remove surface document %s: %s", path, exc)


__all__ = ["SET_HTML_LIMIT_BYTES", "SurfaceWebView", "load_qwebchannel_source"]
