APP_NAME = "Mailsurface"
GRAPH_BASE = "https://graph.microsoft.com/v1.0"
HTTP_CONNECT_TIMEOUT_SEC = 10
HTTP_READ_TIMEOUT_SEC = 45

CHANNEL_TAG = "mailsurface-channel"
DEFAULT_SURFACE_HEIGHT = 400
HEIGHT_DEBOUNCE_MS = 50
HEIGHT_REMEASURE_DELAYS_MS = (100, 500, 1000)
SURFACE_HEIGHT_PADDING_PX = 32
SURFACE_VIEW_TYPE_PREFIX = "mail-surface"
SURFACE_VIEW_TYPE_HASH_CHARS = 16
SURFACE_RECEIVE_FUNCTION = "__mailsurfaceReceive"
SURFACE_CONFIG_GLOBAL = "__mailsurfaceConfig"
SURFACE_BRIDGE_OBJECT_NAME = "surfaceBridge"

DEFAULT_ATTACHMENT_MIME = "application/octet-stream"

RENDERER_MODE_AUTO = "auto"
RENDERER_MODE_SANDBOXED = "sandboxed"
RENDERER_MODE_FALLBACK = "fallback"
RENDERER_MODES = (RENDERER_MODE_AUTO, RENDERER_MODE_SANDBOXED, RENDERER_MODE_FALLBACK)

SURFACE_RUNTIME_INSTALL_HINT = "Install Qt WebEngine support with: pip install PySide6"
