JS_CONSOLE_DEBUG_ENV = "MAILSURFACE_DEBUG_JS_CONSOLE"

JS_NOISE_PATTERNS = (
    "was preloaded using link preload but not used",
    "permissions policy violation: unload is not allowed",
    "error with permissions-policy header: unrecognized feature",
    "document-policy http header: unrecognized document policy feature name",
    "mixed content:",
)

LOCAL_JS_SOURCE_PREFIXES = (
    "about:",
    "data:",
    "file:",
    "qrc:",
)

EXTERNAL_LINK_SCHEMES = ("http", "https", "mailto")

QWEBCHANNEL_SCRIPT_RESOURCE = ":/qtwebchannel/qwebchannel.js"
QWEBCHANNEL_SCRIPT_NAME = "mailsurface-qwebchannel"

SURFACE_CONTAINER_MARGINS = (0, 8, 0, 8)
CONTENT_LAYOUT_MARGINS = (4, 4, 4, 4)
CONTENT_LAYOUT_SPACING = 8
FALLBACK_TEXT_STYLE = "font-size: 14px; color: #222222; background: #ffffff; border: 1px solid #d0d0d0;"
EMPTY_SURFACE_HTML = "<html><body style='font-family:Segoe UI;'>No message selected.</body></html>"

__all__ = [
    "CONTENT_LAYOUT_MARGINS",
    "CONTENT_LAYOUT_SPACING",
    "EMPTY_SURFACE_HTML",
    "EXTERNAL_LINK_SCHEMES",
    "FALLBACK_TEXT_STYLE",
    "JS_CONSOLE_DEBUG_ENV",
    "JS_NOISE_PATTERNS",
    "LOCAL_JS_SOURCE_PREFIXES",
    "QWEBCHANNEL_SCRIPT_NAME",
    "QWEBCHANNEL_SCRIPT_RESOURCE",
    "SURFACE_CONTAINER_MARGINS",
]
