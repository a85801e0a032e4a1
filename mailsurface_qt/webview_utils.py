import json

from mailsurface.constants import SURFACE_RECEIVE_FUNCTION
from mailsurface_qt.constants import EXTERNAL_LINK_SCHEMES, JS_NOISE_PATTERNS, LOCAL_JS_SOURCE_PREFIXES


def is_js_noise_message(message):
    lowered = (message or "").lower()
    if not lowered:
        return False
    return any(pattern in lowered for pattern in JS_NOISE_PATTERNS)


def is_local_console_source(source_id):
    lowered = (source_id or "").lower()
    if not lowered:
        return False
    return lowered.startswith(LOCAL_JS_SOURCE_PREFIXES)


def is_external_link_scheme(scheme):
    return (scheme or "").strip().lower() in EXTERNAL_LINK_SCHEMES


def build_receive_script(raw):
    """JavaScript that hands one host message to the surface's receive hook."""
    fn = SURFACE_RECEIVE_FUNCTION
    return f"window.{fn} && window.{fn}({json.dumps(raw)});"


__all__ = [
    "build_receive_script",
    "is_external_link_scheme",
    "is_js_noise_message",
    "is_local_console_source",
]
