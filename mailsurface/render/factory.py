import logging

from mailsurface.constants import (
    DEFAULT_SURFACE_HEIGHT,
    RENDERER_MODE_AUTO,
    RENDERER_MODE_FALLBACK,
    RENDERER_MODE_SANDBOXED,
    RENDERER_MODES,
)
from mailsurface.errors import ValidationError
from mailsurface.render.fallback import FallbackRenderer
from mailsurface.surface.errors import SurfaceUnavailableError

logger = logging.getLogger(__name__)


def create_mail_renderer(runtime_info, build_sandboxed, mode=RENDERER_MODE_AUTO, default_height=DEFAULT_SURFACE_HEIGHT):
    """Pick the renderer strategy once, from the detected surface runtime.

    `build_sandboxed` is only called when the isolated surface can be used.
    """
    normalized = (mode or RENDERER_MODE_AUTO).strip().lower()
    if normalized not in RENDERER_MODES:
        raise ValidationError(f"Unknown renderer mode: {mode}")

    if normalized == RENDERER_MODE_FALLBACK:
        return FallbackRenderer(default_height=default_height)

    detail = runtime_info.detail
    if runtime_info.ready:
        try:
            return build_sandboxed()
        except SurfaceUnavailableError as exc:
            if normalized == RENDERER_MODE_SANDBOXED:
                raise
            detail = str(exc)
    elif normalized == RENDERER_MODE_SANDBOXED:
        raise SurfaceUnavailableError(detail)

    logger.info("Isolated surface unavailable, using text fallback: %s", detail)
    return FallbackRenderer(default_height=default_height)


__all__ = ["create_mail_renderer"]
