"""Isolated render surfaces: document template, registry and runtime checks."""

from mailsurface.surface.errors import SurfaceRuntimeError, SurfaceUnavailableError
from mailsurface.surface.registry import (
    SurfaceReference,
    SurfaceRegistration,
    SurfaceRegistry,
    content_identity,
)
from mailsurface.surface.runtime import (
    SurfaceRuntimeInfo,
    SurfaceRuntimeStatus,
    detect_surface_runtime,
)
from mailsurface.surface.template import build_surface_config, build_surface_document

__all__ = [
    "SurfaceReference",
    "SurfaceRegistration",
    "SurfaceRegistry",
    "SurfaceRuntimeError",
    "SurfaceRuntimeInfo",
    "SurfaceRuntimeStatus",
    "SurfaceUnavailableError",
    "build_surface_config",
    "build_surface_document",
    "content_identity",
    "detect_surface_runtime",
]
