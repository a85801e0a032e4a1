from mailsurface.errors import MailsurfaceError


class SurfaceRuntimeError(MailsurfaceError):
    """Base render-surface subsystem error."""


class SurfaceUnavailableError(SurfaceRuntimeError):
    """Raised when an isolated render surface cannot be created on this machine."""


__all__ = ["SurfaceRuntimeError", "SurfaceUnavailableError"]
