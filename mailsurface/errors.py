"""Error types shared by the Mailsurface packages."""


class MailsurfaceError(Exception):
    """Root of every error raised on purpose by Mailsurface."""


class ValidationError(MailsurfaceError):
    """A value crossing a public boundary was malformed (mode, payload, ...)."""


class ExternalServiceError(MailsurfaceError):
    """The mail API or another remote collaborator failed."""


__all__ = ["ExternalServiceError", "MailsurfaceError", "ValidationError"]
