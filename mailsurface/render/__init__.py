"""Renderer strategies for the mail detail view."""

from mailsurface.render.base import MailRenderer, SurfaceHost
from mailsurface.render.factory import create_mail_renderer
from mailsurface.render.fallback import FallbackRenderer, FallbackView
from mailsurface.render.sandboxed import SandboxedRenderer

__all__ = [
    "FallbackRenderer",
    "FallbackView",
    "MailRenderer",
    "SandboxedRenderer",
    "SurfaceHost",
    "create_mail_renderer",
]
