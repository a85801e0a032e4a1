"""Mailsurface modular package."""

from . import channel, constants, content, domain, errors, infra, paths, render, surface, sync

__all__ = [
    "channel",
    "constants",
    "content",
    "domain",
    "errors",
    "infra",
    "paths",
    "render",
    "surface",
    "sync",
]
