"""Infrastructure modules for Mailsurface."""

from . import attachment_client, config_store

__all__ = ["attachment_client", "config_store"]
