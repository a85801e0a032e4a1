from abc import ABC, abstractmethod
from typing import Protocol

from mailsurface.domain.models import MailBody


class SurfaceHost(Protocol):
    """Host-side hooks a sandboxed renderer drives."""

    def mount(self, reference, document: str) -> None: ...

    def send(self, raw: str) -> None: ...

    def set_listener(self, callback) -> None: ...


class MailRenderer(ABC):
    """Renders one mail body at a time into the host's detail view."""

    @abstractmethod
    def initialize(self) -> None:
        """Attach listeners and other host resources."""

    @abstractmethod
    def dispose(self) -> None:
        """Release listeners; nothing fires after this returns."""

    @property
    @abstractmethod
    def current_height(self) -> float:
        """Layout height the host should reserve for the mail content."""

    @abstractmethod
    def render(self, mail: MailBody):
        """Show `mail`; returns whatever the host needs to display it."""


__all__ = ["MailRenderer", "SurfaceHost"]
