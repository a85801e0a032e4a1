import hashlib
import logging
from collections.abc import Callable
from dataclasses import dataclass

from mailsurface.constants import SURFACE_VIEW_TYPE_HASH_CHARS, SURFACE_VIEW_TYPE_PREFIX
from mailsurface.surface.template import build_surface_document

logger = logging.getLogger(__name__)


def content_identity(resolved_markup: str) -> str:
    """Stable key for resolved markup; hash collisions are not guarded against."""
    return hashlib.sha1((resolved_markup or "").encode("utf-8")).hexdigest()


@dataclass(frozen=True)
class SurfaceReference:
    view_type: str
    content_identity: str


@dataclass(frozen=True)
class SurfaceRegistration:
    content_identity: str
    view_type: str
    factory: Callable[[], str]


class SurfaceRegistry:
    """Append-only map from content identity to its isolated surface document."""

    def __init__(self, document_builder=build_surface_document, view_type_prefix=SURFACE_VIEW_TYPE_PREFIX):
        self._document_builder = document_builder
        self._view_type_prefix = view_type_prefix
        self._registrations = {}

    def __contains__(self, identity):
        return identity in self._registrations

    def __len__(self):
        return len(self._registrations)

    def ensure_registered(self, identity: str, resolved_markup: str) -> SurfaceReference:
        registration = self._registrations.get(identity)
        if registration is None:
            document = self._document_builder(resolved_markup)
            registration = SurfaceRegistration(
                content_identity=identity,
                view_type=f"{self._view_type_prefix}-{identity[:SURFACE_VIEW_TYPE_HASH_CHARS]}",
                factory=lambda: document,
            )
            self._registrations[identity] = registration
            logger.debug("Registered surface %s", registration.view_type)
        return SurfaceReference(view_type=registration.view_type, content_identity=identity)

    def registration_for(self, reference: SurfaceReference) -> SurfaceRegistration | None:
        return self._registrations.get(reference.content_identity)

    def document_for(self, reference: SurfaceReference) -> str:
        registration = self.registration_for(reference)
        if registration is None:
            raise KeyError(f"Surface is not registered: {reference.view_type}")
        return registration.factory()


__all__ = ["SurfaceReference", "SurfaceRegistration", "SurfaceRegistry", "content_identity"]
