import functools
import logging

from mailsurface.channel.port import MessageChannel
from mailsurface.constants import CHANNEL_TAG, DEFAULT_SURFACE_HEIGHT, HEIGHT_DEBOUNCE_MS
from mailsurface.content.cache import ResolutionCache
from mailsurface.content.resolver import build_attachment_index
from mailsurface.domain.html_text import text_to_html
from mailsurface.domain.models import MailBody
from mailsurface.render.base import MailRenderer
from mailsurface.surface.registry import SurfaceRegistry, content_identity
from mailsurface.surface.template import build_surface_document
from mailsurface.sync.height import HeightNegotiator
from mailsurface.sync.scroll import ScrollCoordinator

logger = logging.getLogger(__name__)


class SandboxedRenderer(MailRenderer):
    """Shows mail inside an isolated surface and keeps it in step with the host.

    Resolution runs through `submit`; everything else happens on the caller's
    thread. `fetch_attachment(mail_id, attachment_id)` supplies attachment bytes.
    """

    def __init__(
        self,
        surface_host,
        scroll_surface,
        scheduler,
        submit,
        fetch_attachment,
        registry=None,
        on_height_changed=None,
        channel_tag=CHANNEL_TAG,
        default_height=DEFAULT_SURFACE_HEIGHT,
        debounce_ms=HEIGHT_DEBOUNCE_MS,
    ):
        self._surface_host = surface_host
        self._fetch_attachment = fetch_attachment
        if registry is None:
            registry = SurfaceRegistry(
                document_builder=functools.partial(
                    build_surface_document,
                    channel_tag=channel_tag,
                    debounce_ms=debounce_ms,
                )
            )
        self.registry = registry
        self.cache = ResolutionCache(submit)
        self.height = HeightNegotiator(on_height_changed, default_height)
        self.scroll = ScrollCoordinator(scroll_surface, scheduler)
        self.channel = MessageChannel(
            on_scroll_delta=self.scroll.on_scroll_delta,
            on_height_report=self.height.on_height_report,
            transport=surface_host.send,
            channel_tag=channel_tag,
        )
        self.current_reference = None
        self._initialized = False
        self._disposed = False

    @property
    def current_height(self) -> float:
        return self.height.current_height

    def initialize(self):
        if self._initialized or self._disposed:
            return
        self._surface_host.set_listener(self.channel.receive)
        self._initialized = True

    def dispose(self):
        if self._disposed:
            return
        self._disposed = True
        if self._initialized:
            self._surface_host.set_listener(None)
        self.channel.dispose()
        self.scroll.dispose()
        self.height.dispose()
        self.cache.invalidate()

    def render(self, mail: MailBody):
        """Start showing `mail`; mounting happens once its body is resolved."""
        if self._disposed:
            return None
        markup = mail.html_content if mail.has_html_content else text_to_html(mail.text_content)
        self.cache.request(
            mail.mail_id,
            markup,
            build_attachment_index(mail.attachments),
            functools.partial(self._fetch_attachment, mail.mail_id),
            self._on_resolved,
        )
        return self.current_reference

    def scroll_surface_to(self, offset) -> bool:
        return self.channel.send_scroll_offset(offset)

    def _on_resolved(self, content):
        if self._disposed:
            return
        identity = content_identity(content.resolved_markup)
        reference = self.registry.ensure_registered(identity, content.resolved_markup)
        if reference == self.current_reference:
            return
        self.current_reference = reference
        logger.debug("Mounting %s for mail %s", reference.view_type, content.mail_id)
        self._surface_host.mount(reference, self.registry.document_for(reference))


__all__ = ["SandboxedRenderer"]
