from dataclasses import dataclass

from mailsurface.constants import DEFAULT_SURFACE_HEIGHT
from mailsurface.domain.html_text import strip_html_tags
from mailsurface.domain.models import MailBody
from mailsurface.render.base import MailRenderer


@dataclass(frozen=True)
class FallbackView:
    mail_id: str
    text: str


class FallbackRenderer(MailRenderer):
    """Plain-text view for runtimes without an isolated surface.

    Embedded references are never resolved here.
    """

    def __init__(self, default_height=DEFAULT_SURFACE_HEIGHT):
        self._height = float(default_height)

    def initialize(self):
        return None

    def dispose(self):
        return None

    @property
    def current_height(self) -> float:
        return self._height

    def render(self, mail: MailBody) -> FallbackView:
        if mail.has_text_content:
            text = mail.text_content
        else:
            text = strip_html_tags(mail.html_content)
        return FallbackView(mail_id=mail.mail_id, text=text)


__all__ = ["FallbackRenderer", "FallbackView"]
