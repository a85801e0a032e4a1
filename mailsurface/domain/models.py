from dataclasses import dataclass, field

from mailsurface.constants import DEFAULT_ATTACHMENT_MIME

GRAPH_FILE_ATTACHMENT_TYPE = "#microsoft.graph.fileAttachment"


@dataclass(frozen=True)
class AttachmentMeta:
    attachment_id: str
    mime_type: str = DEFAULT_ATTACHMENT_MIME
    size: int = 0
    name: str = ""
    content_id: str = ""
    is_inline: bool = False

    @classmethod
    def from_payload(cls, payload):
        """Build metadata from a Graph-style attachment payload."""
        payload = payload or {}
        return cls(
            attachment_id=str(payload.get("id") or ""),
            mime_type=(payload.get("contentType") or DEFAULT_ATTACHMENT_MIME).strip(),
            size=int(payload.get("size") or 0),
            name=payload.get("name") or "",
            content_id=payload.get("contentId") or payload.get("contentLocation") or "",
            is_inline=bool(payload.get("isInline")),
        )


@dataclass(frozen=True)
class MailBody:
    mail_id: str
    html_content: str = ""
    text_content: str = ""
    attachments: tuple[AttachmentMeta, ...] = field(default_factory=tuple)

    @property
    def has_html_content(self) -> bool:
        return bool((self.html_content or "").strip())

    @property
    def has_text_content(self) -> bool:
        return bool((self.text_content or "").strip())

    @classmethod
    def from_payload(cls, detail, attachments=None):
        """Build a mail body from a Graph-style message detail and attachment list."""
        detail = detail or {}
        body = detail.get("body", {}) or {}
        content_type = (body.get("contentType") or "").lower()
        content = body.get("content") or ""
        html_content = content if content_type == "html" else ""
        text_content = "" if content_type == "html" else (content or detail.get("bodyPreview", ""))
        metas = tuple(
            AttachmentMeta.from_payload(item)
            for item in attachments or []
            if item.get("@odata.type", GRAPH_FILE_ATTACHMENT_TYPE) == GRAPH_FILE_ATTACHMENT_TYPE
        )
        return cls(
            mail_id=str(detail.get("id") or ""),
            html_content=html_content,
            text_content=text_content,
            attachments=metas,
        )


__all__ = ["AttachmentMeta", "GRAPH_FILE_ATTACHMENT_TYPE", "MailBody"]
