import base64
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone

from mailsurface.constants import DEFAULT_ATTACHMENT_MIME
from mailsurface.content.references import extract_reference_ids, normalize_cid_value, replace_references

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedContent:
    source_markup: str
    resolved_markup: str
    resolved_at: datetime
    mail_id: str | None = None
    resolved_ids: tuple[str, ...] = field(default_factory=tuple)
    unresolved_ids: tuple[str, ...] = field(default_factory=tuple)

    @property
    def changed(self) -> bool:
        return self.resolved_markup != self.source_markup


@dataclass(frozen=True)
class ReferenceAnalysis:
    total_references: int
    found_ids: tuple[str, ...]
    missing_ids: tuple[str, ...]
    total_attachments: int

    @property
    def has_missing(self) -> bool:
        return bool(self.missing_ids)

    @property
    def all_found(self) -> bool:
        return self.total_references > 0 and not self.missing_ids


def build_attachment_index(attachments):
    """Map normalized reference ids to attachment metadata.

    Content ids win; attachment ids and file names only fill keys that no
    content id already claimed.
    """
    index = {}
    attachments = list(attachments or [])
    for attachment in attachments:
        key = normalize_cid_value(attachment.content_id)
        if key:
            index.setdefault(key, attachment)
    for attachment in attachments:
        for candidate in (attachment.attachment_id, attachment.name):
            key = normalize_cid_value(candidate)
            if key:
                index.setdefault(key, attachment)
    return index


def build_data_url(mime_type, payload: bytes) -> str:
    mime = (mime_type or DEFAULT_ATTACHMENT_MIME).strip() or DEFAULT_ATTACHMENT_MIME
    encoded = base64.b64encode(payload).decode("ascii")
    return f"data:{mime};base64,{encoded}"


def analyze_references(markup, attachment_index) -> ReferenceAnalysis:
    reference_ids = extract_reference_ids(markup)
    found = tuple(ref for ref in reference_ids if ref in attachment_index)
    missing = tuple(ref for ref in reference_ids if ref not in attachment_index)
    distinct_attachments = {id(meta) for meta in attachment_index.values()}
    return ReferenceAnalysis(
        total_references=len(reference_ids),
        found_ids=found,
        missing_ids=missing,
        total_attachments=len(distinct_attachments),
    )


def _fetch_data_url(reference_id, attachment, fetch_attachment):
    try:
        payload = fetch_attachment(attachment.attachment_id)
    except Exception as exc:
        logger.warning("Attachment fetch failed for cid:%s (%s): %s", reference_id, attachment.attachment_id, exc)
        return None
    if not payload:
        logger.warning("Attachment cid:%s returned no content", reference_id)
        return None
    return build_data_url(attachment.mime_type, bytes(payload))


def resolve_content(markup, attachment_index, fetch_attachment, mail_id=None) -> ResolvedContent:
    source = markup or ""
    reference_ids = extract_reference_ids(source)
    if not reference_ids:
        return ResolvedContent(
            source_markup=source,
            resolved_markup=source,
            resolved_at=datetime.now(timezone.utc),
            mail_id=mail_id,
        )

    data_urls = {}
    unresolved = []
    for reference_id in reference_ids:
        attachment = (attachment_index or {}).get(reference_id)
        if attachment is None:
            logger.debug("No attachment for cid:%s", reference_id)
            unresolved.append(reference_id)
            continue
        data_url = _fetch_data_url(reference_id, attachment, fetch_attachment)
        if data_url is None:
            unresolved.append(reference_id)
            continue
        data_urls[reference_id] = data_url

    resolved = replace_references(source, data_urls)
    logger.debug(
        "Resolved %d of %d references (mail %s)",
        len(data_urls),
        len(reference_ids),
        mail_id,
    )
    return ResolvedContent(
        source_markup=source,
        resolved_markup=resolved,
        resolved_at=datetime.now(timezone.utc),
        mail_id=mail_id,
        resolved_ids=tuple(data_urls),
        unresolved_ids=tuple(unresolved),
    )


def resolve_markup(markup, attachment_index, fetch_attachment) -> str:
    """Inline every resolvable cid reference; unresolvable ones stay as they are."""
    return resolve_content(markup, attachment_index, fetch_attachment).resolved_markup


__all__ = [
    "ReferenceAnalysis",
    "ResolvedContent",
    "analyze_references",
    "build_attachment_index",
    "build_data_url",
    "resolve_content",
    "resolve_markup",
]
