import re
from dataclasses import dataclass
from urllib.parse import unquote

CID_SRC_PATTERN = re.compile(r"(?<![\w.-])cid:([^\"'>\s)]+)", re.IGNORECASE)


@dataclass(frozen=True)
class EmbeddedReference:
    reference_id: str
    raw: str


def normalize_cid_value(value):
    cid = (value or "").strip()
    if not cid:
        return ""
    cid = unquote(cid).strip()
    if cid.lower().startswith("cid:"):
        cid = cid[4:]
    cid = cid.strip("<> ").lower()
    return cid


def iter_references(markup):
    if not markup:
        return
    for match in CID_SRC_PATTERN.finditer(markup):
        reference_id = normalize_cid_value(match.group(1))
        if reference_id:
            yield EmbeddedReference(reference_id=reference_id, raw=match.group(0))


def extract_reference_ids(markup):
    """Return distinct reference ids in order of first appearance."""
    seen = []
    for reference in iter_references(markup):
        if reference.reference_id not in seen:
            seen.append(reference.reference_id)
    return seen


def contains_references(markup):
    return next(iter_references(markup), None) is not None


def replace_references(markup, data_urls):
    """Swap each known cid locator for its data URL, leaving the rest intact."""
    if not markup or not data_urls:
        return markup

    def _replace(match):
        normalized = normalize_cid_value(match.group(1))
        return data_urls.get(normalized, match.group(0))

    return CID_SRC_PATTERN.sub(_replace, markup)


__all__ = [
    "CID_SRC_PATTERN",
    "EmbeddedReference",
    "contains_references",
    "extract_reference_ids",
    "iter_references",
    "normalize_cid_value",
    "replace_references",
]
