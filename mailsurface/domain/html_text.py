import html
import re

_TAG_PATTERN = re.compile(r"<[^>]*>")
_WHITESPACE_PATTERN = re.compile(r"\s+")
_ENTITY_REPLACEMENTS = (
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
)


def strip_html_tags(text):
    """Reduce HTML to a single line of plain text for the fallback view."""
    if not text:
        return ""
    stripped = _TAG_PATTERN.sub("", text)
    for entity, replacement in _ENTITY_REPLACEMENTS:
        stripped = stripped.replace(entity, replacement)
    return _WHITESPACE_PATTERN.sub(" ", stripped).strip()


def text_to_html(text):
    """Escape plain text and keep its line breaks as <br> tags."""
    safe = html.escape(text or "")
    return safe.replace("\r\n", "\n").replace("\n", "<br>")


__all__ = ["strip_html_tags", "text_to_html"]
