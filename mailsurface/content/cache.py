import logging
from datetime import datetime, timezone

from mailsurface.content.references import contains_references
from mailsurface.content.resolver import ResolvedContent, resolve_content

logger = logging.getLogger(__name__)


class ResolutionCache:
    """Holds the resolved body of the mail currently on display.

    `submit(fn, on_result, on_error)` runs `fn` off the UI thread and calls
    back on it. Results for a mail that is no longer active are dropped.
    """

    def __init__(self, submit, resolver=resolve_content):
        self._submit = submit
        self._resolver = resolver
        self._active_mail_id = None
        self._entry = None
        self._waiters = []

    @property
    def active_mail_id(self):
        return self._active_mail_id

    @property
    def entry(self) -> ResolvedContent | None:
        return self._entry

    @property
    def pending(self) -> bool:
        return self._active_mail_id is not None and self._entry is None

    def request(self, mail_id, markup, attachment_index, fetch_attachment, on_ready):
        if mail_id == self._active_mail_id and self._active_mail_id is not None:
            if self._entry is not None:
                on_ready(self._entry)
            else:
                self._waiters.append(on_ready)
            return

        self._active_mail_id = mail_id
        self._entry = None
        self._waiters = [on_ready]

        if not contains_references(markup):
            self._complete(
                mail_id,
                ResolvedContent(
                    source_markup=markup or "",
                    resolved_markup=markup or "",
                    resolved_at=datetime.now(timezone.utc),
                    mail_id=mail_id,
                ),
            )
            return

        self._submit(
            lambda: self._resolver(markup, attachment_index, fetch_attachment, mail_id=mail_id),
            lambda content, target=mail_id: self._complete(target, content),
            lambda trace_text, target=mail_id, source=markup: self._fail(target, source, trace_text),
        )

    def invalidate(self):
        self._active_mail_id = None
        self._entry = None
        self._waiters = []

    def _complete(self, mail_id, content):
        if mail_id != self._active_mail_id:
            logger.debug("Discarding resolution for superseded mail %s", mail_id)
            return
        self._entry = content
        waiters, self._waiters = self._waiters, []
        for callback in waiters:
            callback(content)

    def _fail(self, mail_id, markup, trace_text):
        logger.warning("Resolution job failed for mail %s:\n%s", mail_id, trace_text)
        self._complete(
            mail_id,
            ResolvedContent(
                source_markup=markup or "",
                resolved_markup=markup or "",
                resolved_at=datetime.now(timezone.utc),
                mail_id=mail_id,
            ),
        )


__all__ = ["ResolutionCache"]
