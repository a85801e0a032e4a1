import base64
import binascii

import requests

from mailsurface.constants import GRAPH_BASE, HTTP_CONNECT_TIMEOUT_SEC, HTTP_READ_TIMEOUT_SEC
from mailsurface.domain.models import GRAPH_FILE_ATTACHMENT_TYPE, AttachmentMeta
from mailsurface.errors import ExternalServiceError


class AttachmentFetchError(ExternalServiceError):
    """Raised when attachment metadata or bytes cannot be retrieved."""


class AttachmentClient:
    """Reads message attachments from a Graph-style mail API."""

    def __init__(
        self,
        token_provider,
        base_url=GRAPH_BASE,
        session=None,
        request_timeout=(HTTP_CONNECT_TIMEOUT_SEC, HTTP_READ_TIMEOUT_SEC),
    ):
        self.token_provider = token_provider
        self.base_url = (base_url or GRAPH_BASE).rstrip("/")
        self.session = session or requests.Session()
        self.request_timeout = request_timeout

    @classmethod
    def from_config(cls, config, token_provider, session=None):
        return cls(token_provider, base_url=config.get("attachment_api_base") or GRAPH_BASE, session=session)

    def _headers(self):
        return {"Authorization": f"Bearer {self.token_provider()}", "Accept": "application/json"}

    def _get(self, url):
        try:
            response = self.session.get(url, headers=self._headers(), timeout=self.request_timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise AttachmentFetchError(f"Attachment request failed: {exc}") from exc
        try:
            payload = response.json()
        except ValueError as exc:
            raise AttachmentFetchError(f"Invalid JSON response from attachment endpoint: {url}") from exc
        if not isinstance(payload, dict):
            raise AttachmentFetchError(f"Unexpected JSON shape from attachment endpoint: {url}")
        return payload

    def list_attachments(self, message_id):
        data = self._get(f"{self.base_url}/me/messages/{message_id}/attachments")
        return [
            AttachmentMeta.from_payload(item)
            for item in data.get("value", [])
            if item.get("@odata.type", GRAPH_FILE_ATTACHMENT_TYPE) == GRAPH_FILE_ATTACHMENT_TYPE
        ]

    def fetch_attachment_bytes(self, message_id, attachment_id) -> bytes:
        data = self._get(f"{self.base_url}/me/messages/{message_id}/attachments/{attachment_id}")
        encoded = data.get("contentBytes") or ""
        if not encoded:
            raise AttachmentFetchError(f"Attachment {attachment_id} has no content.")
        try:
            return base64.b64decode(encoded, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise AttachmentFetchError(f"Attachment {attachment_id} content is not valid base64.") from exc


__all__ = ["AttachmentClient", "AttachmentFetchError"]
