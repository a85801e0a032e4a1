import logging

from mailsurface.channel.messages import MessageType, decode_message, encode_message
from mailsurface.constants import CHANNEL_TAG

logger = logging.getLogger(__name__)


class MessageChannel:
    """Host end of the surface protocol.

    Inbound traffic may share a bus with unrelated messages; only payloads
    carrying `channel_tag` are dispatched.
    """

    def __init__(
        self,
        on_scroll_delta=None,
        on_height_report=None,
        transport=None,
        channel_tag=CHANNEL_TAG,
    ):
        self.channel_tag = channel_tag
        self._transport = transport
        self._handlers = {
            MessageType.SCROLL_FROM_SURFACE: on_scroll_delta,
            MessageType.HEIGHT_REPORT: on_height_report,
        }
        self._disposed = False

    @property
    def disposed(self) -> bool:
        return self._disposed

    def receive(self, raw) -> bool:
        if self._disposed:
            return False
        message = decode_message(raw, self.channel_tag)
        if message is None:
            logger.debug("Ignoring non-channel message: %.80r", raw)
            return False
        handler = self._handlers.get(message.type)
        if handler is None:
            return False
        handler(message.payload)
        return True

    def send_scroll_offset(self, offset) -> bool:
        if self._disposed or self._transport is None:
            return False
        self._transport(encode_message(MessageType.SCROLL_FROM_HOST, offset, self.channel_tag))
        return True

    def dispose(self):
        self._disposed = True
        self._transport = None


__all__ = ["MessageChannel"]
