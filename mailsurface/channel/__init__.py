"""Tagged JSON message protocol between host and render surface."""

from mailsurface.channel.messages import (
    ChannelMessage,
    MessageType,
    decode_message,
    encode_message,
)
from mailsurface.channel.port import MessageChannel

__all__ = ["ChannelMessage", "MessageChannel", "MessageType", "decode_message", "encode_message"]
