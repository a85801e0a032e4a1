import json
import math
from dataclasses import dataclass
from enum import Enum

from mailsurface.constants import CHANNEL_TAG
from mailsurface.errors import ValidationError


class MessageType(str, Enum):
    SCROLL_FROM_SURFACE = "scrollFromSurface"
    SCROLL_FROM_HOST = "scrollFromHost"
    HEIGHT_REPORT = "heightReport"


PAYLOAD_FIELDS = {
    MessageType.SCROLL_FROM_SURFACE: "deltaY",
    MessageType.SCROLL_FROM_HOST: "scrollOffset",
    MessageType.HEIGHT_REPORT: "height",
}


@dataclass(frozen=True)
class ChannelMessage:
    channel: str
    type: MessageType
    payload: float


def _as_number(value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    if not math.isfinite(number):
        return None
    return number


def encode_message(message_type, payload, channel=CHANNEL_TAG) -> str:
    kind = MessageType(message_type)
    number = _as_number(payload)
    if number is None:
        raise ValidationError(f"Channel payload must be a finite number, got {payload!r}")
    return json.dumps({"channel": channel, "type": kind.value, PAYLOAD_FIELDS[kind]: number})


def decode_message(raw, channel=CHANNEL_TAG) -> ChannelMessage | None:
    """Parse one inbound payload; anything that is not ours comes back as None."""
    if not isinstance(raw, str):
        return None
    try:
        decoded = json.loads(raw)
    except (ValueError, RecursionError):
        return None
    if not isinstance(decoded, dict):
        return None
    if decoded.get("channel") != channel:
        return None
    try:
        kind = MessageType(decoded.get("type"))
    except ValueError:
        return None
    number = _as_number(decoded.get(PAYLOAD_FIELDS[kind]))
    if number is None:
        return None
    return ChannelMessage(channel=channel, type=kind, payload=number)


__all__ = ["ChannelMessage", "MessageType", "PAYLOAD_FIELDS", "decode_message", "encode_message"]
