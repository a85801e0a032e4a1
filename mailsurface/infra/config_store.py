import json
import logging
import math
import os
from dataclasses import dataclass

from mailsurface.constants import (
    CHANNEL_TAG,
    DEFAULT_SURFACE_HEIGHT,
    GRAPH_BASE,
    HEIGHT_DEBOUNCE_MS,
    RENDERER_MODE_AUTO,
)
from mailsurface.paths import CONFIG_DIR, CONFIG_FILE

logger = logging.getLogger(__name__)

DEFAULTS = {
    "renderer_mode": RENDERER_MODE_AUTO,
    "surface_default_height": DEFAULT_SURFACE_HEIGHT,
    "height_debounce_ms": HEIGHT_DEBOUNCE_MS,
    "channel_tag": CHANNEL_TAG,
    "attachment_api_base": GRAPH_BASE,
    "load_remote_images": True,
}


@dataclass(frozen=True)
class SurfaceSettings:
    renderer_mode: str
    default_height: float
    debounce_ms: int
    channel_tag: str
    load_remote_images: bool


def _non_negative_number(value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    number = float(value)
    if not math.isfinite(number) or number < 0:
        return None
    return number


class Config:
    """Persistent configuration, a JSON object merged over `DEFAULTS`."""

    def __init__(self):
        self.load_error = None
        self.data = dict(DEFAULTS)
        self.load()

    def load(self):
        self.load_error = None
        if not os.path.exists(CONFIG_FILE):
            return
        try:
            with open(CONFIG_FILE, "r", encoding="utf-8") as f:
                saved = json.load(f)
            if not isinstance(saved, dict):
                raise ValueError("Config payload must be a JSON object.")
            self.data.update(saved)
        except (OSError, json.JSONDecodeError, TypeError, ValueError) as exc:
            self.load_error = str(exc)
            logger.warning("Ignoring config file %s: %s", CONFIG_FILE, exc)

    def save(self):
        os.makedirs(CONFIG_DIR, exist_ok=True)
        with open(CONFIG_FILE, "w", encoding="utf-8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def set(self, key, value):
        self.data[key] = value
        self.save()

    def surface_settings(self) -> SurfaceSettings:
        """Typed view of the surface keys; bad values fall back to their defaults."""
        height = _non_negative_number(self.get("surface_default_height"))
        if not height:
            height = float(DEFAULT_SURFACE_HEIGHT)
        debounce = _non_negative_number(self.get("height_debounce_ms"))
        if debounce is None:
            debounce = HEIGHT_DEBOUNCE_MS
        channel_tag = self.get("channel_tag")
        if not isinstance(channel_tag, str) or not channel_tag.strip():
            channel_tag = CHANNEL_TAG
        return SurfaceSettings(
            renderer_mode=str(self.get("renderer_mode") or RENDERER_MODE_AUTO).strip().lower(),
            default_height=height,
            debounce_ms=int(debounce),
            channel_tag=channel_tag,
            load_remote_images=bool(self.get("load_remote_images", True)),
        )


__all__ = ["Config", "DEFAULTS", "SurfaceSettings"]
