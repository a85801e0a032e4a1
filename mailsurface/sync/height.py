import logging
import math
from dataclasses import dataclass

from mailsurface.constants import DEFAULT_SURFACE_HEIGHT

logger = logging.getLogger(__name__)


@dataclass
class NegotiatedHeight:
    last_reported_height: float = float(DEFAULT_SURFACE_HEIGHT)


class HeightNegotiator:
    def __init__(self, on_height_changed=None, default_height=DEFAULT_SURFACE_HEIGHT):
        self.on_height_changed = on_height_changed
        self.state = NegotiatedHeight(last_reported_height=float(default_height))
        self._disposed = False

    @property
    def current_height(self) -> float:
        return self.state.last_reported_height

    @property
    def disposed(self) -> bool:
        return self._disposed

    def on_height_report(self, height) -> bool:
        if self._disposed:
            return False
        value = float(height)
        if not math.isfinite(value) or value < 0:
            logger.debug("Ignoring invalid height report: %r", height)
            return False
        if value == self.state.last_reported_height:
            return False
        self.state.last_reported_height = value
        logger.debug("Surface height set to %.1f", value)
        if self.on_height_changed is not None:
            self.on_height_changed(value)
        return True

    def dispose(self):
        self._disposed = True
        self.on_height_changed = None


__all__ = ["HeightNegotiator", "NegotiatedHeight"]
