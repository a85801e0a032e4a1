"""Scroll and height synchronization between host and surface."""

from mailsurface.sync.height import HeightNegotiator, NegotiatedHeight
from mailsurface.sync.scroll import ScrollAccumulator, ScrollCoordinator

__all__ = ["HeightNegotiator", "NegotiatedHeight", "ScrollAccumulator", "ScrollCoordinator"]
