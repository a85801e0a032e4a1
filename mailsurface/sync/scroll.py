import logging
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger(__name__)


class FrameScheduler(Protocol):
    def schedule_frame(self) -> None: ...

    def add_post_frame_callback(self, callback) -> None: ...


class ScrollPosition(Protocol):
    pixels: float
    max_scroll_extent: float
    has_content_dimensions: bool


class ScrollSurface(Protocol):
    has_clients: bool
    position: ScrollPosition

    def jump_to(self, offset: float) -> None: ...


@dataclass
class ScrollAccumulator:
    pending_delta: float = 0.0
    apply_scheduled: bool = False


class ScrollCoordinator:
    """Folds surface wheel deltas into at most one host scroll per paint cycle."""

    def __init__(self, scroll_surface: ScrollSurface, scheduler: FrameScheduler):
        self._scroll_surface = scroll_surface
        self._scheduler = scheduler
        self.accumulator = ScrollAccumulator()
        self._disposed = False

    @property
    def disposed(self) -> bool:
        return self._disposed

    def on_scroll_delta(self, delta):
        if self._disposed:
            return
        self.accumulator.pending_delta += float(delta)
        if self.accumulator.apply_scheduled:
            return
        self.accumulator.apply_scheduled = True
        self._scheduler.schedule_frame()
        self._scheduler.add_post_frame_callback(self._apply_pending)

    def dispose(self):
        self._disposed = True
        self.accumulator.pending_delta = 0.0
        self.accumulator.apply_scheduled = False

    def _apply_pending(self, *_):
        if self._disposed:
            return
        delta = self.accumulator.pending_delta
        self.accumulator.pending_delta = 0.0
        self.accumulator.apply_scheduled = False

        surface = self._scroll_surface
        if not surface.has_clients:
            logger.debug("Dropping scroll delta %.1f: no scroll clients", delta)
            return
        position = surface.position
        if not position.has_content_dimensions or position.max_scroll_extent < 0:
            logger.debug("Dropping scroll delta %.1f: position not ready", delta)
            return
        if delta == 0:
            return

        try:
            pointer_scroll = getattr(position, "pointer_scroll", None)
            if callable(pointer_scroll):
                pointer_scroll(delta)
                return
            target = min(max(position.pixels + delta, 0.0), float(position.max_scroll_extent))
            surface.jump_to(target)
        except Exception:
            logger.exception("Applying scroll delta %.1f failed", delta)


__all__ = ["FrameScheduler", "ScrollAccumulator", "ScrollCoordinator", "ScrollPosition", "ScrollSurface"]
