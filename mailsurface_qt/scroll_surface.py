class ScrollBarPosition:
    """Read view of a QScrollArea's vertical scroll state."""

    def __init__(self, scroll_area):
        self._scroll_area = scroll_area

    @property
    def pixels(self) -> float:
        return float(self._scroll_area.verticalScrollBar().value())

    @property
    def max_scroll_extent(self) -> float:
        return float(self._scroll_area.verticalScrollBar().maximum())

    @property
    def has_content_dimensions(self) -> bool:
        content = self._scroll_area.widget()
        return content is not None and content.height() > 0


class ScrollAreaSurface:
    def __init__(self, scroll_area):
        self._scroll_area = scroll_area
        self._position = ScrollBarPosition(scroll_area)

    @property
    def has_clients(self) -> bool:
        return self._scroll_area is not None and self._scroll_area.widget() is not None

    @property
    def position(self) -> ScrollBarPosition:
        return self._position

    def jump_to(self, offset):
        self._scroll_area.verticalScrollBar().setValue(int(round(offset)))


__all__ = ["ScrollAreaSurface", "ScrollBarPosition"]
