from mailsurface_qt import scheduling as scheduling_module
from mailsurface_qt.scheduling import QtFrameScheduler
from mailsurface_qt.scroll_surface import ScrollAreaSurface


class _FakeScrollBar:
    def __init__(self, value=0, maximum=0):
        self._value = value
        self._maximum = maximum

    def value(self):
        return self._value

    def maximum(self):
        return self._maximum

    def setValue(self, value):
        self._value = max(0, min(value, self._maximum))


class _FakeContent:
    def __init__(self, height):
        self._height = height

    def height(self):
        return self._height


class _FakeScrollArea:
    def __init__(self, content=None, value=0, maximum=0):
        self._content = content
        self._bar = _FakeScrollBar(value, maximum)

    def widget(self):
        return self._content

    def verticalScrollBar(self):
        return self._bar


class _FakeWidget:
    def __init__(self):
        self.updates = 0

    def update(self):
        self.updates += 1


def test_scroll_area_surface_reports_position():
    area = _FakeScrollArea(_FakeContent(1200), value=150, maximum=700)
    surface = ScrollAreaSurface(area)

    assert surface.has_clients
    assert surface.position.pixels == 150.0
    assert surface.position.max_scroll_extent == 700.0
    assert surface.position.has_content_dimensions


def test_scroll_area_surface_jump_to_rounds_offset():
    area = _FakeScrollArea(_FakeContent(1200), maximum=700)
    surface = ScrollAreaSurface(area)

    surface.jump_to(35.6)

    assert area.verticalScrollBar().value() == 36


def test_scroll_area_without_content_is_not_ready():
    surface = ScrollAreaSurface(_FakeScrollArea(None))
    assert not surface.has_clients
    assert not surface.position.has_content_dimensions

    laid_out_later = ScrollAreaSurface(_FakeScrollArea(_FakeContent(0)))
    assert not laid_out_later.position.has_content_dimensions


def test_frame_scheduler_requests_repaint_and_defers_callback(monkeypatch):
    deferred = []

    class _FakeTimer:
        @staticmethod
        def singleShot(msec, callback):
            deferred.append((msec, callback))

    monkeypatch.setattr(scheduling_module, "QTimer", _FakeTimer)
    widget = _FakeWidget()
    scheduler = QtFrameScheduler(widget)
    calls = []

    scheduler.schedule_frame()
    scheduler.add_post_frame_callback(lambda: calls.append("applied"))

    assert widget.updates == 1
    assert calls == []
    assert deferred[0][0] == 0

    deferred[0][1]()
    assert calls == ["applied"]
