import pytest

from mailsurface.errors import ValidationError
from mailsurface.render import FallbackRenderer, create_mail_renderer
from mailsurface.surface.errors import SurfaceUnavailableError
from mailsurface.surface.runtime import SurfaceRuntimeInfo, SurfaceRuntimeStatus

READY = SurfaceRuntimeInfo(SurfaceRuntimeStatus.READY, "ok")
MISSING = SurfaceRuntimeInfo(SurfaceRuntimeStatus.MISSING_RUNTIME, "no webengine")


class _Builder:
    def __init__(self):
        self.calls = 0
        self.renderer = object()

    def __call__(self):
        self.calls += 1
        return self.renderer


def test_auto_mode_uses_sandboxed_renderer_when_runtime_ready():
    builder = _Builder()
    assert create_mail_renderer(READY, builder) is builder.renderer
    assert builder.calls == 1


def test_auto_mode_falls_back_without_runtime():
    builder = _Builder()

    renderer = create_mail_renderer(MISSING, builder, default_height=300)

    assert isinstance(renderer, FallbackRenderer)
    assert renderer.current_height == 300.0
    assert builder.calls == 0


def test_fallback_mode_never_builds_sandboxed_renderer():
    builder = _Builder()
    assert isinstance(create_mail_renderer(READY, builder, mode="Fallback"), FallbackRenderer)
    assert builder.calls == 0


def test_sandboxed_mode_requires_runtime():
    with pytest.raises(SurfaceUnavailableError):
        create_mail_renderer(MISSING, _Builder(), mode="sandboxed")


def test_unknown_mode_is_rejected():
    with pytest.raises(ValidationError):
        create_mail_renderer(READY, _Builder(), mode="native")


def test_empty_mode_means_auto():
    builder = _Builder()
    assert create_mail_renderer(READY, builder, mode=None) is builder.renderer


class _UnavailableBuilder:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1
        raise SurfaceUnavailableError("qwebchannel.js resource is not available.")


def test_auto_mode_falls_back_when_surface_construction_fails():
    builder = _UnavailableBuilder()

    renderer = create_mail_renderer(READY, builder, default_height=280)

    assert isinstance(renderer, FallbackRenderer)
    assert renderer.current_height == 280.0
    assert builder.calls == 1


def test_sandboxed_mode_propagates_surface_construction_failure():
    with pytest.raises(SurfaceUnavailableError):
        create_mail_renderer(READY, _UnavailableBuilder(), mode="sandboxed")
