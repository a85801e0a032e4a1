import json

from mailsurface.domain.models import AttachmentMeta, MailBody
from mailsurface.render import SandboxedRenderer
from mailsurface.surface.registry import SurfaceRegistry

TAG = "mailsurface-channel"


class _FakeHost:
    def __init__(self):
        self.mounted = []
        self.sent = []
        self.listener = None
        self.listener_history = []

    def mount(self, reference, document):
        self.mounted.append((reference, document))

    def send(self, raw):
        self.sent.append(raw)

    def set_listener(self, callback):
        self.listener = callback
        self.listener_history.append(callback)


class _FakeScheduler:
    def __init__(self):
        self.callbacks = []

    def schedule_frame(self):
        pass

    def add_post_frame_callback(self, callback):
        self.callbacks.append(callback)

    def flush(self):
        callbacks, self.callbacks = self.callbacks, []
        for callback in callbacks:
            callback()


class _FakePosition:
    pixels = 0.0
    max_scroll_extent = 500.0
    has_content_dimensions = True


class _FakeScrollSurface:
    has_clients = True

    def __init__(self):
        self.position = _FakePosition()
        self.jumps = []

    def jump_to(self, offset):
        self.jumps.append(offset)


class _DeferredSubmit:
    def __init__(self):
        self.jobs = []

    def __call__(self, fn, on_result, on_error=None):
        self.jobs.append((fn, on_result))

    def run_all(self):
        jobs, self.jobs = self.jobs, []
        for fn, on_result in jobs:
            on_result(fn())


def _immediate_submit(fn, on_result, on_error=None):
    on_result(fn())


def _build(submit=_immediate_submit, fetch=None, registry=None):
    host = _FakeHost()
    scheduler = _FakeScheduler()
    scroll_surface = _FakeScrollSurface()
    heights = []
    renderer = SandboxedRenderer(
        surface_host=host,
        scroll_surface=scroll_surface,
        scheduler=scheduler,
        submit=submit,
        fetch_attachment=fetch or (lambda _mail_id, _attachment_id: b"0123456789"),
        registry=registry,
        on_height_changed=heights.append,
        channel_tag=TAG,
    )
    renderer.initialize()
    return renderer, host, scheduler, scroll_surface, heights


def _inline_mail(mail_id="msg-1"):
    return MailBody(
        mail_id=mail_id,
        html_content="<p>Logo</p><img src='cid:logo@mail'>",
        attachments=(AttachmentMeta(attachment_id="att-1", mime_type="image/png", content_id="<logo@mail>"),),
    )


def test_initialize_registers_channel_listener():
    renderer, host, *_ = _build()
    assert host.listener == renderer.channel.receive


def test_render_mounts_resolved_surface_once():
    renderer, host, *_ = _build()
    mail = _inline_mail()

    renderer.render(mail)
    renderer.render(mail)

    assert len(host.mounted) == 1
    reference, document = host.mounted[0]
    assert reference == renderer.current_reference
    assert "data:image/png;base64,MDEyMzQ1Njc4OQ==" in document
    assert "cid:logo@mail" not in document
    assert len(renderer.registry) == 1


def test_fetch_receives_mail_and_attachment_ids():
    calls = []

    def _fetch(mail_id, attachment_id):
        calls.append((mail_id, attachment_id))
        return b"x"

    renderer, *_ = _build(fetch=_fetch)
    renderer.render(_inline_mail("msg-9"))

    assert calls == [("msg-9", "att-1")]


def test_plain_text_mail_is_escaped_into_surface():
    renderer, host, *_ = _build()

    renderer.render(MailBody(mail_id="msg-2", text_content="a < b\nsecond line"))

    _, document = host.mounted[0]
    assert "a &lt; b<br>second line" in document


def test_superseded_mail_is_never_mounted():
    submit = _DeferredSubmit()
    renderer, host, *_ = _build(submit=submit)

    renderer.render(_inline_mail("msg-1"))
    renderer.render(
        MailBody(
            mail_id="msg-2",
            html_content="<img src='cid:logo@mail'><p>second</p>",
            attachments=_inline_mail().attachments,
        )
    )
    submit.run_all()

    assert len(host.mounted) == 1
    assert "second" in host.mounted[0][1]


def test_identical_content_reuses_registration():
    registry = SurfaceRegistry()
    renderer, host, *_ = _build(registry=registry)

    renderer.render(MailBody(mail_id="a", html_content="<p>Same</p>"))
    renderer.render(MailBody(mail_id="b", html_content="<p>Same</p>"))

    assert len(registry) == 1
    assert len(host.mounted) == 1


def test_surface_messages_drive_height_and_scroll():
    renderer, host, scheduler, scroll_surface, heights = _build()
    renderer.render(_inline_mail())

    host.listener(json.dumps({"channel": TAG, "type": "heightReport", "height": 812}))
    host.listener(json.dumps({"channel": TAG, "type": "heightReport", "height": 812}))
    host.listener(json.dumps({"channel": TAG, "type": "scrollFromSurface", "deltaY": 40}))
    host.listener(json.dumps({"channel": "other", "type": "scrollFromSurface", "deltaY": 400}))
    scheduler.flush()

    assert heights == [812.0]
    assert renderer.current_height == 812.0
    assert scroll_surface.jumps == [40.0]


def test_scroll_surface_to_sends_tagged_message():
    renderer, host, *_ = _build()

    assert renderer.scroll_surface_to(120)

    assert json.loads(host.sent[0]) == {"channel": TAG, "type": "scrollFromHost", "scrollOffset": 120.0}


def test_dispose_detaches_listener_and_silences_everything():
    submit = _DeferredSubmit()
    renderer, host, scheduler, scroll_surface, heights = _build(submit=submit)
    receive = host.listener
    renderer.render(_inline_mail())

    renderer.dispose()
    submit.run_all()
    receive(json.dumps({"channel": TAG, "type": "heightReport", "height": 600}))
    scheduler.flush()

    assert host.listener is None
    assert host.mounted == []
    assert heights == []
    assert not renderer.scroll_surface_to(10)
    assert renderer.render(_inline_mail()) is None


def test_injected_registry_is_kept_even_when_empty():
    shared = SurfaceRegistry()
    renderer, *_ = _build(registry=shared)

    assert renderer.registry is shared


def test_renderers_sharing_a_registry_build_identical_content_once():
    built = []

    def _builder(markup):
        built.append(markup)
        return f"<doc>{markup}</doc>"

    shared = SurfaceRegistry(document_builder=_builder)
    first, first_host, *_ = _build(registry=shared)
    second, second_host, *_ = _build(registry=shared)

    first.render(MailBody(mail_id="a", html_content="<p>Same</p>"))
    second.render(MailBody(mail_id="b", html_content="<p>Same</p>"))

    assert built == ["<p>Same</p>"]
    assert len(shared) == 1
    assert first_host.mounted[0][1] == second_host.mounted[0][1] == "<doc><p>Same</p></doc>"
