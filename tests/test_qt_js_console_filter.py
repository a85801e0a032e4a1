from mailsurface_qt.webview_utils import (
    build_receive_script,
    is_external_link_scheme,
    is_js_noise_message,
    is_local_console_source,
)


def test_is_js_noise_message_filters_known_site_warnings():
    assert is_js_noise_message(
        "The resource https://example.com/x was preloaded using link preload but not used within a few seconds."
    )
    assert is_js_noise_message("Permissions policy violation: unload is not allowed in this document.")
    assert is_js_noise_message("Mixed Content: The page was loaded over HTTPS")


def test_is_js_noise_message_keeps_unknown_messages():
    assert not is_js_noise_message("TypeError: Cannot read properties of undefined")
    assert not is_js_noise_message("")


def test_is_local_console_source_identifies_local_sources():
    assert is_local_console_source("about:blank")
    assert is_local_console_source("file:///tmp/preview.html")
    assert is_local_console_source("qrc:/qtwebchannel/qwebchannel.js")
    assert is_local_console_source("data:text/html;base64,AAAA")


def test_is_local_console_source_ignores_remote_sources():
    assert not is_local_console_source("https://www.example.com")


def test_is_external_link_scheme():
    assert is_external_link_scheme("https")
    assert is_external_link_scheme("MAILTO")
    assert not is_external_link_scheme("file")
    assert not is_external_link_scheme("javascript")
    assert not is_external_link_scheme(None)


def test_build_receive_script_quotes_payload():
    script = build_receive_script('{"channel": "x", "type": "scrollFromHost", "scrollOffset": 5}')

    assert script.startswith("window.__mailsurfaceReceive && window.__mailsurfaceReceive(")
    assert '"{\\"channel\\": \\"x\\"' in script
    assert script.endswith(");")
