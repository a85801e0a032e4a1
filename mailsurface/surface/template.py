import json

from mailsurface.constants import (
    CHANNEL_TAG,
    HEIGHT_DEBOUNCE_MS,
    HEIGHT_REMEASURE_DELAYS_MS,
    SURFACE_BRIDGE_OBJECT_NAME,
    SURFACE_CONFIG_GLOBAL,
    SURFACE_HEIGHT_PADDING_PX,
    SURFACE_RECEIVE_FUNCTION,
)

SURFACE_STYLE_ID = "mailsurface-light-style"

SURFACE_HEAD = (
    "<meta charset='UTF-8'>"
    "<meta name='viewport' content='width=device-width, initial-scale=1.0'>"
    "<base target='_blank'>"
    "<meta name='color-scheme' content='light'>"
    "<meta name='supported-color-schemes' content='light'>"
    f"<style id='{SURFACE_STYLE_ID}'>"
    ":root{color-scheme:light !important;}"
    "html,body{margin:0;padding:16px;"
    "font-family:system-ui,-apple-system,'Segoe UI',Roboto,Arial,sans-serif;"
    "font-size:14px;line-height:1.5;"
    "color:#333333 !important;background:#ffffff !important;"
    "overflow-x:auto !important;overflow-y:hidden !important;min-width:fit-content;}"
    "@media (prefers-color-scheme: dark){"
    "html,body{color:#333333 !important;background:#ffffff !important;}}"
    "img{max-width:100%;height:auto;}"
    "</style>"
)

# Reads its settings from the config global written just before it.
SURFACE_SCRIPT = """
(function () {
  var config = window.%(config_global)s || {};
  var channelTag = config.channel;
  var lastReportedHeight = 0;
  var heightTimer = null;
  var outbox = [];
  var bridge = null;

  function deliver(message) {
    message.channel = channelTag;
    var text = JSON.stringify(message);
    if (bridge) {
      bridge.postMessage(text);
    } else {
      outbox.push(text);
    }
  }

  function connectBridge() {
    if (typeof QWebChannel === 'undefined' || !window.qt || !qt.webChannelTransport) {
      return;
    }
    new QWebChannel(qt.webChannelTransport, function (channel) {
      bridge = channel.objects[config.bridge] || null;
      while (bridge && outbox.length) {
        bridge.postMessage(outbox.shift());
      }
    });
  }

  function measureHeight() {
    var bodyH = document.body ? document.body.scrollHeight : 0;
    var docH = document.documentElement.scrollHeight;
    return Math.min(bodyH, docH) + config.padding;
  }

  function reportHeightDebounced() {
    clearTimeout(heightTimer);
    heightTimer = setTimeout(function () {
      var h = measureHeight();
      if (h !== lastReportedHeight) {
        lastReportedHeight = h;
        deliver({ type: 'heightReport', height: h });
      }
    }, config.debounceMs);
  }

  window.addEventListener('load', reportHeightDebounced);
  window.addEventListener('resize', reportHeightDebounced);
  (config.remeasureDelays || []).forEach(function (delay) {
    setTimeout(reportHeightDebounced, delay);
  });
  new MutationObserver(reportHeightDebounced).observe(document.documentElement, {
    childList: true, subtree: true, attributes: true, characterData: true
  });
  document.querySelectorAll('img').forEach(function (img) {
    if (img.complete) {
      reportHeightDebounced();
    } else {
      img.addEventListener('load', reportHeightDebounced);
    }
  });

  window.addEventListener('wheel', function (e) {
    if (Math.abs(e.deltaY) > Math.abs(e.deltaX)) {
      e.preventDefault();
      deliver({ type: 'scrollFromSurface', deltaY: e.deltaY });
    }
  }, { passive: false });

  window.%(receive_function)s = function (raw) {
    if (typeof raw !== 'string') {
      return;
    }
    var msg;
    try {
      msg = JSON.parse(raw);
    } catch (err) {
      return;
    }
    if (!msg || typeof msg !== 'object' || msg.channel !== channelTag) {
      return;
    }
    if (msg.type === 'scrollFromHost') {
      window.scrollTo(0, Number(msg.scrollOffset) || 0);
    }
  };
  window.addEventListener('message', function (event) {
    window.%(receive_function)s(event.data);
  });

  connectBridge();
  reportHeightDebounced();
})();
""" % {
    "config_global": SURFACE_CONFIG_GLOBAL,
    "receive_function": SURFACE_RECEIVE_FUNCTION,
}


def _script_json(payload):
    return json.dumps(payload).replace("</", "<\\/")


def build_surface_config(
    channel_tag=CHANNEL_TAG,
    debounce_ms=HEIGHT_DEBOUNCE_MS,
    remeasure_delays=HEIGHT_REMEASURE_DELAYS_MS,
    padding=SURFACE_HEIGHT_PADDING_PX,
    bridge_name=SURFACE_BRIDGE_OBJECT_NAME,
):
    return {
        "channel": channel_tag,
        "debounceMs": int(debounce_ms),
        "remeasureDelays": [int(delay) for delay in remeasure_delays],
        "padding": int(padding),
        "bridge": bridge_name,
    }


def build_surface_document(resolved_markup, **config_overrides) -> str:
    """Wrap resolved markup in the isolated, instrumented surface document."""
    config = build_surface_config(**config_overrides)
    return (
        "<!DOCTYPE html>"
        "<html><head>"
        f"{SURFACE_HEAD}"
        "</head><body>"
        f"{resolved_markup or ''}"
        f"<script>window.{SURFACE_CONFIG_GLOBAL} = {_script_json(config)};</script>"
        f"<script>{SURFACE_SCRIPT}</script>"
        "</body></html>"
    )


__all__ = [
    "SURFACE_HEAD",
    "SURFACE_SCRIPT",
    "SURFACE_STYLE_ID",
    "build_surface_config",
    "build_surface_document",
]
