from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient

from modules.param_client.api import get_router
from modules.param_client.services.client import ParamClient


def _app() -> TestClient:
    app = FastAPI()
    app.include_router(get_router(ParamClient(backend_origin="http://host:1780")))
    return TestClient(app)


def test_healthz(device):
    body = _app().get("/device/healthz").json()
    assert body == {"ok": True, "backend": "http://host:1780"}
    assert device.calls == []


def test_read_param(device):
    device.reply(200, "1704")
    device.reply(200, "n/a")
    api = _app()
    assert api.get("/device/params/snapserver_port").json() == {"key": "snapserver_port", "value": 1704.0}
    # nan is reported as null
    assert api.get("/device/params/gain_1").json() == {"key": "gain_1", "value": None}


def test_read_param_failure_is_502(device):
    device.reply(500, "error")
    resp = _app().get("/device/params/hostname")
    assert resp.status_code == 502


def test_write_and_clear_param(device):
    device.reply(200, "ok")
    device.reply(500, "error")
    api = _app()
    assert api.post("/device/params/hostname", params={"value": "kitchen"}).json() == {"ok": True}
    assert device.calls[0]["url"] == "http://host:1780/post?param=hostname&value=kitchen"
    assert api.delete("/device/params/hostname").json() == {"ok": False}
    assert device.calls[1]["url"] == "/delete?param=hostname"


def test_capabilities_and_restart(device):
    device.reply(200, '{"dsp_enabled": false}')
    device.reply(500, "error")
    device.reply(200, "restarting")
    api = _app()
    assert api.get("/device/capabilities", params={"tab": "dsp"}).json() == {"dsp_enabled": False}
    assert api.get("/device/capabilities").status_code == 502
    assert api.post("/device/restart").json() == {"ok": True}


def test_panel_renders_value_or_error(device):
    device.reply(200, "esp32\n")
    device.reply(404, "0")
    api = _app()
    ok = api.get("/device/panel/hostname")
    assert ok.headers["content-type"].startswith("text/html")
    assert ok.text == '<span class="value">esp32</span>'
    failed = api.get("/device/panel/fc_1")
    assert failed.text == '<div class="error">Failed to load fc_1</div>'


def test_panel_renders_numbers_like_the_page(device):
    device.reply(200, "1704")
    device.reply(200, "")
    api = _app()
    assert api.get("/device/panel/snapserver_port").text == '<span class="value">1704</span>'
    # unset numeric value renders empty
    assert api.get("/device/panel/gain_1").text == '<span class="value"></span>'
