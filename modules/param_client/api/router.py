from __future__ import annotations

import math
from typing import Any, Dict

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse

from ..services.client import ParamClient, format_value
from ..services.feedback import HtmlFragment, show_error


def _jsonable(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def get_router(client: ParamClient) -> APIRouter:
    r = APIRouter(prefix="/device", tags=["device"])

    @r.get("/healthz")
    def healthz():
        return {"ok": True, "backend": client.backend_origin}

    @r.get("/params/{key}")
    def read_param(key: str) -> Dict[str, Any]:
        result = client.fetch_parameter(key)
        if not result.ok:
            raise HTTPException(status_code=502, detail=f"could not read {key}: {result.error}")
        return {"key": key, "value": _jsonable(result.value)}

    @r.post("/params/{key}")
    def write_param(key: str, value: str) -> Dict[str, Any]:
        return {"ok": client.set_parameter(key, value)}

    @r.delete("/params/{key}")
    def clear_param(key: str) -> Dict[str, Any]:
        return {"ok": client.delete_parameter(key)}

    @r.get("/capabilities")
    def capabilities(tab: str = "general") -> Dict[str, Any]:
        data = client.get_capabilities(tab)
        if data is None:
            raise HTTPException(status_code=502, detail=f"could not read capabilities for {tab}")
        return data

    @r.post("/restart")
    def restart() -> Dict[str, Any]:
        return {"ok": client.restart_device()}

    @r.get("/panel/{key}", response_class=HTMLResponse)
    def panel(key: str):
        fragment = HtmlFragment()
        result = client.fetch_parameter(key)
        if result.ok:
            value = _jsonable(result.value)
            fragment.inner_html = f'<span class="value">{"" if value is None else format_value(value)}</span>'
        else:
            show_error(f"Failed to load {key}", fragment)
        return HTMLResponse(str(fragment))

    return r
