from __future__ import annotations
from typing import Any, Dict

from fastapi import FastAPI

from .config_loader import load_config
from .services.client import ParamClient
from .services.origin import page_origin, resolve_backend_origin
from .api.router import get_router


def build_client(cfg: Dict[str, Any]) -> ParamClient:
    ccfg = cfg.get("client", {})
    page_url = str(ccfg.get("page_url") or "")
    backend = str(ccfg.get("backend") or "") or resolve_backend_origin(page_url)
    return ParamClient(
        backend_origin=backend,
        page_origin=str(ccfg.get("device_url") or "") or page_origin(page_url),
        request_timeout=float(ccfg.get("request_timeout", 5.0)),
    )


def create_app(config_path: str | None = None) -> FastAPI:
    cfg = load_config(config_path)
    client = build_client(cfg)
    app = FastAPI(title="Snapclient Config UI")
    app.state.cfg = cfg  # type: ignore[attr-defined]
    app.state.client = client  # type: ignore[attr-defined]
    app.include_router(get_router(client))
    return app


if __name__ == "__main__":
    import uvicorn
    cfg = load_config(None)
    uvicorn.run(create_app(), host=str(cfg["server"]["host"]), port=int(cfg["server"]["port"]))
