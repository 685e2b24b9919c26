from __future__ import annotations
import os
from typing import Any, Dict

import yaml

DEFAULT_CFG: Dict[str, Any] = {
    "server": {"host": "0.0.0.0", "port": 8095},
    "client": {
        # URL the config UI is opened with; a ?backend=... query overrides the device origin
        "page_url": "",
        # explicit override, wins over page_url
        "backend": "",
        # origin of the device that hosts the UI (same-origin requests and DELETE)
        "device_url": "",
        "request_timeout": 5.0,
    },
}

_ENV_OVERRIDES = {
    "SNAPCLIENT_PAGE_URL": "page_url",
    "SNAPCLIENT_BACKEND": "backend",
    "SNAPCLIENT_DEVICE_URL": "device_url",
}


def load_config(config_path: str | None = None) -> Dict[str, Any]:
    path = config_path or os.environ.get("PARAM_CLIENT_CFG", "modules/param_client/config/config.yml")
    data: Dict[str, Any] = {}
    if path and os.path.exists(path):
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    # shallow merge, one level deep for dict sections
    cfg: Dict[str, Any] = {k: (dict(v) if isinstance(v, dict) else v) for k, v in DEFAULT_CFG.items()}
    for k, v in (data or {}).items():
        if isinstance(v, dict) and isinstance(cfg.get(k), dict):
            cfg[k].update(v)
        else:
            cfg[k] = v
    for env_name, key in _ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            cfg["client"][key] = value
    return cfg
