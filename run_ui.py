from __future__ import annotations
"""
Snapclient config UI launcher
- central logging
- parameter proxy app
- served with uvicorn
"""
import os
import sys

import uvicorn

ROOT = os.path.dirname(os.path.abspath(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


def main() -> None:
    from modules.logwrapper import init_logging, get_router as get_log_router
    from modules.param_client.config_loader import load_config
    from modules.param_client.xParamClientService import create_app

    init_logging()

    cfg = load_config()
    app = create_app()
    app.include_router(get_log_router())

    uvicorn.run(app, host=str(cfg["server"]["host"]), port=int(cfg["server"]["port"]))


if __name__ == "__main__":
    main()
