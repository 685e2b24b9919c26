"""Parameter client for the snapclient configuration UI.

Reads, writes and clears device parameters over the device's /get, /post
and /delete endpoints, plus loading/error markup helpers for the pages.
"""
from .services.client import (
    AsyncParamClient,
    HttpStatusError,
    NetworkFault,
    ParamClient,
    ParamResult,
    RequestError,
)
from .services.feedback import show_error, show_loading
from .services.origin import resolve_backend_origin

__all__ = [
    "AsyncParamClient",
    "HttpStatusError",
    "NetworkFault",
    "ParamClient",
    "ParamResult",
    "RequestError",
    "resolve_backend_origin",
    "show_error",
    "show_loading",
]
