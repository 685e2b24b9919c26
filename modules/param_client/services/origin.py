from __future__ import annotations

import logging
from urllib.parse import parse_qs, urlsplit

logger = logging.getLogger("param_client.origin")

BACKEND_QUERY_PARAM = "backend"


def resolve_backend_origin(page_url: str) -> str:
    """Return the ``backend`` query parameter of ``page_url``, or ``""``.

    An empty result means requests stay on the page's own origin. This lets
    the UI be served from a development host while talking to a real device,
    e.g. ``http://localhost:8095/?backend=http://192.168.1.100``.
    """
    query = urlsplit(page_url or "").query
    backend = parse_qs(query).get(BACKEND_QUERY_PARAM, [""])[0]
    if backend:
        logger.info("Using backend: %s", backend)
        return backend
    return ""


def page_origin(page_url: str) -> str:
    """``scheme://host[:port]`` of ``page_url``; ``""`` for relative URLs."""
    parts = urlsplit(page_url or "")
    if not parts.scheme or not parts.netloc:
        return ""
    return f"{parts.scheme}://{parts.netloc}"
