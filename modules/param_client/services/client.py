from __future__ import annotations

import asyncio
import logging
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote

import requests

from .decoders import Decoder, DecoderTable, ParamValue

logger = logging.getLogger("param_client.client")

# Characters encodeURIComponent leaves untouched besides the unreserved set
_URI_COMPONENT_SAFE = "!*'()"


class RequestError(Exception):
    """A request to the device did not produce a successful response."""

    def __init__(self, endpoint: str, message: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.endpoint = endpoint
        self.status = status


class NetworkFault(RequestError):
    """The transport failed before any response arrived."""


class HttpStatusError(RequestError):
    """The device answered with a non-2xx status."""

    def __init__(self, endpoint: str, status: int) -> None:
        super().__init__(endpoint, f"HTTP error! status: {status}", status=status)


@dataclass
class ParamResult:
    ok: bool
    value: Any = None
    error: Optional[Exception] = None

    @classmethod
    def success(cls, value: Any = None) -> "ParamResult":
        return cls(True, value)

    @classmethod
    def failure(cls, error: Exception) -> "ParamResult":
        return cls(False, None, error)


def _js_number(value: float) -> str:
    """Number.prototype.toString for a float."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    # repr gives the shortest round-tripping digits, as JS does
    _, digit_tuple, exp = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = k + exp
    if k <= n <= 21:
        body = digits + "0" * (n - k)
    elif 0 < n <= 21:
        body = digits[:n] + "." + digits[n:]
    elif -6 < n <= 0:
        body = "0." + "0" * -n + digits
    else:
        e = n - 1
        mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
        body = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return sign + body


def format_value(value: Any) -> str:
    """Stringify ``value`` the way a browser would before URL encoding."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _js_number(value)
    if value is None:
        return "null"
    return str(value)


def encode_uri_component(value: Any) -> str:
    return quote(format_value(value), safe=_URI_COMPONENT_SAFE)


class ParamClient:
    """Reads and writes device parameters over /get, /post and /delete.

    ``backend_origin`` is the override resolved from the page URL (``""``
    for none); ``page_origin`` is where the UI itself is served from, also
    ``""`` for relative URLs. DELETE always goes to ``page_origin``.
    """

    def __init__(
        self,
        backend_origin: str = "",
        page_origin: str = "",
        decoders: Optional[Mapping[str, Decoder]] = None,
        request_timeout: float = 5.0,
    ) -> None:
        self.backend_origin = (backend_origin or "").rstrip("/")
        self.page_origin = (page_origin or "").rstrip("/")
        self.decoders = decoders if isinstance(decoders, DecoderTable) else DecoderTable(decoders)
        self.timeout = float(request_timeout)

    @property
    def origin(self) -> str:
        return self.backend_origin or self.page_origin

    def url_for(self, endpoint: str) -> str:
        return self.origin + endpoint

    # Low level: raise RequestError

    def get_request(self, endpoint: str) -> requests.Response:
        try:
            resp = requests.get(self.url_for(endpoint), timeout=self.timeout)
            return self._check(endpoint, resp)
        except Exception as exc:
            err = self._as_request_error(endpoint, exc)
            logger.error("Error fetching %s: %s", endpoint, err)
            raise err from exc

    def post_request(self, endpoint: str, data: Optional[Dict[str, Any]] = None) -> requests.Response:
        try:
            if data is not None:
                resp = requests.post(
                    self.url_for(endpoint),
                    json=data,
                    headers={"Content-Type": "application/json"},
                    timeout=self.timeout,
                )
            else:
                resp = requests.post(self.url_for(endpoint), timeout=self.timeout)
            return self._check(endpoint, resp)
        except Exception as exc:
            err = self._as_request_error(endpoint, exc)
            logger.error("Error posting to %s: %s", endpoint, err)
            raise err from exc

    def delete_request(self, endpoint: str) -> requests.Response:
        # Same-origin only: the backend override is not applied here.
        try:
            resp = requests.delete(self.page_origin + endpoint, timeout=self.timeout)
            return self._check(endpoint, resp)
        except Exception as exc:
            err = self._as_request_error(endpoint, exc)
            logger.error("Error deleting %s: %s", endpoint, err)
            raise err from exc

    # Parameter operations

    def fetch_parameter(self, key: str) -> ParamResult:
        try:
            resp = self.get_request(f"/get?param={key}")
            value: ParamValue = self.decoders.decode(key, resp.text)
        except Exception as exc:
            logger.error("Error fetching parameter %s: %s", key, exc)
            return ParamResult.failure(exc)
        return ParamResult.success(value)

    def get_parameter(self, key: str) -> Optional[ParamValue]:
        """Current value of ``key``, or None when the read failed.

        Numeric keys may come back as ``nan``; callers treat that as unset.
        """
        return self.fetch_parameter(key).value

    def store_parameter(self, key: str, value: Any) -> ParamResult:
        try:
            self.post_request(f"/post?param={key}&value={encode_uri_component(value)}")
        except Exception as exc:
            logger.error("Error setting parameter %s: %s", key, exc)
            return ParamResult.failure(exc)
        return ParamResult.success(value)

    def set_parameter(self, key: str, value: Any) -> bool:
        return self.store_parameter(key, value).ok

    def remove_parameter(self, key: str) -> ParamResult:
        try:
            self.delete_request(f"/delete?param={key}")
        except Exception as exc:
            logger.error("Error deleting parameter %s: %s", key, exc)
            return ParamResult.failure(exc)
        return ParamResult.success()

    def delete_parameter(self, key: str) -> bool:
        """Clear ``key`` from device storage so it falls back to its default."""
        return self.remove_parameter(key).ok

    # Device endpoints outside the parameter triple

    def get_capabilities(self, tab: str = "general") -> Optional[Dict[str, Any]]:
        try:
            resp = self.get_request(f"/capabilities?tab={tab}")
            data = resp.json()
        except Exception as exc:
            logger.error("Error fetching capabilities %s: %s", tab, exc)
            return None
        if not isinstance(data, dict):
            logger.error("Unexpected capabilities payload for %s: %r", tab, data)
            return None
        return data

    def restart_device(self) -> bool:
        try:
            self.post_request("/restart")
        except Exception as exc:
            logger.error("Error restarting device: %s", exc)
            return False
        logger.info("Restart requested on %s", self.origin or "page origin")
        return True

    @staticmethod
    def _check(endpoint: str, resp: requests.Response) -> requests.Response:
        if not 200 <= resp.status_code < 300:
            raise HttpStatusError(endpoint, resp.status_code)
        return resp

    @staticmethod
    def _as_request_error(endpoint: str, exc: Exception) -> RequestError:
        if isinstance(exc, RequestError):
            return exc
        return NetworkFault(endpoint, str(exc) or exc.__class__.__name__)


class AsyncParamClient:
    """Awaitable facade; each call runs the blocking request in a worker thread.

    Overlapping calls are independent and may complete in any order.
    """

    def __init__(self, client: ParamClient) -> None:
        self.client = client

    async def fetch_parameter(self, key: str) -> ParamResult:
        return await asyncio.to_thread(self.client.fetch_parameter, key)

    async def get_parameter(self, key: str) -> Optional[ParamValue]:
        return await asyncio.to_thread(self.client.get_parameter, key)

    async def set_parameter(self, key: str, value: Any) -> bool:
        return await asyncio.to_thread(self.client.set_parameter, key, value)

    async def delete_parameter(self, key: str) -> bool:
        return await asyncio.to_thread(self.client.delete_parameter, key)

    async def get_capabilities(self, tab: str = "general") -> Optional[Dict[str, Any]]:
        return await asyncio.to_thread(self.client.get_capabilities, tab)

    async def restart_device(self) -> bool:
        return await asyncio.to_thread(self.client.restart_device)
