from __future__ import annotations

import math
import re
from typing import Callable, Dict, Mapping, Optional, Union

ParamValue = Union[str, float]
Decoder = Callable[[str], ParamValue]

# Longest numeric prefix accepted by JavaScript's parseFloat
_FLOAT_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)


def parse_float(text: str) -> float:
    """Parse like JavaScript ``parseFloat``.

    Leading whitespace is skipped, trailing garbage ignored, and ``nan`` is
    returned when no numeric prefix is present.
    """
    m = _FLOAT_PREFIX.match(text.lstrip())
    if m is None:
        return math.nan
    token = m.group(0)
    if token.lstrip("+-") == "Infinity":
        return -math.inf if token.startswith("-") else math.inf
    return float(token)


def decode_text(body: str) -> str:
    return body.strip()


def decode_optional_number(body: str) -> ParamValue:
    trimmed = body.strip()
    if trimmed == "":
        return ""
    return parse_float(trimmed)


def decode_number(body: str) -> float:
    return parse_float(body)


DEFAULT_DECODERS: Dict[str, Decoder] = {
    "hostname": decode_text,
    "snapserver_host": decode_text,
    "snapserver_port": decode_optional_number,
}


class DecoderTable:
    """Key -> decoder mapping with a fallback for keys not listed."""

    def __init__(self, decoders: Optional[Mapping[str, Decoder]] = None, default: Decoder = decode_number) -> None:
        self._decoders: Dict[str, Decoder] = dict(DEFAULT_DECODERS if decoders is None else decoders)
        self.default = default

    def decoder_for(self, key: str) -> Decoder:
        return self._decoders.get(key, self.default)

    def decode(self, key: str, body: str) -> ParamValue:
        return self.decoder_for(key)(body)

    def register(self, key: str, decoder: Decoder) -> None:
        self._decoders[key] = decoder

    def keys(self):
        return self._decoders.keys()
