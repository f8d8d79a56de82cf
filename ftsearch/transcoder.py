# ftsearch/transcoder.py
import json
from typing import Any, Protocol


class Transcoder(Protocol):
    """Decodes stored field payloads of result rows."""

    def decode(self, data: bytes) -> Any: ...


class JsonTranscoder:
    """Decodes JSON payloads."""

    def decode(self, data: bytes) -> Any:
        return json.loads(data)
