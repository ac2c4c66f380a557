"""Codec assembled from two plain functions."""

from typing import Any, Callable, Optional

from .types import restore
from ..core.exceptions import EncodeError, DecodeError


class FunctionCodec:
    """Adapt an ``encode``/``decode`` function pair to the Codec protocol.
    
    The empty-payload convention is applied here, so the functions only
    ever see real values and non-empty bytes.
    
    Example:
        codec = FunctionCodec(
            encode=lambda v: json.dumps(v).encode(),
            decode=lambda b: json.loads(b),
        )
    """
    
    format_name = "function"
    
    def __init__(self, encode: Callable[[Any], bytes], decode: Callable[[bytes], Any]):
        self._encode = encode
        self._decode = decode
    
    def encode(self, value: Any) -> bytes:
        if value is None:
            return b""
        try:
            return bytes(self._encode(value))
        except Exception as e:
            raise EncodeError(
                f"Encoding failed: {e}",
                serializer_type=self.format_name,
                original_error=e,
            ) from e
    
    def decode(self, data: bytes, into: Optional[Any] = None) -> Any:
        if not data:
            return None
        try:
            return restore(self._decode(data), into)
        except Exception as e:
            raise DecodeError(
                f"Decoding failed: {e}",
                serializer_type=self.format_name,
                original_error=e,
            ) from e
