"""JSON codec for cached values."""

import json
from typing import Any, Optional

from .types import encode_extended, decode_extended, restore
from ..core.exceptions import EncodeError, DecodeError


class ExtendedJSONEncoder(json.JSONEncoder):
    """JSON encoder with tagged extended types."""
    
    def default(self, obj: Any) -> Any:
        if isinstance(obj, bytes):
            return {"__bytes__": obj.hex()}
        return encode_extended(obj)


class JsonCodec:
    """UTF-8 JSON codec, human-readable in the backend."""
    
    format_name = "json"
    
    def __init__(self, sort_keys: bool = False):
        self._sort_keys = sort_keys
    
    def encode(self, value: Any) -> bytes:
        """Encode value to JSON bytes."""
        if value is None:
            return b""
        
        try:
            return json.dumps(
                value,
                cls=ExtendedJSONEncoder,
                sort_keys=self._sort_keys,
                separators=(",", ":"),
                ensure_ascii=False,
            ).encode("utf-8")
        except (TypeError, ValueError, OverflowError) as e:
            raise EncodeError(
                f"JSON encoding failed: {e}",
                serializer_type=self.format_name,
                original_error=e,
            ) from e
    
    def decode(self, data: bytes, into: Optional[Any] = None) -> Any:
        """Decode JSON bytes, rebuilding the result as ``into``."""
        if not data:
            return None
        
        try:
            result = json.loads(data.decode("utf-8"), object_hook=decode_extended)
            return restore(result, into)
        except (UnicodeDecodeError, ValueError, TypeError) as e:
            raise DecodeError(
                f"JSON decoding failed: {e}",
                serializer_type=self.format_name,
                original_error=e,
            ) from e
