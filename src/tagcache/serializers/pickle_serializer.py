"""Pickle codec for cached values.

Only use with a trusted backend: unpickling executes code.
"""

import pickle
from typing import Any, Optional

from .types import restore
from ..core.exceptions import EncodeError, DecodeError


class PickleCodec:
    """Pickle codec preserving arbitrary Python objects."""
    
    format_name = "pickle"
    
    def __init__(self, protocol: int = pickle.HIGHEST_PROTOCOL):
        self._protocol = protocol
    
    def encode(self, value: Any) -> bytes:
        """Encode value with pickle."""
        if value is None:
            return b""
        
        try:
            return pickle.dumps(value, protocol=self._protocol)
        except (pickle.PicklingError, TypeError, AttributeError) as e:
            raise EncodeError(
                f"Pickle encoding failed: {e}",
                serializer_type=self.format_name,
                original_error=e,
            ) from e
    
    def decode(self, data: bytes, into: Optional[Any] = None) -> Any:
        """Decode pickled bytes, rebuilding the result as ``into``."""
        if not data:
            return None
        
        try:
            return restore(pickle.loads(data), into)
        except Exception as e:
            raise DecodeError(
                f"Pickle decoding failed: {e}",
                serializer_type=self.format_name,
                original_error=e,
            ) from e
