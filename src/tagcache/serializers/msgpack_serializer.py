"""MessagePack codec - the default wire representation of cached values."""

from typing import Any, Optional

import msgpack

from .types import encode_extended, decode_extended, restore
from ..core.exceptions import EncodeError, DecodeError


class MsgpackCodec:
    """MessagePack codec with extended type support.
    
    Features:
    - Binary MessagePack encoding, smaller than JSON and safer than pickle
    - datetime, date, Decimal, UUID, set, frozenset and complex support
    - Pydantic models and dataclasses encoded as maps and rebuilt via ``into``
    - ``None`` encodes to an empty payload
    """
    
    format_name = "msgpack"
    
    def __init__(self, use_single_float: bool = False, use_bin_type: bool = True):
        """Initialize MessagePack codec.
        
        Args:
            use_single_float: Use single precision for floats
            use_bin_type: Use bin type for binary data (recommended)
        """
        self._use_single_float = use_single_float
        self._use_bin_type = use_bin_type
    
    def encode(self, value: Any) -> bytes:
        """Encode value to MessagePack bytes."""
        if value is None:
            return b""
        
        try:
            return msgpack.packb(
                value,
                default=encode_extended,
                use_single_float=self._use_single_float,
                use_bin_type=self._use_bin_type,
            )
        except (TypeError, ValueError, OverflowError) as e:
            raise EncodeError(
                f"MessagePack encoding failed: {e}",
                serializer_type=self.format_name,
                original_error=e,
            ) from e
        except Exception as e:
            raise EncodeError(
                f"Unexpected MessagePack encoding error: {e}",
                serializer_type=self.format_name,
                original_error=e,
            ) from e
    
    def decode(self, data: bytes, into: Optional[Any] = None) -> Any:
        """Decode MessagePack bytes, rebuilding the result as ``into``."""
        if not data:
            return None
        
        try:
            result = msgpack.unpackb(
                data,
                object_hook=decode_extended,
                strict_map_key=False,
                raw=False,
            )
            return restore(result, into)
        except (msgpack.exceptions.ExtraData, msgpack.exceptions.UnpackException,
                ValueError, TypeError) as e:
            raise DecodeError(
                f"MessagePack decoding failed: {e}",
                serializer_type=self.format_name,
                original_error=e,
            ) from e
        except Exception as e:
            raise DecodeError(
                f"Unexpected MessagePack decoding error: {e}",
                serializer_type=self.format_name,
                original_error=e,
            ) from e
