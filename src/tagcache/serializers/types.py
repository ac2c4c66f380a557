"""Extended type support shared by the structured codecs.

Values msgpack and JSON cannot represent natively are tagged with a
single-key marker dict on encode and rebuilt on decode.
"""

import dataclasses
from datetime import datetime, date
from decimal import Decimal
from typing import Any, Dict, Optional
from uuid import UUID

from pydantic import BaseModel


def encode_extended(obj: Any) -> Any:
    """Encode non-native types to tagged structures.
    
    Raises:
        TypeError: If the type is not supported
    """
    if isinstance(obj, BaseModel):
        return obj.model_dump()
    elif dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    elif isinstance(obj, datetime):
        return {"__datetime__": obj.isoformat()}
    elif isinstance(obj, date):
        return {"__date__": obj.isoformat()}
    elif isinstance(obj, Decimal):
        return {"__decimal__": str(obj)}
    elif isinstance(obj, UUID):
        return {"__uuid__": str(obj)}
    elif isinstance(obj, set):
        return {"__set__": list(obj)}
    elif isinstance(obj, frozenset):
        return {"__frozenset__": list(obj)}
    elif isinstance(obj, complex):
        return {"__complex__": [obj.real, obj.imag]}
    
    raise TypeError(f"Object of type {type(obj).__name__} is not serializable")


def decode_extended(obj: Dict[str, Any]) -> Any:
    """Decode tagged structures back to Python types."""
    if len(obj) != 1:
        return obj
    if "__datetime__" in obj:
        return datetime.fromisoformat(obj["__datetime__"])
    elif "__date__" in obj:
        return date.fromisoformat(obj["__date__"])
    elif "__decimal__" in obj:
        return Decimal(obj["__decimal__"])
    elif "__uuid__" in obj:
        return UUID(obj["__uuid__"])
    elif "__set__" in obj:
        return set(obj["__set__"])
    elif "__frozenset__" in obj:
        return frozenset(obj["__frozenset__"])
    elif "__complex__" in obj:
        real, imag = obj["__complex__"]
        return complex(real, imag)
    elif "__bytes__" in obj:
        return bytes.fromhex(obj["__bytes__"])
    
    return obj


def restore(obj: Any, into: Optional[Any] = None) -> Any:
    """Rebuild a decoded structure as the requested shape.
    
    Args:
        obj: Decoded structure
        into: Pydantic model class, dataclass, or callable; None keeps obj
        
    Returns:
        Rebuilt value
    """
    if into is None or obj is None:
        return obj
    if isinstance(into, type) and isinstance(obj, into):
        return obj
    if isinstance(into, type) and issubclass(into, BaseModel):
        return into.model_validate(obj)
    if dataclasses.is_dataclass(into) and isinstance(obj, dict):
        return into(**obj)
    return into(obj)
