"""Cache codecs.

One codec per format. MessagePack is the default.
"""

from .msgpack_serializer import MsgpackCodec
from .json_serializer import JsonCodec
from .pickle_serializer import PickleCodec
from .function_codec import FunctionCodec
from ..entities.protocols import Codec, SerializationFormat
from ..core.exceptions import CacheConfigurationError

_CODECS = {
    SerializationFormat.MSGPACK: MsgpackCodec,
    SerializationFormat.JSON: JsonCodec,
    SerializationFormat.PICKLE: PickleCodec,
}


def create_codec(serialization_format: SerializationFormat = SerializationFormat.MSGPACK) -> Codec:
    """Create codec for a serialization format.
    
    Raises:
        CacheConfigurationError: If the format is unknown
    """
    try:
        codec_class = _CODECS[SerializationFormat(serialization_format)]
    except (KeyError, ValueError):
        raise CacheConfigurationError(
            f"Unsupported serialization format: {serialization_format}"
        )
    return codec_class()


__all__ = [
    "MsgpackCodec",
    "JsonCodec",
    "PickleCodec",
    "FunctionCodec",
    "create_codec",
]
