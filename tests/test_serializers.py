"""Tests for cache codecs."""

import json
import threading
from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal
from uuid import UUID

import pytest
from pydantic import BaseModel

from tagcache.core.exceptions import EncodeError, DecodeError, CacheConfigurationError
from tagcache.entities.protocols import Codec, SerializationFormat
from tagcache.serializers import (
    MsgpackCodec,
    JsonCodec,
    PickleCodec,
    FunctionCodec,
    create_codec,
)


class Tenant(BaseModel):
    id: UUID
    slug: str
    created_at: datetime


@dataclass
class Point:
    x: int
    y: int


TENANT_ID = UUID("6f1c8e52-7d2a-4b8e-9f0a-3c5d2e1b4a90")


class TestMsgpackCodec:
    """Test MessagePack codec."""
    
    @pytest.fixture
    def codec(self):
        return MsgpackCodec()
    
    def test_none_is_empty_payload(self, codec):
        assert codec.encode(None) == b""
        assert codec.decode(b"") is None
    
    def test_extended_types(self, codec):
        value = {
            "when": datetime(2024, 1, 2, 3, 4, 5),
            "day": date(2024, 1, 2),
            "amount": Decimal("1.50"),
            "id": TENANT_ID,
            "roles": {"admin", "viewer"},
            "raw": b"\x00\x01",
        }
        assert codec.decode(codec.encode(value)) == value
    
    def test_pydantic_model_into(self, codec):
        tenant = Tenant(id=TENANT_ID, slug="acme", created_at=datetime(2024, 5, 1))
        
        data = codec.encode(tenant)
        
        assert isinstance(codec.decode(data), dict)
        assert codec.decode(data, into=Tenant) == tenant
    
    def test_dataclass_into(self, codec):
        assert codec.decode(codec.encode(Point(1, 2)), into=Point) == Point(1, 2)
    
    def test_unsupported_type(self, codec):
        with pytest.raises(EncodeError) as exc_info:
            codec.encode(threading.Lock())
        assert exc_info.value.serializer_type == "msgpack"
        assert exc_info.value.details["original_error"]["type"] == "TypeError"
    
    def test_malformed_payload(self, codec):
        with pytest.raises(DecodeError):
            codec.decode(b"\xc1")
    
    def test_into_mismatch_is_decode_error(self, codec):
        with pytest.raises(DecodeError):
            codec.decode(codec.encode({"slug": "acme"}), into=Tenant)
    
    def test_satisfies_protocol(self, codec):
        assert isinstance(codec, Codec)


class TestJsonCodec:
    """Test JSON codec."""
    
    @pytest.fixture
    def codec(self):
        return JsonCodec(sort_keys=True)
    
    def test_compact_utf8_output(self, codec):
        assert codec.encode({"b": 1, "a": "é"}) == '{"a":"é","b":1}'.encode("utf-8")
    
    def test_extended_types(self, codec):
        value = {
            "when": datetime(2024, 1, 2, 3, 4, 5),
            "amount": Decimal("10.01"),
            "raw": b"\xff",
            "ids": frozenset({1, 2}),
        }
        assert codec.decode(codec.encode(value)) == value
    
    def test_none_is_empty_payload(self, codec):
        assert codec.encode(None) == b""
        assert codec.decode(b"") is None
    
    def test_invalid_utf8(self, codec):
        with pytest.raises(DecodeError) as exc_info:
            codec.decode(b"\xff\xfe")
        assert exc_info.value.serializer_type == "json"
    
    def test_invalid_json(self, codec):
        with pytest.raises(DecodeError):
            codec.decode(b"{not json")
    
    def test_unsupported_type(self, codec):
        with pytest.raises(EncodeError):
            codec.encode({"lock": threading.Lock()})


class TestPickleCodec:
    """Test pickle codec."""
    
    @pytest.fixture
    def codec(self):
        return PickleCodec()
    
    def test_preserves_python_types(self, codec):
        value = (Point(1, 2), {1, 2}, Decimal("3.3"))
        assert codec.decode(codec.encode(value)) == value
    
    def test_unpicklable_value(self, codec):
        with pytest.raises(EncodeError):
            codec.encode(threading.Lock())
    
    def test_truncated_payload(self, codec):
        with pytest.raises(DecodeError):
            codec.decode(codec.encode({"a": 1})[:-3])


class TestFunctionCodec:
    """Test codec built from plain functions."""
    
    @pytest.fixture
    def codec(self):
        return FunctionCodec(
            encode=lambda value: json.dumps(value).encode(),
            decode=json.loads,
        )
    
    def test_functions_applied(self, codec):
        assert codec.encode([1, 2]) == b"[1, 2]"
        assert codec.decode(b"[1, 2]") == [1, 2]
    
    def test_empty_payload_bypasses_functions(self):
        encode = lambda value: pytest.fail("encode called")
        decode = lambda data: pytest.fail("decode called")
        codec = FunctionCodec(encode=encode, decode=decode)
        
        assert codec.encode(None) == b""
        assert codec.decode(b"") is None
    
    def test_function_errors_wrapped(self, codec):
        with pytest.raises(EncodeError):
            codec.encode({1, 2})
        with pytest.raises(DecodeError):
            codec.decode(b"{")
    
    def test_into(self, codec):
        assert codec.decode(b'{"x": 3, "y": 4}', into=Point) == Point(3, 4)


class TestCreateCodec:
    """Test codec factory."""
    
    @pytest.mark.parametrize("serialization_format,codec_class", [
        (SerializationFormat.MSGPACK, MsgpackCodec),
        (SerializationFormat.JSON, JsonCodec),
        ("pickle", PickleCodec),
    ])
    def test_known_formats(self, serialization_format, codec_class):
        assert isinstance(create_codec(serialization_format), codec_class)
    
    def test_default_is_msgpack(self):
        assert isinstance(create_codec(), MsgpackCodec)
    
    def test_unknown_format(self):
        with pytest.raises(CacheConfigurationError):
            create_codec("yaml")
