"""Tests for ByteSequence and its wire codec."""

import pytest

from etcd_auth.platform.auth import ByteSequence
from etcd_auth.platform.auth.infrastructure.codecs import from_wire_bytes, to_wire_bytes


class TestByteSequence:
    """Tests for the ByteSequence value object."""

    def test_from_string_encodes_utf8(self):
        sequence = ByteSequence.from_string("rôle")
        assert sequence.value == "rôle".encode("utf-8")
        assert sequence.to_string() == "rôle"

    def test_buffers_are_normalized_to_bytes(self):
        assert ByteSequence(bytearray(b"abc")).value == b"abc"
        assert ByteSequence(memoryview(b"abc")).value == b"abc"
        assert ByteSequence.of("abc") == ByteSequence(b"abc")

    def test_rejects_non_bytes(self):
        with pytest.raises(TypeError):
            ByteSequence("abc")

    def test_empty_sequence_is_valid(self):
        empty = ByteSequence.empty()
        assert empty.is_empty
        assert len(empty) == 0
        assert empty == ByteSequence()

    def test_is_immutable_and_hashable(self):
        sequence = ByteSequence(b"key")
        with pytest.raises(AttributeError):
            sequence.value = b"other"
        assert {sequence: 1}[ByteSequence(b"key")] == 1

    def test_mask_for_logging_hides_short_values(self):
        assert ByteSequence(b"abc").mask_for_logging() == "***"
        assert ByteSequence.from_string("administrator").mask_for_logging() == "ad...or"


class TestByteSequenceCodec:
    """Tests for the ByteSequence <-> wire bytes codec."""

    @pytest.mark.parametrize("data", [
        b"",
        b"alice",
        b"\x00\xff\xfe",
        "ключ".encode("utf-8"),
        bytes(range(256)),
    ])
    def test_round_trip(self, data):
        sequence = ByteSequence(data)
        assert from_wire_bytes(to_wire_bytes(sequence)) == sequence

    def test_to_wire_returns_bytes(self):
        wire = to_wire_bytes(ByteSequence.from_string("foo"))
        assert isinstance(wire, bytes)
        assert wire == b"foo"
