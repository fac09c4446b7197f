"""Check encoder output against the standard library JSON parser."""

import json
import sys
from pathlib import Path

import pytest

# Add src to path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from jsonstream import encode


def roundtrip(data):
    """Encode with jsonstream, then parse with json.loads."""
    return json.loads(encode(data))


class TestParsesAsJson:
    """Encoded output is valid JSON with the same content."""

    @pytest.mark.parametrize(
        "data",
        [
            None,
            True,
            -3.5,
            "slash/quote\"back\\slash\nnul\0",
            {"user": {"name": "Bob", "tags": ["a", "b"], "score": 0.25}},
            [{"id": 1}, {"id": 2, "items": [[], {}]}],
            {"unicode": "日本語", "emoji": "🙂"},
        ],
    )
    def test_content_preserved(self, data):
        assert roundtrip(data) == data

    def test_int_keys_become_strings(self):
        assert roundtrip({1: "a", 2: "b"}) == {"1": "a", "2": "b"}

    def test_dense_int_keys_become_list(self):
        assert roundtrip({0: "a", 1: "b"}) == ["a", "b"]

    def test_tuple_becomes_list(self):
        assert roundtrip({"point": (1, 2)}) == {"point": [1, 2]}
