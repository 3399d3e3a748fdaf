"""
Tests for JSON reading and writing with exact number lexicals.
"""

import pytest

from fhir_r5.codec import jsonio
from fhir_r5.errors import StructuralError
from fhir_r5.models import JsonNumber


class TestLoads:
    """Tests for jsonio.loads."""

    def test_numbers_kept_as_tokens(self):
        """Should decode numbers to their source text."""
        tree = jsonio.loads(b'{"a": 1.200, "b": 7, "c": 1e3}')
        assert tree == {"a": "1.200", "b": "7", "c": "1e3"}
        assert all(isinstance(value, JsonNumber) for value in tree.values())

    def test_strings_stay_plain(self):
        """Should not mark strings as numbers."""
        tree = jsonio.loads('{"a": "1.200"}')
        assert not isinstance(tree["a"], JsonNumber)

    def test_literals(self):
        """Should decode true, false and null."""
        assert jsonio.loads(b"[true, false, null]") == [True, False, None]

    def test_rejects_bom(self):
        """Should reject a UTF-8 byte order mark."""
        with pytest.raises(StructuralError) as exc_info:
            jsonio.loads(b"\xef\xbb\xbf{}")
        assert exc_info.value.path == "/"

    def test_rejects_bom_in_text(self):
        """Should reject a BOM at the start of a decoded string."""
        with pytest.raises(StructuralError):
            jsonio.loads("\ufeff{}")

    def test_rejects_invalid_utf8(self):
        """Should reject bytes that are not UTF-8."""
        with pytest.raises(StructuralError, match="UTF-8"):
            jsonio.loads(b'{"a": "\xff"}')

    def test_rejects_duplicate_keys(self):
        """Should reject an object with a repeated member name."""
        with pytest.raises(StructuralError, match="duplicate"):
            jsonio.loads(b'{"a": 1, "a": 2}')

    @pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
    def test_rejects_non_finite(self, constant):
        """Should reject NaN and infinities."""
        with pytest.raises(StructuralError):
            jsonio.loads(f'{{"a": {constant}}}')

    def test_rejects_invalid_json(self):
        """Should report the position of a syntax error."""
        with pytest.raises(StructuralError) as exc_info:
            jsonio.loads(b'{"a": }')
        assert exc_info.value.details["line"] == 1

    def test_size_limit(self):
        """Should reject documents over the byte limit."""
        with pytest.raises(StructuralError, match="exceeds"):
            jsonio.loads(b'{"a": "0123456789"}', max_bytes=10)

    def test_size_limit_counts_utf8_bytes(self):
        """Should measure decoded strings in UTF-8 bytes."""
        assert jsonio.loads('"éé"', max_bytes=6) == "éé"
        with pytest.raises(StructuralError):
            jsonio.loads('"éé"', max_bytes=5)


class TestDumps:
    """Tests for jsonio.dumps."""

    def test_compact(self):
        """Should write without insignificant whitespace."""
        assert jsonio.dumps({"a": JsonNumber("1"), "b": [True, None]}) == '{"a":1,"b":[true,null]}'

    def test_number_tokens_verbatim(self):
        """Should write number tokens exactly as read."""
        assert jsonio.dumps([JsonNumber("1.200"), JsonNumber("1e3")]) == "[1.200,1e3]"

    def test_python_numbers(self):
        """Should write plain ints and floats."""
        assert jsonio.dumps([1, 2.5]) == "[1,2.5]"

    def test_non_ascii_unescaped(self):
        """Should write non-ASCII characters as UTF-8."""
        assert jsonio.dumps({"name": "Zoë"}) == '{"name":"Zoë"}'

    def test_indent(self):
        """Should pretty-print with the given indent."""
        assert jsonio.dumps({"a": [JsonNumber("1")]}, indent=2) == '{\n  "a": [\n    1\n  ]\n}'

    def test_empty_containers(self):
        """Should write empty objects and arrays."""
        assert jsonio.dumps({"a": {}, "b": []}, indent=2) == '{\n  "a": {},\n  "b": []\n}'

    def test_rejects_nan(self):
        """Should refuse to write NaN."""
        with pytest.raises(ValueError):
            jsonio.dumps(float("nan"))

    def test_rejects_unknown_type(self):
        """Should refuse objects that are not JSON values."""
        with pytest.raises(TypeError):
            jsonio.dumps({"a": object()})

    def test_round_trip(self):
        """Should write back what it read."""
        text = '{"resourceType":"Observation","valueQuantity":{"value":1.200}}'
        assert jsonio.dumps(jsonio.loads(text)) == text
