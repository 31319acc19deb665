"""Tests for log argument rendering"""

import json
import uuid
from datetime import datetime
from pathlib import PurePosixPath

import pytest

from android_logging import UnsupportedTypeError
from android_logging.formatters import ValueRenderer, indent_text, stringify, to_json_tree
from android_logging.formatters.value_renderer import exception_to_dict


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y


class TestIndentText:
    """Test the re-indentation pass."""

    def test_leading_newline(self):
        assert indent_text('\n{\n  "a": 1\n}', 4) == '\n    {\n      "a": 1\n    }'

    def test_without_leading_newline(self):
        assert indent_text("a\nb", 4) == "    a\n    b"

    def test_collapses_line_break_runs(self):
        assert indent_text("\na\r\n\nb", 2) == "\n  a\n  b"

    def test_custom_size(self):
        assert indent_text("\nx", 2) == "\n  x"


class TestCircularJson:
    """Test cycle-tolerant serialization."""

    def test_self_reference_marker(self):
        data = {"name": "root"}
        data["self"] = data
        assert to_json_tree(data) == {"name": "root", "self": "~"}

    def test_nested_back_reference(self):
        data = {"a": {"b": {}}}
        data["a"]["b"]["up"] = data["a"]
        assert to_json_tree(data) == {"a": {"b": {"up": "~a"}}}

    def test_shared_reference_uses_first_path(self):
        shared = [1, 2]
        assert to_json_tree({"x": shared, "y": [shared]}) == {"x": [1, 2], "y": ["~x"]}

    def test_list_cycle(self):
        items = [1]
        items.append(items)
        assert to_json_tree(items) == [1, "~"]

    def test_escapes_marker_strings(self):
        assert to_json_tree(["~a"]) == ["\\x7ea"]

    def test_escapes_tilde_in_marker_path(self):
        left, right = [1], [2]
        data = {"a~b": left, "a": {"b": right}, "refs": [left, right]}
        assert to_json_tree(data)["refs"] == ["~a\\x7eb", "~a~b"]

    def test_colliding_keys_are_kept(self):
        tree = to_json_tree({1: "int-key", "1": "str-key"})
        assert tree == {"1 (int)": "int-key", "1": "str-key"}

    def test_colliding_key_order_does_not_matter(self):
        tree = to_json_tree({"1": "str-key", 1: "int-key"})
        assert tree == {"1": "str-key", "1 (int)": "int-key"}

    def test_distinct_non_string_keys_unchanged(self):
        assert to_json_tree({1: "a", 2.5: "b", None: "c"}) == {"1": "a", "2.5": "b", "None": "c"}

    def test_leaf_conversion(self):
        tree = to_json_tree({1: b"raw", "t": (1, 2)})
        assert tree == {"1": "b'raw'", "t": [1, 2]}

    def test_stringify_two_space_indent(self):
        assert stringify({"a": [1]}) == json.dumps({"a": [1]}, indent=2)

    def test_stringify_unescapes_newlines(self):
        assert stringify({"m": "a\nb"}) == '{\n  "m": "a\nb"\n}'


class TestValueRenderer:
    """Test value rendering."""

    @pytest.fixture
    def renderer(self):
        return ValueRenderer()

    def test_none(self, renderer):
        assert renderer.render(None) == ""

    @pytest.mark.parametrize("value,expected", [
        (True, "True"),
        (False, "False"),
        (0, "0"),
        (-12, "-12"),
        (1.5, "1.5"),
    ])
    def test_primitives(self, renderer, value, expected):
        assert renderer.render(value) == expected

    def test_string_unchanged(self, renderer):
        assert renderer.render("a\n  b") == "a\n  b"

    def test_dict(self, renderer):
        assert renderer.render({"a": 1}) == '\n    {\n      "a": 1\n    }'

    def test_list(self, renderer):
        assert renderer.render([1, 2]) == "\n    [\n      1,\n      2\n    ]"

    def test_plain_object(self, renderer):
        rendered = renderer.render(Point(1, 2))
        assert rendered == '\n    {\n      "x": 1,\n      "y": 2\n    }'

    def test_cyclic_object(self, renderer):
        node = Point(1, None)
        node.y = node
        rendered = renderer.render(node)
        assert rendered.startswith("\n    {")
        assert '"y": "~"' in rendered

    def test_indent_size(self):
        assert ValueRenderer(indent_size=2).render({"a": 1}) == '\n  {\n    "a": 1\n  }'

    def test_multiline_string_in_structure(self, renderer):
        rendered = renderer.render({"m": "a\nb"})
        assert rendered == '\n    {\n      "m": "a\n    b"\n    }'

    def test_exception_with_traceback(self, renderer):
        try:
            raise ValueError("boom")
        except ValueError as ex:
            data = exception_to_dict(ex)
            rendered = renderer.render(ex)

        assert data["error"] == "ValueError: boom"
        assert data["stack"]
        assert data["stack"][0].startswith('File "')
        assert 'raise ValueError("boom")' in data["stack"]
        assert all(line == line.strip() for line in data["stack"])
        assert rendered.startswith("\n    {")
        assert '"error": "ValueError: boom"' in rendered

    def test_exception_without_traceback(self, renderer):
        assert exception_to_dict(KeyError("k")) == {"error": "KeyError: 'k'", "stack": []}
        assert exception_to_dict(RuntimeError()) == {"error": "RuntimeError", "stack": []}

    def test_exception_render(self, renderer):
        expected = '\n    {\n      "error": "RuntimeError: x",\n      "stack": []\n    }'
        assert renderer.render(RuntimeError("x")) == expected

    @pytest.mark.parametrize("value,text", [
        (datetime(2024, 1, 2), "2024-01-02 00:00:00"),
        (PurePosixPath("/tmp/app.log"), "/tmp/app.log"),
        (uuid.UUID("12345678-1234-5678-1234-567812345678"), "12345678-1234-5678-1234-567812345678"),
        (b"raw", "b'raw'"),
    ])
    def test_objects_without_attributes(self, renderer, value, text):
        assert renderer.render(value) == f'\n    "{text}"'

    def test_bare_object(self, renderer):
        rendered = renderer.render(object())
        assert rendered.startswith('\n    "<object object at ')

    def test_top_level_matches_nested(self, renderer):
        moment = datetime(2024, 1, 2)
        assert "2024-01-02 00:00:00" in renderer.render({"v": moment})
        assert "2024-01-02 00:00:00" in renderer.render(moment)

    @pytest.mark.parametrize("value", [
        lambda: None,
        len,
        int,
        json,
        (i for i in range(3)),
    ])
    def test_unsupported(self, renderer, value):
        with pytest.raises(UnsupportedTypeError) as info:
            renderer.render(value)
        assert info.value.value is value
        assert "Unsupported type:" in str(info.value)

    def test_unsupported_message_dump(self, renderer):
        def callback():
            pass

        with pytest.raises(TypeError) as info:
            renderer.render(callback)

        message = str(info.value)
        assert message.startswith("\n    Unsupported type: {")
        assert '"type": "function"' in message
        assert "<class 'builtins.function'>" in message
