"""Tests for serialize / deserialize."""

import json
from dataclasses import dataclass

import pytest

from cssbuild.errors import CssbuildError, DeserializationError
from cssbuild.serialization import deserialize, serialize
from cssbuild.shapes import Circle, Rectangle, make_rectangle


# ---------------------------------------------------------------------------
# serialize
# ---------------------------------------------------------------------------


class TestSerialize:
    def test_list(self):
        assert serialize([1, 2, 3]) == "[1,2,3]"

    def test_dict_keeps_insertion_order(self):
        assert serialize({"width": 10, "height": 20}) == '{"width":10,"height":20}'
        assert serialize({"b": 1, "a": 2}) == '{"b":1,"a":2}'

    def test_rectangle_omits_derived_area(self):
        assert serialize(make_rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_plain_object(self):
        class Point:
            def __init__(self):
                self.y = 2
                self.x = 1

        assert serialize(Point()) == '{"y":2,"x":1}'

    def test_nested_objects(self):
        assert serialize({"shapes": [Circle(radius=1)]}) == '{"shapes":[{"radius":1}]}'

    def test_non_ascii_kept(self):
        assert serialize({"name": "café"}) == '{"name":"café"}'

    def test_indent(self):
        assert serialize({"a": 1}, indent=2) == '{\n  "a": 1\n}'

    def test_unserialisable_raises_type_error(self):
        with pytest.raises(TypeError):
            serialize(object())


# ---------------------------------------------------------------------------
# deserialize
# ---------------------------------------------------------------------------


@dataclass
class Guarded:
    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("value must be >= 0")


class TestDeserialize:
    def test_returns_target_type(self):
        r = deserialize(Circle, '{"radius":10}')
        assert isinstance(r, Circle)
        assert r.radius == 10

    def test_round_trip(self):
        original = make_rectangle(10, 20)
        restored = deserialize(Rectangle, serialize(original))
        assert isinstance(restored, Rectangle)
        assert vars(restored) == vars(original)
        assert restored == original
        assert restored.area == 200

    def test_constructor_not_called(self):
        obj = deserialize(Guarded, '{"value": -1}')
        assert obj.value == -1

    def test_extra_fields_copied_as_is(self):
        r = deserialize(Rectangle, '{"width":1,"height":2,"color":"red"}')
        assert r.color == "red"

    def test_non_object_payload(self):
        with pytest.raises(DeserializationError) as exc_info:
            deserialize(Rectangle, "[1,2,3]")
        assert exc_info.value.target is Rectangle
        assert isinstance(exc_info.value, CssbuildError)

    def test_malformed_text(self):
        with pytest.raises(json.JSONDecodeError):
            deserialize(Rectangle, "{width: 1")
