"""Tests for objkit.json_bridge."""
from __future__ import annotations

import json
from dataclasses import dataclass

import pytest

from objkit import Rectangle, SerializerConfig, deserialize, serialize


class Circle:
    kind = "circle"

    def __init__(self, radius: float) -> None:
        self.radius = radius
        self.initialised = True

    def get_diameter(self) -> float:
        return self.radius * 2


@dataclass
class Point:
    x: int
    y: int


# ---------------------------------------------------------------------------
# serialize
# ---------------------------------------------------------------------------


class TestSerialize:
    def test_list_is_compact(self) -> None:
        assert serialize([1, 2, 3]) == "[1,2,3]"

    def test_dict_structure(self) -> None:
        value = {"width": 10, "height": 20}
        assert json.loads(serialize(value)) == value

    def test_primitives(self) -> None:
        assert serialize("hi") == '"hi"'
        assert serialize(None) == "null"
        assert serialize(True) == "true"
        assert serialize(1.5) == "1.5"

    def test_nested(self) -> None:
        value = {"a": [1, {"b": None}], "c": False}
        assert json.loads(serialize(value)) == value

    def test_rectangle_encodes_fields_only(self) -> None:
        assert json.loads(serialize(Rectangle(10, 20))) == {"width": 10, "height": 20}

    def test_dataclass(self) -> None:
        assert json.loads(serialize(Point(1, 2))) == {"x": 1, "y": 2}

    def test_private_attributes_skipped(self) -> None:
        class Holder:
            def __init__(self) -> None:
                self.public = 1
                self._hidden = 2

        assert json.loads(serialize(Holder())) == {"public": 1}

    def test_unencodable_raises(self) -> None:
        with pytest.raises(TypeError):
            serialize({1, 2})

    def test_sort_keys(self) -> None:
        cfg = SerializerConfig(sort_keys=True)
        assert serialize({"b": 1, "a": 2}, cfg) == '{"a":2,"b":1}'

    def test_insertion_order_by_default(self) -> None:
        assert serialize({"b": 1, "a": 2}) == '{"b":1,"a":2}'

    def test_indent(self) -> None:
        cfg = SerializerConfig(indent=2)
        assert serialize({"a": 1}, cfg) == '{\n  "a": 1\n}'

    def test_ensure_ascii_off(self) -> None:
        cfg = SerializerConfig(ensure_ascii=False)
        assert serialize(["é"], cfg) == '["é"]'
        assert serialize(["é"]) == '["\\u00e9"]'

    def test_non_finite_floats_become_null(self) -> None:
        assert serialize([float("nan"), float("inf"), -float("inf")]) == "[null,null,null]"

    def test_non_finite_nested_and_in_objects(self) -> None:
        value = {"a": [1.5, float("nan")], "p": Point(1, float("inf"))}
        assert json.loads(serialize(value)) == {"a": [1.5, None], "p": {"x": 1, "y": None}}

    def test_non_finite_rectangle_side(self) -> None:
        assert serialize(Rectangle(float("nan"), 2)) == '{"width":null,"height":2}'


# ---------------------------------------------------------------------------
# deserialize
# ---------------------------------------------------------------------------


class TestDeserialize:
    def test_fields_restored(self) -> None:
        c = deserialize(Circle, '{"radius":10}')
        assert c.radius == 10

    def test_methods_resolve_through_class(self) -> None:
        c = deserialize(Circle, '{"radius":10}')
        assert isinstance(c, Circle)
        assert c.get_diameter() == 20

    def test_init_not_called(self) -> None:
        c = deserialize(Circle, '{"radius":10}')
        assert not hasattr(c, "initialised")

    def test_class_attributes_not_copied(self) -> None:
        c = deserialize(Circle, '{"radius":10}')
        assert vars(c) == {"radius": 10}
        assert c.kind == "circle"

    def test_data_shadows_class_attribute(self) -> None:
        c = deserialize(Circle, '{"radius":1,"kind":"disc"}')
        assert c.kind == "disc"
        assert Circle.kind == "circle"

    def test_rectangle_roundtrip(self) -> None:
        r = deserialize(Rectangle, serialize(Rectangle(3, 4)))
        assert r == Rectangle(3, 4)
        assert r.get_area() == 12

    def test_malformed_json_propagates(self) -> None:
        with pytest.raises(json.JSONDecodeError):
            deserialize(Circle, "{radius: 10")

    def test_non_finite_constants_rejected(self) -> None:
        for text in ('{"radius": NaN}', '{"radius": Infinity}', '[-Infinity]'):
            with pytest.raises(ValueError, match="Invalid JSON constant"):
                deserialize(Circle, text)

    def test_array_payload_becomes_index_fields(self) -> None:
        c = deserialize(Circle, "[1,2,3]")
        assert vars(c) == {"0": 1, "1": 2, "2": 3}

    def test_string_payload_becomes_index_fields(self) -> None:
        c = deserialize(Circle, '"ab"')
        assert vars(c) == {"0": "a", "1": "b"}

    @pytest.mark.parametrize("text", ["10", "true", "null"])
    def test_scalar_payload_has_no_fields(self, text: str) -> None:
        c = deserialize(Circle, text)
        assert isinstance(c, Circle)
        assert vars(c) == {}

    def test_instances_independent(self) -> None:
        a = deserialize(Circle, '{"radius":1}')
        b = deserialize(Circle, '{"radius":2}')
        assert (a.radius, b.radius) == (1, 2)
