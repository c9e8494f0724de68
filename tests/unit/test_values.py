import pytest
import json
from pydantic import TypeAdapter, ValidationError
from hc3.values import OpaqueJSON, Power, QuickAppVariable, Value, as_bool, as_float, as_int, as_str

value_adapter = TypeAdapter(Value)
power_adapter = TypeAdapter(Power)


def test_value_precedence():
    # Integer must win over float and string
    v = value_adapter.validate_json("42")
    assert v == 42
    assert type(v) is int

    v = value_adapter.validate_json('"42"')
    assert v == "42"
    assert type(v) is str

    # Boolean probe runs first
    v = value_adapter.validate_json("true")
    assert v is True

    v = value_adapter.validate_json("4.5")
    assert type(v) is float


def test_value_rejects_structures():
    with pytest.raises(ValidationError):
        value_adapter.validate_json("[1, 2]")
    with pytest.raises(ValidationError):
        value_adapter.validate_json("null")


def test_power_variants():
    assert power_adapter.validate_json("false") is False
    assert power_adapter.validate_json("12.5") == 12.5

    with pytest.raises(ValidationError):
        power_adapter.validate_json('"on"')


def test_value_accessors():
    assert as_int(7) == 7
    assert as_int(True) == 0
    assert as_int("7") == 0
    assert as_float(1.5) == 1.5
    assert as_float(1) == 0.0
    assert as_bool(True) is True
    assert as_bool(1) is False
    assert as_str("on") == "on"
    assert as_str(None) == ""


def test_opaque_json_round_trip():
    raw = '{"a": [1, 2.0, "x", null, true], "b": {"c": {}}, "d": -3}'
    opaque = OpaqueJSON.model_validate_json(raw)

    assert opaque.value["a"][0] == 1
    assert type(opaque.value["a"][0]) is int
    assert type(opaque.value["a"][1]) is float
    assert opaque.value["a"][3] is None
    assert opaque.value["a"][4] is True

    encoded = opaque.model_dump_json()
    assert json.loads(encoded) == json.loads(raw)
    assert OpaqueJSON.model_validate_json(encoded) == opaque


def test_opaque_json_scalars():
    assert OpaqueJSON.model_validate_json("null").value is None
    assert OpaqueJSON.model_validate_json('"text"').value == "text"
    assert OpaqueJSON.model_validate_json("false").value is False


def test_quick_app_variable_equality_by_name():
    a = QuickAppVariable.model_validate({"name": "interval", "value": 60})
    b = QuickAppVariable.model_validate({"name": "interval", "value": [1, 2]})
    c = QuickAppVariable.model_validate({"name": "other", "value": 60})

    assert a == b
    assert a != c
    assert len({a, b, c}) == 2


def test_quick_app_variable_requires_name():
    with pytest.raises(ValidationError):
        QuickAppVariable.model_validate({"value": 1})
