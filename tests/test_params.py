from dataclasses import dataclass, field

import pytest

from nacoskit.params import param_field, transform_object_to_param


@dataclass
class Sample:
    name: str = param_field("name", default="")
    likes: list = param_field("likes", default_factory=list)
    metadata: dict = param_field("metadata", default=None)
    age: int = param_field("age", default=0)
    healthy: bool = param_field("healthy", default=False)
    money: int = param_field("money", default=0)


@dataclass
class Extra:
    weight: float = param_field("weight", default=0.0)
    hidden: str = param_field("-", default="skip")
    untagged: str = field(default="skip")
    callback: object = param_field("callback", default=None)


def test_transform_none():
    assert transform_object_to_param(None) == {}


def test_transform_object():
    obj = Sample(
        name="code",
        likes=["a", "b"],
        metadata={"M1": "m1"},
        age=10,
        healthy=True,
        money=10,
    )
    assert transform_object_to_param(obj) == {
        "name": "code",
        "metadata": '{"M1":"m1"}',
        "likes": "a,b",
        "age": "10",
        "money": "10",
        "healthy": "true",
    }


def test_empty_values_skipped_but_numbers_kept():
    assert transform_object_to_param(Sample()) == {
        "age": "0",
        "healthy": "false",
        "money": "0",
    }


def test_untagged_and_dash_fields_ignored():
    assert transform_object_to_param(Extra(weight=1.5)) == {"weight": "1.5"}


def test_whole_float_has_no_fraction():
    assert transform_object_to_param(Extra(weight=10.0))["weight"] == "10"


def test_map_keys_sorted():
    params = transform_object_to_param(Sample(metadata={"b": "2", "a": "1"}))
    assert params["metadata"] == '{"a":"1","b":"2"}'


def test_non_dataclass_rejected():
    with pytest.raises(TypeError):
        transform_object_to_param({"name": "code"})