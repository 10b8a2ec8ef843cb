from datetime import datetime
from enum import Enum
from pathlib import Path

import pytest

from flagwright.types import (
    Int16,
    Int64,
    UInt8,
    UInt32,
    element_type,
    is_container,
    resolve_type,
    type_name,
)


class Shape(Enum):
    SQUARE = 1


def test_bounded_int_limits():
    assert (UInt8.minimum, UInt8.maximum) == (0, 255)
    assert (Int16.minimum, Int16.maximum) == (-32768, 32767)
    assert Int64.maximum == 2**63 - 1
    assert UInt32.signed is False


@pytest.mark.parametrize(
    "value_type, expected",
    [
        (int, "integer"),
        (float, "float"),
        (bool, "bool"),
        (str, "string"),
        (datetime, "datetime"),
        (UInt8, "unsigned 8 bit integer"),
        (Int16, "signed 16 bit integer"),
        (list[int], "list of integer"),
        (Shape, "Shape"),
        (Path, "Path"),
    ],
)
def test_type_name(value_type, expected):
    assert type_name(value_type) == expected


def test_container_helpers():
    assert is_container(list[int])
    assert is_container(list)
    assert not is_container(int)
    assert element_type(list[float]) is float
    assert element_type(list) is str


@pytest.mark.parametrize(
    "name, expected",
    [
        ("int", int),
        ("String", str),
        ("uint8", UInt8),
        ("path", Path),
        ("list[int]", list[int]),
        (" list[uint32] ", list[UInt32]),
    ],
)
def test_resolve_type(name, expected):
    assert resolve_type(name) == expected


def test_resolve_unknown_type():
    with pytest.raises(ValueError, match="Unknown value type 'complex'"):
        resolve_type("complex")
