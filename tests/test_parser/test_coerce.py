from datetime import datetime
from enum import Enum
from typing import Literal, Optional

import pytest

from argrouter.parser.coerce import coerce_bool, coerce_enum, coerce_value


class Level(Enum):
    LOW = 1
    HIGH = 2


@pytest.mark.parametrize(
    "value, expected",
    [("true", True), ("Yes", True), ("1", True), ("off", False), ("N", False)],
)
def test_coerce_bool(value, expected):
    assert coerce_bool(value) is expected


def test_coerce_bool_rejects_unknown():
    with pytest.raises(ValueError):
        coerce_bool("maybe")


def test_coerce_enum_by_name_and_value():
    assert coerce_enum("HIGH", Level) is Level.HIGH
    assert coerce_enum("1", Level) is Level.LOW
    with pytest.raises(ValueError, match="should be one of"):
        coerce_enum("3", Level)


def test_coerce_literal():
    assert coerce_value("fast", Literal["fast", "slow"]) == "fast"
    with pytest.raises(ValueError):
        coerce_value("medium", Literal["fast", "slow"])


def test_coerce_union():
    assert coerce_value("5", int | str) == 5
    assert coerce_value("five", int | str) == "five"
    assert coerce_value("2", Optional[int]) == 2
    with pytest.raises(ValueError):
        coerce_value("x", int | float)


def test_coerce_datetime():
    assert coerce_value("2025-03-04 10:30", datetime) == datetime(2025, 3, 4, 10, 30)
    with pytest.raises(ValueError):
        coerce_value("not a date", datetime)


def test_coerce_plain_callable():
    assert coerce_value("2.5", float) == 2.5
    with pytest.raises(ValueError):
        coerce_value("x", int)
