"""Tests for endpoint conversion and sentinel resolution."""

import sys
from datetime import datetime, timedelta

import numpy as np
import pytest

from mathinterval import (
    Bounded,
    ConversionError,
    EndpointResolver,
    Interval,
    UnsupportedTypeError,
    default_resolver,
)


class Grade:
    """Ordered type that supplies its own bounds."""

    def __init__(self, level: int):
        self.level = level

    def __lt__(self, other: "Grade") -> bool:
        return self.level < other.level

    def __le__(self, other: "Grade") -> bool:
        return self.level <= other.level

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Grade) and self.level == other.level

    def __hash__(self) -> int:
        return hash(self.level)

    @classmethod
    def minimum(cls) -> "Grade":
        return cls(1)

    @classmethod
    def maximum(cls) -> "Grade":
        return cls(12)


def test_bounded_protocol_supplies_sentinels():
    resolver = EndpointResolver()

    assert issubclass(Grade, Bounded)
    assert resolver.minimum(Grade) == Grade(1)
    assert resolver.maximum(Grade) == Grade(12)


def test_bounded_type_parses_empty_endpoints():
    resolver = EndpointResolver()
    resolver.register_converter(Grade, lambda text: Grade(int(text)))

    interval = Interval.parse("[, 6)", Grade, resolver=resolver)

    assert interval.a == Grade(1)
    assert interval.b == Grade(6)
    assert Grade(5) in interval
    assert Grade(6) not in interval


def test_float_sentinels():
    assert default_resolver.minimum(float) == -sys.float_info.max
    assert default_resolver.maximum(float) == sys.float_info.max


def test_datetime_and_timedelta_sentinels():
    assert default_resolver.minimum(datetime) == datetime.min
    assert default_resolver.maximum(timedelta) == timedelta.max


def test_numpy_fixed_width_sentinels():
    interval = Interval.parse("[, 100]", np.int8)

    assert interval.a == -128
    assert isinstance(interval.a, np.int8)
    assert interval.b == 100

    assert Interval.parse("[0, ]", np.uint16).b == 65535
    assert Interval.parse("(, 0)", np.float32).a == np.finfo(np.float32).min


def test_numpy_conversion():
    interval = Interval.parse("[1, 2]", np.int32)

    assert isinstance(interval.a, np.int32)
    assert np.int32(2) in interval

    with pytest.raises(ConversionError):
        Interval.parse("[one, 2]", np.int32)


def test_subclass_uses_base_registration():
    class Score(float):
        pass

    interval = Interval.parse("[0.5, ]", Score)

    assert interval.a == 0.5
    assert interval.b == sys.float_info.max


def test_registrations_are_per_resolver():
    resolver = default_resolver.copy()
    resolver.register_bounds(int, -(2**31), 2**31 - 1)

    assert Interval.parse("[, 0]", int, resolver=resolver).a == -(2**31)

    with pytest.raises(UnsupportedTypeError):
        Interval.parse("[, 0]", int)


def test_empty_resolver_has_no_converters():
    with pytest.raises(UnsupportedTypeError, match="register_converter"):
        EndpointResolver().convert("1", float)


def test_converter_errors_are_wrapped():
    resolver = EndpointResolver()

    def reject(text: str) -> int:
        raise ArithmeticError("overflow")

    resolver.register_converter(int, reject)

    with pytest.raises(ConversionError, match="overflow") as excinfo:
        resolver.convert("7", int)

    assert excinfo.value.text == "7"
    assert isinstance(excinfo.value.__cause__, ArithmeticError)
