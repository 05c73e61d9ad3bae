import math

import pytest

from rivet.errors import MalformedInputError
from rivet.labels.array_riv import ArrayRIV, generate_label


def test_from_string_example():
    r = ArrayRIV.from_string("0|1 1|3 4|2 5")
    assert r.size == 5
    assert [(e.index, e.value) for e in r] == [(0, 1.0), (1, 3.0), (4, 2.0)]
    assert str(r) == "0|1 1|3 4|2 5"
    assert r.to_string() == "0|1 1|3 4|2 5"


def test_empty_vector_text():
    r = ArrayRIV.from_string("5")
    assert r == ArrayRIV(5)
    assert str(r) == "5"


def test_round_trip_label():
    v = generate_label(16000, 48, "semantics")
    assert ArrayRIV.from_string(str(v)) == v


def test_round_trip_after_arithmetic():
    v = generate_label(1000, 8, "x").multiply(0.1).add(generate_label(1000, 8, "y").divide(3))
    assert ArrayRIV.from_string(str(v)) == v


def test_round_trip_infinities():
    v = ArrayRIV.from_string("0|inf 2|-inf 3")
    assert v.get(0) == math.inf and v.get(2) == -math.inf
    assert ArrayRIV.from_string(str(v)) == v


def test_parse_tolerates_surrounding_whitespace():
    assert ArrayRIV.from_string(" 1|2 4\n") == ArrayRIV.from_arrays([1], [2.0], 4)


def test_parse_accepts_exponent_and_signed_forms():
    v = ArrayRIV.from_string("0|1e3 2|-.5 +3|Infinity 4")
    assert v == ArrayRIV.from_arrays([0, 2, 3], [1000.0, -0.5, math.inf], 4)


def test_repr_is_evaluable_text():
    r = ArrayRIV.from_string("1|2 4")
    assert "1|2 4" in repr(r)


@pytest.mark.parametrize(
    "bad",
    [
        "",
        "0|1 x",
        "0|a 5",
        "0-1 5",
        "0|1|2 5",
        "5 0|1",
        "0|1  5",
        "0|1 0",
        "7|1 5",
        "1_0|2 20",
        "0|1_5 5",
        "٣|1 5",
        "0|1 ５",
        "0|1e 5",
        "0|infin 5",
    ],
)
def test_malformed_text_raises(bad):
    with pytest.raises(MalformedInputError):
        ArrayRIV.from_string(bad)
