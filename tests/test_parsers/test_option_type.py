import pytest

from argyle.parser.option_type import OptionType


@pytest.mark.parametrize(
    "value, expected",
    [
        ("string", OptionType.STRING),
        ("int", OptionType.NUMERIC),
        ("Number", OptionType.NUMERIC),
        ("flag", OptionType.BOOLEAN),
        ("list", OptionType.ARRAY),
        ("map", OptionType.HASH),
        ("greedy", OptionType.GREEDY),
        (int, OptionType.NUMERIC),
        (float, OptionType.NUMERIC),
        (bool, OptionType.BOOLEAN),
        (tuple, OptionType.ARRAY),
        (dict, OptionType.HASH),
        (str, OptionType.STRING),
    ],
)
def test_option_type_aliases(value, expected):
    assert OptionType(value) is expected


@pytest.mark.parametrize("value", ["bogus", 42, bytes])
def test_option_type_invalid(value):
    with pytest.raises(ValueError):
        OptionType(value)


@pytest.mark.parametrize(
    "value, expected",
    [
        (3, OptionType.NUMERIC),
        (0.5, OptionType.NUMERIC),
        (True, OptionType.BOOLEAN),
        ("x", OptionType.STRING),
        (["x"], OptionType.ARRAY),
        ({"a": "b"}, OptionType.HASH),
        (range(3), OptionType.NUMERIC),
    ],
)
def test_option_type_infer(value, expected):
    assert OptionType.infer(value) is expected


def test_option_type_infer_rejects_unknown_values():
    with pytest.raises(ValueError):
        OptionType.infer(object())


def test_takes_value():
    assert not OptionType.BOOLEAN.takes_value
    assert all(kind.takes_value for kind in OptionType if kind is not OptionType.BOOLEAN)
