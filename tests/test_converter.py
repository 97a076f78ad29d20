import pytest

from castkit.converter import ScalarType, classify, convert, main, precision_of


@pytest.mark.parametrize(
    "text, expected",
    [
        ("a", ScalarType.CHARACTER),
        ("*", ScalarType.CHARACTER),
        ("42", ScalarType.INTEGER),
        ("-42", ScalarType.INTEGER),
        ("7", ScalarType.INTEGER),
        ("4.2f", ScalarType.FLOAT),
        ("inff", ScalarType.FLOAT),
        ("4.2", ScalarType.DOUBLE),
        ("2147483648", ScalarType.DOUBLE),
        ("inf", ScalarType.DOUBLE),
        ("nanf", ScalarType.SPECIAL),
        ("-inf", ScalarType.SPECIAL),
        ("hello", ScalarType.OTHER),
        ("", ScalarType.OTHER),
        ("4.2ff", ScalarType.OTHER),
    ],
)
def test_classify(text, expected):
    assert classify(text) is expected


def test_precision_without_dot_is_one():
    assert precision_of("42") == 1


def test_precision_is_capped_at_six():
    assert precision_of("3.123456789") == 6


def test_precision_stops_at_f():
    assert precision_of("42.f") == 0


@pytest.mark.parametrize(
    "text, float_part, double_part",
    [("-inff", "-inff", "-inf"), ("+inff", "+inff", "+inf"), ("nanf", "nanf", "nan")],
)
def test_float_specials(text, float_part, double_part):
    assert convert(text) == [
        "char: Impossible",
        "int: Impossible",
        f"float: {float_part}",
        f"double: {double_part}",
    ]


@pytest.mark.parametrize("text", ["-inf", "+inf", "nan"])
def test_double_specials(text):
    assert convert(text) == [
        "char: Impossible",
        "int: Impossible",
        "float: Impossible",
        f"double: {text}",
    ]


def test_other_is_not_displayable():
    assert convert("hello") == [
        "char: Non displayable",
        "int: Non displayable",
        "float: Non displayable",
        "double: Non displayable",
    ]


def test_character():
    lines = convert("a")
    assert lines[0] == "char: 'a'"
    assert lines[1] == f"int: {ord('a')}"
    assert lines[2] == f"float: {ord('a')}.0f"
    assert lines[3] == f"double: {ord('a')}.0"


def test_integer():
    lines = convert("42")
    assert lines[1:] == ["int: 42", "float: 42.0f", "double: 42.0"]


def test_integer_out_of_char_range():
    assert convert("200")[0] == "char: Non displayable"


def test_float_literal():
    lines = convert("3.14f")
    assert lines[1] == "int: 3"
    assert lines[2] == "float: 3.14f"
    assert lines[3] == "double: 3.14"


def test_double_too_large_for_int():
    assert convert("2147483648")[1] == "int: Non displayable"


def test_double_too_large_for_float():
    lines = convert("1e39")
    assert lines[2] == "float: Non displayable"
    assert lines[1] == "int: Non displayable"


def test_inff_literal():
    lines = convert("inff")
    assert lines[2] == "float: inff"
    assert lines[3] == "double: inf"


def test_unsigned_inf_is_double():
    assert convert("inf")[2:] == ["float: Non displayable", "double: inf"]


def test_main_requires_one_argument(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "Error\n"


def test_main_prints_conversion(capsys):
    assert main(["nanf"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == convert("nanf")