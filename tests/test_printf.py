import pytest

from ftkit.printf import (
    FormatSpec,
    apply_flags,
    format_string,
    parse_spec,
    printf,
    render_value,
)


@pytest.mark.parametrize(
    "fmt, args",
    [
        ("%d", (42,)),
        ("%i", (-17,)),
        ("%5d", (42,)),
        ("%-5d|", (42,)),
        ("%05d", (-42,)),
        ("%05d", (42,)),
        ("%.5d", (-42,)),
        ("%.3x", (10,)),
        ("%x", (255,)),
        ("%X", (255,)),
        ("%u", (123,)),
        ("%s", ("hello",)),
        ("%.2s", ("hello",)),
        ("%10s", ("abc",)),
        ("%-10s|", ("abc",)),
        ("%c", ("z",)),
        ("%%", ()),
        ("%*d", (6, 42)),
        ("%*d|", (-6, 42)),
        ("%-*d|", (6, 42)),
        ("%.*d", (4, 7)),
        ("a %s b %d c", ("x", 3)),
        ("no conversions", ()),
    ],
)
def test_matches_standard_formatting(fmt, args):
    assert format_string(fmt, *args) == fmt % args


def test_null_string():
    assert format_string("%s", None) == "(null)"


def test_pointer_hex():
    assert format_string("%p", 255) == "0xff"


def test_pointer_zero_with_zero_precision():
    assert format_string("%.0p", 0) == "0x"


def test_zero_precision_hides_zero():
    assert format_string("%.0d", 0) == ""


def test_zero_precision_hides_zero_char():
    assert format_string("%.0c", "0") == ""


def test_zero_precision_empties_string():
    assert format_string("[%.0s]", "abc") == "[" + "]"


def test_int_wraps_to_32_bits():
    assert format_string("%d", 2**31) == format_string("%d", -(2**31))


def test_unsigned_of_negative():
    assert format_string("%u", -1) == "%d" % 0xFFFFFFFF


def test_hex_of_negative():
    assert format_string("%x", -1) == format(0xFFFFFFFF, "x")


def test_char_from_int_code():
    assert format_string("%c", 65) == chr(65)
    assert format_string("%c", 65 + 256) == format_string("%c", 65)


def test_zero_flag_ignored_with_precision():
    assert format_string("%08.3d", 42) == format_string("%8.3d", 42)


def test_percent_with_minimum_width():
    out = format_string("%5%")
    assert len(out) == 5
    assert out.endswith("%")
    assert out.strip() == "%"


def test_incomplete_spec_raises():
    with pytest.raises(ValueError):
        format_string("abc %")


def test_unknown_conversion_raises():
    with pytest.raises(ValueError):
        format_string("%q", 1)


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%d")


def test_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        format_string("%d", "text")


def test_parse_spec_left_justify():
    spec, pos = parse_spec("-5d", 0, iter(()))
    assert spec == FormatSpec(flag="-", width=5, conversion="d")
    assert pos == 3


def test_parse_spec_star_negative_minimum():
    spec, pos = parse_spec("*d", 0, iter([-4]))
    assert spec == FormatSpec(flag="-", width=4, conversion="d")
    assert pos == 2


def test_parse_spec_zero_flag_with_precision_moves_width():
    spec, pos = parse_spec("08.3d", 0, iter(()))
    assert spec == FormatSpec(minimum=8, flag="", width=-1, precision=3, conversion="d")
    assert pos == 5


def test_parse_spec_bare_dot_is_zero_precision():
    spec, _ = parse_spec(".s", 0, iter(()))
    assert spec.precision == 0
    assert spec.conversion == "s"


def test_render_value_hex():
    assert render_value(FormatSpec(conversion="x"), iter([255])) == format(255, "x")


def test_render_value_percent_consumes_nothing():
    args = iter([7])
    assert render_value(FormatSpec(conversion="%"), args) == "%"
    assert next(args) == 7


def test_apply_flags_zero_pad_negative():
    spec = FormatSpec(flag="0", width=6, conversion="d")
    assert apply_flags("-42", spec) == "%06d" % -42


def test_apply_flags_truncates_string():
    spec = FormatSpec(precision=3, conversion="s")
    assert apply_flags("abcdef", spec) == "abcdef"[:3]


def test_printf_writes_and_counts(capsys):
    count = printf("%s=%d\n", "x", 5)
    captured = capsys.readouterr()
    assert captured.out == "%s=%d\n" % ("x", 5)
    assert count == len(captured.out)