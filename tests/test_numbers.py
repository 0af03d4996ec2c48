"""Test number literals and the fallback to names."""

from mathlang.tokens import TokenType

from .conftest import assert_types, assert_values, pairs


class TestDecimal:
    def test_integer(self, lex):
        tokens = lex("123")
        assert_types(tokens, [TokenType.NUMBER])
        assert_values(tokens, [123.0])

    def test_value_is_float(self, lex):
        assert isinstance(lex("7")[0].value, float)

    def test_fraction(self, lex):
        assert_values(lex("1.5"), [1.5])

    def test_leading_dot(self, lex):
        assert_values(lex(".5"), [0.5])

    def test_trailing_dot(self, lex):
        assert_values(lex("2."), [2.0])

    def test_followed_by_symbol(self, lex):
        tokens = lex("123;")
        assert pairs(tokens) == [(TokenType.NUMBER, 123.0), (TokenType.SYMBOL, ";")]

    def test_raw_text_preserved(self, lex):
        assert lex("007")[0].raw == "007"


class TestFallbackToName:
    def test_trailing_letter(self, lex):
        tokens = lex("12a;")
        assert pairs(tokens) == [(TokenType.NAME, "12a"), (TokenType.SYMBOL, ";")]

    def test_exponent_is_not_plain_decimal(self, lex):
        assert pairs(lex("1e5")) == [(TokenType.NAME, "1e5")]

    def test_two_dots(self, lex):
        assert pairs(lex("1.2.3")) == [(TokenType.NAME, "1.2.3")]

    def test_nan_is_a_name(self, lex):
        assert pairs(lex("nan")) == [(TokenType.NAME, "nan")]

    def test_lone_dot(self, lex):
        assert pairs(lex(".")) == [(TokenType.NAME, ".")]


class TestSigns:
    def test_plus_is_never_a_sign(self, lex):
        tokens = lex("+5")
        assert pairs(tokens) == [(TokenType.SYMBOL, "+"), (TokenType.NUMBER, 5.0)]

    def test_minus_attached_to_digits_is_a_sign(self, lex):
        assert pairs(lex("-5")) == [(TokenType.NUMBER, -5.0)]

    def test_minus_between_names(self, lex):
        tokens = lex("x - 5")
        assert pairs(tokens) == [
            (TokenType.NAME, "x"),
            (TokenType.SYMBOL, "-"),
            (TokenType.NUMBER, 5.0),
        ]

    def test_minus_without_spaces_binds_to_number(self, lex):
        tokens = lex("1-2")
        assert pairs(tokens) == [(TokenType.NUMBER, 1.0), (TokenType.NUMBER, -2.0)]

    def test_minus_before_name(self, lex):
        tokens = lex("-x")
        assert pairs(tokens) == [(TokenType.SYMBOL, "-"), (TokenType.NAME, "x")]


class TestEndOfSource:
    def test_number_without_cutoff(self, lex):
        tokens = lex("x = 42")
        assert pairs(tokens)[-1] == (TokenType.NUMBER, 42.0)

    def test_number_before_newline(self, lex):
        tokens = lex("42\n")
        assert pairs(tokens) == [(TokenType.NUMBER, 42.0)]
