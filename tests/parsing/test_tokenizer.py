import pytest

from typed_config.core.value_type import ValueType
from typed_config.errors import (
    ExpressionDelimiterError,
    MissingEqualsError,
    ParsingError,
    TrailingContentError,
)
from typed_config.parsing.tokenizer import DeclarationTokenizer


def test_vector_declaration() -> None:
    tokenizer = DeclarationTokenizer("int[] primes = [2, 3]")
    assert tokenizer.read_type() == ("int", True)
    assert tokenizer.read_name() == "primes"
    tokenizer.expect_equals()
    assert tokenizer.read_expression(ValueType.INT, True) == "[2, 3]"
    tokenizer.expect_end()


def test_scalar_declaration_without_spaces() -> None:
    tokenizer = DeclarationTokenizer("int x=5")
    assert tokenizer.read_type() == ("int", False)
    assert tokenizer.read_name() == "x"
    tokenizer.expect_equals()
    assert tokenizer.read_expression(ValueType.INT, False) == "5"
    tokenizer.expect_end()


def test_string_expression_keeps_inner_spaces() -> None:
    tokenizer = DeclarationTokenizer('string s = "a  b"')
    tokenizer.read_type()
    tokenizer.read_name()
    tokenizer.expect_equals()
    assert tokenizer.read_expression(ValueType.STRING, False) == '"a  b"'
    assert tokenizer.at_end()


def test_missing_equals() -> None:
    tokenizer = DeclarationTokenizer("int x 5")
    tokenizer.read_type()
    tokenizer.read_name()
    with pytest.raises(MissingEqualsError) as exc_info:
        tokenizer.expect_equals()
    assert '"5"' in str(exc_info.value)


@pytest.mark.parametrize("text,value_type,is_vector", [
    ("string s = hello", ValueType.STRING, False),
    ('string s = "', ValueType.STRING, False),
    ("int[] v = 1, 2", ValueType.INT, True),
    ("int[] v = [1, 2", ValueType.INT, True),
    ("int[] v =", ValueType.INT, True),
])
def test_bad_delimiters(text: str, value_type: ValueType, is_vector: bool) -> None:
    tokenizer = DeclarationTokenizer(text)
    tokenizer.read_type()
    tokenizer.read_name()
    tokenizer.expect_equals()
    with pytest.raises(ExpressionDelimiterError):
        tokenizer.read_expression(value_type, is_vector)


def test_trailing_content() -> None:
    tokenizer = DeclarationTokenizer("int x = 5 6")
    tokenizer.read_type()
    tokenizer.read_name()
    tokenizer.expect_equals()
    assert tokenizer.read_expression(ValueType.INT, False) == "5"
    with pytest.raises(TrailingContentError) as exc_info:
        tokenizer.expect_end()
    assert '"6"' in str(exc_info.value)


def test_read_token_primitives() -> None:
    tokenizer = DeclarationTokenizer("abc,def   ghi")
    assert tokenizer.read_token(lambda c: c == ',') == "abc"
    assert tokenizer.index == 3
    tokenizer.index += 1
    assert tokenizer.read_token(str.isspace) == "def"
    tokenizer.skip_whitespace()
    assert tokenizer.read_rest() == "ghi"
    assert tokenizer.at_end()


@pytest.mark.parametrize("text", ["int = 5", "int", "bool =true"])
def test_missing_name(text: str) -> None:
    tokenizer = DeclarationTokenizer(text)
    tokenizer.read_type()
    with pytest.raises(ParsingError):
        tokenizer.read_name()
