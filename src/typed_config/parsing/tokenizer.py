from typing import Callable, Tuple

from ..core.value_type import ValueType
from ..errors import (
    ExpressionDelimiterError,
    MissingEqualsError,
    ParsingError,
    TrailingContentError,
)

VECTOR_SUFFIX = '[]'


def is_space(char: str) -> bool:
    return char.isspace()


def ends_name(char: str) -> bool:
    return char.isspace() or char == '='


class DeclarationTokenizer:
    """Cursor over a single `type name = expression` declaration.

    Usage:
        tokenizer = DeclarationTokenizer("int[] primes = [2, 3, 5]")
        type_name, is_vector = tokenizer.read_type()
        name = tokenizer.read_name()
        tokenizer.expect_equals()
        expression = tokenizer.read_expression(ValueType.INT, is_vector)
        tokenizer.expect_end()
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.index = 0

    def at_end(self) -> bool:
        return self.index >= len(self.text)

    def read_token(self, is_delimiter: Callable[[str], bool]) -> str:
        """Advance to the next delimiter and return everything before it"""
        start = self.index
        while self.index < len(self.text) and not is_delimiter(self.text[self.index]):
            self.index += 1
        return self.text[start:self.index]

    def skip_whitespace(self) -> None:
        while self.index < len(self.text) and self.text[self.index].isspace():
            self.index += 1

    def read_rest(self) -> str:
        rest = self.text[self.index:]
        self.index = len(self.text)
        return rest

    def read_type(self) -> Tuple[str, bool]:
        """Read the type keyword, stripping a vector suffix"""
        self.skip_whitespace()
        type_name = self.read_token(is_space)
        is_vector = len(type_name) >= len(VECTOR_SUFFIX) and type_name.endswith(VECTOR_SUFFIX)
        if is_vector:
            type_name = type_name[:-len(VECTOR_SUFFIX)]
        return type_name, is_vector

    def read_name(self) -> str:
        self.skip_whitespace()
        name = self.read_token(ends_name)
        if not name:
            raise ParsingError(f"expected variable name at \"{self.text[self.index:]}\"")
        return name

    def expect_equals(self) -> None:
        self.skip_whitespace()
        if not self.at_end() and self.text[self.index] == '=':
            self.index += 1
            return
        found = self.read_token(is_space)
        raise MissingEqualsError(f'expected "=", encountered "{found}"')

    def read_expression(self, value_type: ValueType, is_vector: bool) -> str:
        """Extract the raw value expression, shape depending on type"""
        self.skip_whitespace()
        if is_vector:
            expression = self.read_rest()
            if not (expression.startswith('[') and expression.endswith(']')):
                raise ExpressionDelimiterError("vector must be enclosed in []")
            return expression

        if value_type is ValueType.STRING:
            expression = self.read_rest()
            if len(expression) < 2 or not (expression.startswith('"') and expression.endswith('"')):
                raise ExpressionDelimiterError('string value must be enclosed in ""')
            return expression

        return self.read_token(is_space)

    def expect_end(self) -> None:
        self.skip_whitespace()
        if not self.at_end():
            raise TrailingContentError(
                f'expected end of declaration at "{self.text[self.index:]}"'
            )
