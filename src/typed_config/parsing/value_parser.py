import math
import struct
from types import MappingProxyType
from typing import Any, Callable, List, Mapping

from ..core.value_type import ValueType
from ..errors import ValueParsingError
from .patterns import INT_MAX, INT_MIN, VALUE_PATTERNS


class ValueParser:
    """Per-type converters from raw expression text to Python values.

    Every parser consumes its whole input or raises ValueParsingError; no
    partial parses and no partial vectors are ever returned.
    """

    @staticmethod
    def parse_string(raw_value: str) -> str:
        if len(raw_value) < 2 or raw_value[0] != '"' or raw_value[-1] != '"':
            raise ValueParsingError(f"string must be enclosed in \"\": {raw_value}")
        value = raw_value[1:-1]
        if '"' in value:
            raise ValueParsingError(f"string must not contain quotes: {raw_value}")
        return value

    @staticmethod
    def parse_int(raw_value: str) -> int:
        if not VALUE_PATTERNS['int'].fullmatch(raw_value):
            raise ValueParsingError(f"invalid int literal: {raw_value}")
        value = int(raw_value)
        if not INT_MIN <= value <= INT_MAX:
            raise ValueParsingError(f"int out of range: {raw_value}")
        return value

    @staticmethod
    def parse_float(raw_value: str) -> float:
        """Parse at single precision"""
        value = ValueParser._parse_real(raw_value)
        try:
            result = struct.unpack('f', struct.pack('f', value))[0]
        except OverflowError:
            result = math.inf
        # Packing may round an out-of-range value to inf instead of raising
        if math.isinf(result) and not math.isinf(value):
            raise ValueParsingError(f"float out of range: {raw_value}")
        if result == 0.0 and value != 0.0:
            raise ValueParsingError(f"float underflow: {raw_value}")
        return result

    @staticmethod
    def parse_double(raw_value: str) -> float:
        return ValueParser._parse_real(raw_value)

    @staticmethod
    def parse_bool(raw_value: str) -> bool:
        if not VALUE_PATTERNS['bool'].fullmatch(raw_value):
            raise ValueParsingError(f"invalid bool literal: {raw_value}")
        return raw_value == 'true'

    @staticmethod
    def _parse_real(raw_value: str) -> float:
        if not VALUE_PATTERNS['real'].fullmatch(raw_value):
            raise ValueParsingError(f"invalid floating point literal: {raw_value}")
        value = float(raw_value)
        # Finite literal too large or too small for a double
        if math.isinf(value) and 'inf' not in raw_value.lower():
            raise ValueParsingError(f"double out of range: {raw_value}")
        if value == 0.0 and ValueParser._has_nonzero_mantissa(raw_value):
            raise ValueParsingError(f"double underflow: {raw_value}")
        return value

    @staticmethod
    def _has_nonzero_mantissa(raw_value: str) -> bool:
        mantissa = raw_value.lower().split('e')[0]
        return any(char in '123456789' for char in mantissa)

    @staticmethod
    def parse_scalar(raw_value: str, value_type: ValueType) -> Any:
        return SCALAR_PARSERS[value_type](raw_value)

    @staticmethod
    def parse_vector(raw_value: str, value_type: ValueType) -> List[Any]:
        """Split a bracketed list and parse each element, failing on the first bad one"""
        parse = SCALAR_PARSERS[value_type]
        return [parse(item) for item in ValueParser.split_vector_expression(raw_value, value_type)]

    @staticmethod
    def parse_expression(raw_value: str, value_type: ValueType, is_vector: bool) -> Any:
        try:
            if is_vector:
                return ValueParser.parse_vector(raw_value, value_type)
            return ValueParser.parse_scalar(raw_value, value_type)
        except ValueParsingError as e:
            raise ValueParsingError(
                f"could not parse `{raw_value}` as type "
                f"{value_type.type_string(is_vector)} ({e.message})"
            ) from e

    @staticmethod
    def check_expression(raw_value: str, value_type: ValueType, is_vector: bool) -> bool:
        """Validate-only form of parse_expression"""
        try:
            ValueParser.parse_expression(raw_value, value_type, is_vector)
        except ValueParsingError:
            return False
        return True

    @staticmethod
    def split_vector_expression(raw_value: str, value_type: ValueType) -> List[str]:
        """Break "[1, 2, 3]" into ["1", "2", "3"]"""
        if len(raw_value) < 2 or raw_value[0] != '[' or raw_value[-1] != ']':
            raise ValueParsingError(f"vector must be enclosed in []: {raw_value}")

        content = raw_value[1:-1].strip()
        if not content:
            return []

        if value_type is ValueType.STRING:
            return ValueParser._split_string_items(content)
        return ValueParser._split_items(content)

    @staticmethod
    def _split_items(content: str) -> List[str]:
        """Split non-string elements on commas"""
        items = []
        for item in content.split(','):
            item = item.lstrip()
            if not item:
                raise ValueParsingError("empty vector element")
            if any(char.isspace() for char in item):
                raise ValueParsingError(f"malformed spacing in vector element: {item}")
            items.append(item)
        return items

    @staticmethod
    def _split_string_items(content: str) -> List[str]:
        """Split quoted elements, keeping their quotes"""
        items: List[str] = []
        current: List[str] = []
        in_string = False
        expect_comma = False

        for char in content:
            if in_string:
                current.append(char)
                if char == '"':
                    in_string = False
                    expect_comma = True
                    items.append(''.join(current))
                    current = []
            elif expect_comma:
                if char != ',':
                    raise ValueParsingError(f"expected ',' after {items[-1]}")
                expect_comma = False
            elif char.isspace():
                continue
            elif char == '"':
                in_string = True
                current = [char]
            else:
                raise ValueParsingError('vector element must be enclosed in ""')

        if in_string:
            raise ValueParsingError(f"unterminated string: {''.join(current)}")
        if not expect_comma:
            raise ValueParsingError("trailing ',' in vector")
        return items


SCALAR_PARSERS: Mapping[ValueType, Callable[[str], Any]] = MappingProxyType({
    ValueType.STRING: ValueParser.parse_string,
    ValueType.INT: ValueParser.parse_int,
    ValueType.FLOAT: ValueParser.parse_float,
    ValueType.DOUBLE: ValueParser.parse_double,
    ValueType.BOOL: ValueParser.parse_bool,
})
