from enum import Enum
from types import MappingProxyType
from typing import Mapping

from ..errors import UnknownTypeError


class ValueType(Enum):
    STRING = "string"
    INT = "int"
    FLOAT = "float"
    DOUBLE = "double"
    BOOL = "bool"

    @staticmethod
    def from_name(type_name: str) -> 'ValueType':
        """Look up a type keyword, rejecting anything outside the closed set"""
        try:
            return TYPE_NAMES[type_name]
        except KeyError:
            raise UnknownTypeError(f"invalid type: {type_name}") from None

    def type_string(self, is_vector: bool) -> str:
        return f"{self.value}[]" if is_vector else self.value


# Keyword -> type table, built once at import
TYPE_NAMES: Mapping[str, ValueType] = MappingProxyType(
    {value_type.value: value_type for value_type in ValueType}
)
