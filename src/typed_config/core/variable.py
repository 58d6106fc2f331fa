from dataclasses import dataclass

from .value_type import ValueType


@dataclass(frozen=True)
class Variable:
    """Represents a single declared variable, keyed by name in the store"""
    value_type: ValueType
    is_vector: bool
    expression: str
    line_number: int = 0

    @property
    def type_string(self) -> str:
        return self.value_type.type_string(self.is_vector)

    def matches(self, value_type: ValueType, is_vector: bool) -> bool:
        return self.value_type is value_type and self.is_vector == is_vector
