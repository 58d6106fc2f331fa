from dataclasses import dataclass

from ..core.value_type import ValueType


@dataclass
class RawDeclaration:
    """Normalized declaration text before tokenizing"""
    text: str
    line_number: int  # physical line the declaration starts on


@dataclass
class Declaration:
    """Tokenized declaration, folded into the variable store once validated"""
    value_type: ValueType
    is_vector: bool
    name: str
    expression: str
    line_number: int
