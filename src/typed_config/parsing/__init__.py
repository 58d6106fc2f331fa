from .text_preprocessor import ConfigPreprocessor
from .raw_declaration import RawDeclaration, Declaration
from .tokenizer import DeclarationTokenizer
from .value_parser import ValueParser
from .declaration_parser import DeclarationParser
from .patterns import VALUE_PATTERNS

__all__ = [
    'ConfigPreprocessor', 'RawDeclaration', 'Declaration', 'DeclarationTokenizer',
    'ValueParser', 'DeclarationParser', 'VALUE_PATTERNS'
]
