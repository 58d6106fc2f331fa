"""Reader for typed configuration files."""

from .core import ValueType, Variable, ErrorLog
from .config import ParserConfig
from .config_parser import ConfigParser
from .store import VariableStore
from .errors import (
    ConfigError,
    FileOpenError,
    ParsingError,
    UnknownTypeError,
    DuplicateNameError,
    MissingEqualsError,
    ExpressionDelimiterError,
    ValueParsingError,
    TrailingContentError,
    VariableLookupError,
    VariableNotFoundError,
    VariableTypeMismatchError,
)

__all__ = [
    'ConfigParser',
    'ParserConfig',
    'ValueType',
    'Variable',
    'VariableStore',
    'ErrorLog',
    'ConfigError',
    'FileOpenError',
    'ParsingError',
    'UnknownTypeError',
    'DuplicateNameError',
    'MissingEqualsError',
    'ExpressionDelimiterError',
    'ValueParsingError',
    'TrailingContentError',
    'VariableLookupError',
    'VariableNotFoundError',
    'VariableTypeMismatchError',
]
