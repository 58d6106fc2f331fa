from pathlib import Path
from typing import Optional


class ConfigError(Exception):
    """Base error for everything recorded in a parser's error log"""

    def __init__(self, message: str, source: Optional[Path] = None,
                 line_number: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.source = source
        self.line_number = line_number

    def locate(self, source: Path, line_number: Optional[int] = None) -> 'ConfigError':
        """Attach the file and line the error was found in"""
        self.source = source
        if line_number is not None:
            self.line_number = line_number
        return self

    def __str__(self) -> str:
        return self.message


class FileOpenError(ConfigError):
    """Error when the config file cannot be read"""

    def __str__(self) -> str:
        return f"Error opening file: {self.source}"


class ParsingError(ConfigError):
    """Base error for parsing failures"""

    def __str__(self) -> str:
        if self.source is None:
            return self.message
        return f"Parsing error in file {self.source}, line {self.line_number}: {self.message}"


class UnknownTypeError(ParsingError):
    """Error for a type keyword outside the supported set"""
    pass


class DuplicateNameError(ParsingError):
    """Error for a variable declared twice"""
    pass


class MissingEqualsError(ParsingError):
    """Error when '=' does not follow the variable name"""
    pass


class ExpressionDelimiterError(ParsingError):
    """Error for missing or mismatched quotes/brackets around a value"""
    pass


class ValueParsingError(ParsingError):
    """Error when a value does not fit its declared type"""
    pass


class TrailingContentError(ParsingError):
    """Error for characters left over after the value"""
    pass


class VariableLookupError(ConfigError):
    """Base error for failed typed lookups"""

    def __str__(self) -> str:
        if self.source is None:
            return self.message
        return f"Lookup error in file {self.source}: {self.message}"


class VariableNotFoundError(VariableLookupError):
    """Error when no variable has the requested name"""
    pass


class VariableTypeMismatchError(VariableLookupError):
    """Error when a variable exists under another type or arity"""
    pass
