"""Typed configuration file reader.

A config file holds one typed declaration per line:

    # my_config.cfg
    string message = "Hello Universe"
    int[] primes = [2, 3, 5,
                    7, 11]

Values are read back through typed getters:

    config = ConfigParser("my_config.cfg")
    message = config.get_string("message")
    primes = config.get_int_vector("primes")

Nothing here raises on bad input. Problems are recorded in the error log and
getters fall back to a zero value, so callers check error_count().
"""
import logging
from pathlib import Path
from typing import Any, List, Optional, Union

from .config import ParserConfig
from .core.error_log import ErrorLog
from .core.value_type import ValueType
from .core.variable import Variable
from .errors import ConfigError, FileOpenError, VariableNotFoundError, VariableTypeMismatchError
from .parsing.declaration_parser import DeclarationParser
from .parsing.text_preprocessor import ConfigPreprocessor
from .parsing.value_parser import ValueParser
from .store.variable_store import VariableStore

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class ConfigParser:
    def __init__(self, config_path: PathLike, config: Optional[ParserConfig] = None) -> None:
        self._setup(Path(config_path), config)
        content = self._read_file()
        if content is not None:
            self.parse(content)

    @classmethod
    def from_string(cls, content: str, source: PathLike = "<string>",
                    config: Optional[ParserConfig] = None) -> 'ConfigParser':
        """Parse in-memory text; source only labels error messages"""
        parser = cls.__new__(cls)
        parser._setup(Path(source), config)
        parser.parse(content)
        return parser

    def _setup(self, config_path: Path, config: Optional[ParserConfig]) -> None:
        self.config_path = config_path
        self.config = config or ParserConfig()
        self.preprocessor = ConfigPreprocessor(
            comment_prefix=self.config.comment_prefix,
            terminator=self.config.terminator
        )
        self.declaration_parser = DeclarationParser(
            stop_on_first_error=self.config.stop_on_first_error,
            on_error=self.config.error_handler
        )
        self.store = VariableStore()
        self.error_log = ErrorLog()

    def _read_file(self) -> Optional[str]:
        """Read the whole file, recording a single error if that fails"""
        try:
            logger.debug(f"Reading config file: {self.config_path}")
            return self.config_path.read_text(encoding=self.config.encoding)
        except UnicodeDecodeError:
            if self.config.fallback_encoding:
                logger.debug(f"Retrying with {self.config.fallback_encoding} encoding: {self.config_path}")
                try:
                    return self.config_path.read_text(encoding=self.config.fallback_encoding)
                except (OSError, UnicodeDecodeError) as e:
                    self._add_error(FileOpenError(f"cannot open file: {e}", self.config_path))
                    return None
            self._add_error(FileOpenError(f"cannot decode file {self.config_path}", self.config_path))
        except OSError as e:
            self._add_error(FileOpenError(f"cannot open file: {e}", self.config_path))
        return None

    def parse(self, content: str) -> None:
        declarations = self.preprocessor.preprocess(content)
        if not declarations:
            logger.warning(f"No declarations found in {self.config_path}")
            return

        self.declaration_parser.parse_declarations(
            declarations, self.config_path, self.store, self.error_log
        )
        logger.debug(f"Parsed {len(self.store)} variables from {self.config_path}")

    # Single value getters

    def get_string(self, name: str) -> str:
        return self._get_value(name, ValueType.STRING, False, "")

    def get_int(self, name: str) -> int:
        return self._get_value(name, ValueType.INT, False, 0)

    def get_float(self, name: str) -> float:
        return self._get_value(name, ValueType.FLOAT, False, 0.0)

    def get_double(self, name: str) -> float:
        return self._get_value(name, ValueType.DOUBLE, False, 0.0)

    def get_bool(self, name: str) -> bool:
        return self._get_value(name, ValueType.BOOL, False, False)

    # Vector getters

    def get_string_vector(self, name: str) -> List[str]:
        return self._get_value(name, ValueType.STRING, True, [])

    def get_int_vector(self, name: str) -> List[int]:
        return self._get_value(name, ValueType.INT, True, [])

    def get_float_vector(self, name: str) -> List[float]:
        return self._get_value(name, ValueType.FLOAT, True, [])

    def get_double_vector(self, name: str) -> List[float]:
        return self._get_value(name, ValueType.DOUBLE, True, [])

    def get_bool_vector(self, name: str) -> List[bool]:
        return self._get_value(name, ValueType.BOOL, True, [])

    # Inspection, no error logging

    def has_variable(self, name: str) -> bool:
        return name in self.store

    def get_variable(self, name: str) -> Optional[Variable]:
        return self.store.get_variable(name)

    def variable_names(self) -> List[str]:
        return list(self.store)

    # Diagnostics

    @property
    def errors(self) -> List[ConfigError]:
        return self.error_log.errors

    def error_count(self) -> int:
        return len(self.error_log)

    def error_string(self) -> str:
        return '\n'.join(self.error_log.messages())

    def dump_variables(self) -> str:
        """Show the direct result of parsing, for debugging"""
        lines = ["Variable Map:"]
        for name, variable in self.store.items():
            lines.append(f"\t{name} --> <{variable.type_string}> : {variable.expression}")
        return '\n'.join(lines)

    def _get_value(self, name: str, value_type: ValueType, is_vector: bool, default: Any) -> Any:
        """Re-parse the stored expression, or log and return the default"""
        variable = self.store.get_variable(name)
        type_string = value_type.type_string(is_vector)

        if variable is None:
            self._add_error(VariableNotFoundError(
                f"didn't find variable {name} of type {type_string}", self.config_path
            ))
            return default

        if not variable.matches(value_type, is_vector):
            self._add_error(VariableTypeMismatchError(
                f"variable {name} is declared as {variable.type_string}, requested {type_string}",
                self.config_path
            ))
            return default

        return ValueParser.parse_expression(variable.expression, value_type, is_vector)

    def _add_error(self, error: ConfigError) -> None:
        logger.error(str(error))
        self.error_log.append(error)
        if self.config.error_handler:
            self.config.error_handler(error)
