import logging
from pathlib import Path
from typing import Callable, List, Optional

from ..core.error_log import ErrorLog
from ..core.value_type import ValueType
from ..core.variable import Variable
from ..errors import ConfigError, DuplicateNameError, ParsingError
from ..store.variable_store import VariableStore
from .raw_declaration import Declaration, RawDeclaration
from .tokenizer import DeclarationTokenizer
from .value_parser import ValueParser

logger = logging.getLogger(__name__)


class DeclarationParser:
    """Validates declarations one at a time and folds them into a store"""

    def __init__(self, stop_on_first_error: bool = True,
                 on_error: Optional[Callable[[ConfigError], None]] = None) -> None:
        self.stop_on_first_error = stop_on_first_error
        self.on_error = on_error

    def parse_declarations(self, declarations: List[RawDeclaration], source: Path,
                           store: VariableStore, error_log: ErrorLog) -> VariableStore:
        """Fill the store from declarations, recording errors as they occur"""
        for raw in declarations:
            try:
                declaration = self.parse_declaration(raw, store)
            except ParsingError as e:
                self._record(e.locate(source, raw.line_number), error_log)
                if self.stop_on_first_error:
                    logger.debug(f"Stopped parsing {source} at line {raw.line_number}")
                    break
                continue

            store.add_variable(declaration.name, Variable(
                value_type=declaration.value_type,
                is_vector=declaration.is_vector,
                expression=declaration.expression,
                line_number=declaration.line_number
            ))

        return store

    def parse_declaration(self, raw: RawDeclaration, store: VariableStore) -> Declaration:
        """Tokenize and validate one declaration without touching the store"""
        tokenizer = DeclarationTokenizer(raw.text)

        type_name, is_vector = tokenizer.read_type()
        value_type = ValueType.from_name(type_name)

        name = tokenizer.read_name()
        if name in store:
            raise DuplicateNameError(f"redefinition of entity: {name}")

        tokenizer.expect_equals()
        expression = tokenizer.read_expression(value_type, is_vector)

        # Validate only; getters parse again on every read
        ValueParser.parse_expression(expression, value_type, is_vector)

        tokenizer.expect_end()

        return Declaration(
            value_type=value_type,
            is_vector=is_vector,
            name=name,
            expression=expression,
            line_number=raw.line_number
        )

    def _record(self, error: ConfigError, error_log: ErrorLog) -> None:
        logger.error(str(error))
        error_log.append(error)
        if self.on_error:
            self.on_error(error)
