import logging
from typing import List, Optional

from .raw_declaration import RawDeclaration

logger = logging.getLogger(__name__)


class ConfigPreprocessor:
    """Preprocesses config text into normalized declaration strings"""

    def __init__(self, comment_prefix: str = '#', terminator: Optional[str] = None) -> None:
        self.comment_prefix = comment_prefix
        self.terminator = terminator

    def preprocess(self, content: str) -> List[RawDeclaration]:
        """Clean content and break it into declarations"""
        # Normalize line endings
        content = content.replace('\r\n', '\n').replace('\r', '\n')

        if self.terminator:
            declarations = self.split_on_terminator(content)
        else:
            declarations = self.split_into_lines(content)

        logger.debug(f"Preprocessing produced {len(declarations)} declarations")
        return declarations

    def strip_comments(self, content: str) -> str:
        """Drop everything from an unquoted comment prefix to end of line"""
        result = []
        in_string = False
        in_comment = False
        i = 0

        while i < len(content):
            char = content[i]

            if in_comment:
                # Keep the newline so line numbers survive
                if char == '\n':
                    in_comment = False
                    result.append(char)
                i += 1
                continue

            if char == '"':
                in_string = not in_string
            elif not in_string and content.startswith(self.comment_prefix, i):
                in_comment = True
                i += len(self.comment_prefix)
                continue

            result.append(char)
            i += 1

        return ''.join(result)

    def collapse_whitespace(self, content: str) -> str:
        """Turn each unquoted whitespace run into a single space"""
        result = []
        in_string = False
        in_whitespace = False

        for char in content:
            if in_string:
                if char == '"':
                    in_string = False
                result.append(char)
            elif char.isspace():
                if not in_whitespace:
                    in_whitespace = True
                    result.append(' ')
            else:
                in_whitespace = False
                if char == '"':
                    in_string = True
                result.append(char)

        return ''.join(result)

    def split_into_lines(self, content: str) -> List[RawDeclaration]:
        """One declaration per line, rejoining lines of an open vector literal"""
        declarations = []
        pending: List[str] = []
        start_line = 0
        depth = 0

        for line_number, line in enumerate(content.split('\n'), start=1):
            text = self.collapse_whitespace(self.strip_comments(line)).strip()
            if not text:
                continue

            if not pending:
                start_line = line_number
            pending.append(text)

            depth += self._bracket_balance(text)
            if depth > 0:
                continue

            declarations.append(RawDeclaration(' '.join(pending), start_line))
            pending = []
            depth = 0

        # Unclosed vector at end of input, left for the tokenizer to reject
        if pending:
            logger.debug(f"Unterminated vector literal starting on line {start_line}")
            declarations.append(RawDeclaration(' '.join(pending), start_line))

        return declarations

    def split_on_terminator(self, content: str) -> List[RawDeclaration]:
        """Split at unquoted terminators, ignoring line structure"""
        terminator = self.terminator or ";"
        content = self.strip_comments(content)

        declarations = []
        current: List[str] = []
        start_line: Optional[int] = None
        line_number = 1
        in_string = False
        i = 0

        while i < len(content):
            char = content[i]

            if not in_string and content.startswith(terminator, i):
                self._flush(current, start_line, declarations)
                current = []
                start_line = None
                i += len(terminator)
                continue

            if char == '"':
                in_string = not in_string
            if start_line is None and not char.isspace():
                start_line = line_number
            if char == '\n':
                line_number += 1

            current.append(char)
            i += 1

        self._flush(current, start_line, declarations)
        return declarations

    def _flush(self, current: List[str], start_line: Optional[int],
               declarations: List[RawDeclaration]) -> None:
        text = self.collapse_whitespace(''.join(current)).strip()
        if text and start_line is not None:
            declarations.append(RawDeclaration(text, start_line))

    @staticmethod
    def _bracket_balance(text: str) -> int:
        """Net count of unquoted '[' over ']'"""
        balance = 0
        in_string = False
        for char in text:
            if char == '"':
                in_string = not in_string
            elif not in_string:
                if char == '[':
                    balance += 1
                elif char == ']':
                    balance -= 1
        return balance
