import codecs
from typing import Callable, Optional

from typed_config.errors import ConfigError

ErrorHandlerType = Callable[[ConfigError], None]


class ParserConfig:
    def __init__(
        self,
        comment_prefix: str = '#',
        terminator: Optional[str] = None,
        stop_on_first_error: bool = True,
        encoding: str = 'utf-8',
        fallback_encoding: Optional[str] = 'latin1',
        error_handler: Optional[ErrorHandlerType] = None
    ):
        if not comment_prefix:
            raise ValueError("comment_prefix must not be empty")
        if terminator is not None and (not terminator or '"' in terminator):
            raise ValueError(f"invalid declaration terminator: {terminator!r}")
        for codec in (encoding, fallback_encoding):
            if codec is not None:
                try:
                    codecs.lookup(codec)
                except LookupError:
                    raise ValueError(f"unknown encoding: {codec!r}") from None
        self.comment_prefix = comment_prefix
        self.terminator = terminator
        self.stop_on_first_error = stop_on_first_error
        self.encoding = encoding
        self.fallback_encoding = fallback_encoding
        self.error_handler = error_handler
