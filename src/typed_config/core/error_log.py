import threading
from typing import Iterator, List

from ..errors import ConfigError


class ErrorLog:
    """Append-only, ordered record of errors seen by a parser instance.

    Appends are serialized so that getters called from several threads on a
    shared parser cannot interleave writes.
    """

    def __init__(self) -> None:
        self._errors: List[ConfigError] = []
        self._lock = threading.Lock()

    def append(self, error: ConfigError) -> None:
        with self._lock:
            self._errors.append(error)

    @property
    def errors(self) -> List[ConfigError]:
        with self._lock:
            return list(self._errors)

    def messages(self) -> List[str]:
        return [str(error) for error in self.errors]

    def __len__(self) -> int:
        with self._lock:
            return len(self._errors)

    def __iter__(self) -> Iterator[ConfigError]:
        return iter(self.errors)

    def __bool__(self) -> bool:
        return len(self) > 0
