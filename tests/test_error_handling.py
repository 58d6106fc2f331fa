"""File access and error log tests"""
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from unittest.mock import Mock

import pytest

from typed_config import ConfigParser, ParserConfig
from typed_config.core.error_log import ErrorLog
from typed_config.errors import FileOpenError, VariableNotFoundError


def test_unopenable_file(tmp_path: Path) -> None:
    """A missing file is reported once and never raises"""
    missing = tmp_path / "nonexistent.cfg"
    parser = ConfigParser(missing)

    assert parser.error_count() == 1
    assert isinstance(parser.errors[0], FileOpenError)
    assert parser.error_string() == f"Error opening file: {missing}"
    assert parser.variable_names() == []

    # Getters still answer, with zero values
    assert parser.get_int("x") == 0
    assert parser.get_string("x") == ""
    assert parser.get_float_vector("x") == []
    assert parser.error_count() == 4


def test_directory_path(tmp_path: Path) -> None:
    parser = ConfigParser(tmp_path)
    assert parser.error_count() == 1
    assert isinstance(parser.errors[0], FileOpenError)


def test_error_handler_on_open_failure(tmp_path: Path) -> None:
    error_handler = Mock()
    ConfigParser(tmp_path / "missing.cfg", ParserConfig(error_handler=error_handler))
    assert error_handler.called
    assert isinstance(error_handler.call_args[0][0], FileOpenError)


def test_latin1_fallback(tmp_path: Path) -> None:
    config_file = tmp_path / "latin1.cfg"
    config_file.write_bytes(b'string s = "caf\xe9"\n')
    parser = ConfigParser(config_file)
    assert parser.error_count() == 0
    assert parser.get_string("s") == "café"


def test_no_fallback_encoding(tmp_path: Path) -> None:
    config_file = tmp_path / "latin1.cfg"
    config_file.write_bytes(b'string s = "caf\xe9"\n')
    parser = ConfigParser(config_file, ParserConfig(fallback_encoding=None))
    assert parser.error_count() == 1
    assert isinstance(parser.errors[0], FileOpenError)


def test_fallback_decode_failure(tmp_path: Path) -> None:
    """A file neither encoding can decode is recorded, not raised"""
    config_file = tmp_path / "latin1.cfg"
    config_file.write_bytes(b'string s = "caf\xe9"\n')
    parser = ConfigParser(config_file, ParserConfig(fallback_encoding="ascii"))
    assert parser.error_count() == 1
    assert isinstance(parser.errors[0], FileOpenError)
    assert parser.variable_names() == []


def test_string_path_accepted(tmp_path: Path) -> None:
    config_file = tmp_path / "a.cfg"
    config_file.write_text("int a = 1\n")
    assert ConfigParser(str(config_file)).get_int("a") == 1


@pytest.mark.parametrize("kwargs", [
    {"comment_prefix": ""},
    {"terminator": ""},
    {"terminator": '"'},
    {"encoding": "no-such-codec"},
    {"fallback_encoding": "bogus"},
])
def test_invalid_parser_config(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        ParserConfig(**kwargs)


def test_error_log_is_append_only() -> None:
    error_log = ErrorLog()
    assert not error_log
    error_log.append(VariableNotFoundError("first"))
    snapshot = error_log.errors
    snapshot.clear()
    assert len(error_log) == 1
    assert error_log.messages() == ["first"]


def test_concurrent_failed_lookups() -> None:
    parser = ConfigParser.from_string("int a = 1")

    def lookup(i: int) -> int:
        return parser.get_int(f"missing_{i}")

    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(lookup, range(200)))

    assert results == [0] * 200
    assert parser.error_count() == 200
