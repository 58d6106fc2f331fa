from rich.console import Console

from typed_config import ConfigParser
from typed_config.report import build_variable_table, print_report


def test_variable_table() -> None:
    parser = ConfigParser.from_string("int[] primes = [2, 3]\nbool on = true")
    table = build_variable_table(parser)
    assert table.row_count == 2
    assert [column.header for column in table.columns] == ["Name", "Type", "Expression", "Line"]


def test_clean_report() -> None:
    console = Console(record=True, width=120)
    parser = ConfigParser.from_string("int[] primes = [2, 3]")
    assert print_report(parser, console) is True

    output = console.export_text()
    assert "primes" in output
    assert "int[]" in output
    assert "[2, 3]" in output


def test_error_report() -> None:
    console = Console(record=True, width=200)
    parser = ConfigParser.from_string("int a = 1\nint a = 2", source="dup.cfg")
    assert print_report(parser, console) is False

    output = console.export_text()
    assert "1 error(s) in dup.cfg" in output
    assert "redefinition of entity: a" in output


def test_bracketed_values_are_not_markup() -> None:
    console = Console(record=True, width=120)
    parser = ConfigParser.from_string("bool[] flags = [true, false]")
    print_report(parser, console)
    assert "[true, false]" in console.export_text()
