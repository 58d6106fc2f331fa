from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from .config_parser import ConfigParser


def build_variable_table(parser: ConfigParser) -> Table:
    """Tabulate every stored variable with its raw expression"""
    table = Table(title=f"Variables in {escape(str(parser.config_path))}")
    table.add_column("Name", style="cyan")
    table.add_column("Type", style="magenta")
    table.add_column("Expression")
    table.add_column("Line", justify="right")

    for name, variable in parser.store.items():
        # Expressions like [true, false] would otherwise parse as markup
        table.add_row(
            Text(name),
            Text(variable.type_string),
            Text(variable.expression),
            str(variable.line_number)
        )
    return table


def print_report(parser: ConfigParser, console: Optional[Console] = None) -> bool:
    """Print variables or errors for one parsed file, returning True if clean"""
    console = console or Console()

    if parser.error_count():
        console.print(f"[red]{parser.error_count()} error(s) in {escape(str(parser.config_path))}[/red]")
        for error in parser.errors:
            console.print(f"  {error}", markup=False)
        return False

    console.print(build_variable_table(parser))
    return True
