import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from typed_config import ConfigParser, ParserConfig
from typed_config.report import print_report

@dataclass
class CheckerConfig:
    """Checker command line settings"""
    config_files: List[Path]
    terminator: Optional[str] = None
    comment_prefix: str = "#"
    keep_going: bool = False
    verbose: bool = False
    parser_config: Optional[ParserConfig] = None

def parse_arguments() -> CheckerConfig:
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description="Validate typed config files and list their variables"
    )
    parser.add_argument(
        "config_files",
        nargs="+",
        type=Path,
        help="One or more config files to check"
    )
    parser.add_argument(
        "--terminator",
        default=None,
        help="Split declarations on this terminator instead of on lines"
    )
    parser.add_argument(
        "--comment-prefix",
        default="#",
        help="Comment prefix (default: #)"
    )
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Report every bad declaration instead of stopping at the first"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output"
    )

    args = parser.parse_args()
    try:
        parser_config = ParserConfig(
            comment_prefix=args.comment_prefix,
            terminator=args.terminator,
            stop_on_first_error=not args.keep_going
        )
    except ValueError as e:
        parser.error(str(e))

    return CheckerConfig(
        config_files=args.config_files,
        terminator=args.terminator,
        comment_prefix=args.comment_prefix,
        keep_going=args.keep_going,
        verbose=args.verbose,
        parser_config=parser_config
    )

def setup_logging(verbose: bool) -> logging.Logger:
    """Setup console logging for the library"""
    # Errors already reach the console through the report
    logger = logging.getLogger("typed_config")
    logger.setLevel(logging.DEBUG if verbose else logging.CRITICAL)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(
        logging.Formatter('%(levelname)s: %(message)s')
    )
    logger.addHandler(console_handler)
    return logger

def main() -> int:
    """Main entry point"""
    config = parse_arguments()
    setup_logging(config.verbose)
    console = Console()

    failures = 0
    for path in config.config_files:
        parser = ConfigParser(path, config.parser_config)
        if not print_report(parser, console):
            failures += 1

    if failures:
        console.print(f"[red]{failures} of {len(config.config_files)} file(s) had errors[/red]")
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
