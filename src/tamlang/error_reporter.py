# src/tamlang/error_reporter.py
"""
Error types and rendering for tamlang.

Every failure the front end can produce is a ``TamError``. Each lexer feeds
the physical lines it reads into its own ``ErrorReporter`` so that an error
can later be printed together with the offending source line::

    try:
        parser.parse_program()
    except TamError as e:
        print_error(e, reporter=lexer.error_reporter)
"""

from typing import Dict, Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from .tam_token import EOF, describe


class TamError(Exception):
    """Base class for errors raised while checking a tamlang source."""

    kind = "Error"

    def __init__(self, message, line=None, column=None, filename=None, suggestion=None):
        self.message = message
        self.line = line
        self.column = column
        self.filename = filename
        self.suggestion = suggestion
        super().__init__(self.__str__())

    @property
    def where(self) -> str:
        return f"line {self.line}" if self.line is not None else "end of input"

    @property
    def location(self) -> str:
        if self.filename:
            return f"{self.filename}, {self.where}"
        return self.where

    def __str__(self):
        return f"{self.kind} at {self.where}: {self.message}"


class SyntaxError(TamError):
    """The token stream does not match the grammar."""

    kind = "Syntax error"

    def __init__(self, message, token=None, expected=None, filename=None, suggestion=None):
        self.expected = expected
        self.found_kind = token.kind if token is not None else None
        self.found_lexeme = token.lexeme if token is not None else None
        super().__init__(
            message,
            line=token.line if token is not None else None,
            column=token.column if token is not None else None,
            filename=filename,
            suggestion=suggestion,
        )

    @property
    def found(self) -> str:
        return self.found_kind or EOF

    @classmethod
    def expected_kind(cls, expected, token, filename=None, suggestion=None):
        return cls(
            f"Expected {expected}, found {describe(token)}",
            token=token,
            expected=expected,
            filename=filename,
            suggestion=suggestion,
        )


class UndeclaredVariableError(TamError):
    """An identifier was read or assigned before any declaration of it."""

    kind = "Undeclared variable"

    def __init__(self, name, line, column=None, filename=None):
        self.name = name
        super().__init__(
            name,
            line=line,
            column=column,
            filename=filename,
            suggestion=f"Declare it first with 'tam {name} ;'",
        )


class ErrorReporter:
    """Keeps the source lines seen by lexers so errors can quote them."""

    def __init__(self):
        self._sources: Dict[str, Dict[int, str]] = {}

    def register_line(self, filename: str, line: int, text: str) -> None:
        self._sources.setdefault(filename, {})[line] = text

    def forget(self, filename: str) -> None:
        self._sources.pop(filename, None)

    @property
    def filenames(self):
        return tuple(self._sources)

    def get_source_line(self, filename: Optional[str], line: Optional[int]) -> Optional[str]:
        if filename is None or line is None:
            return None
        return self._sources.get(filename, {}).get(line)

    def format_error(self, error: TamError) -> str:
        lines = [f"{error.kind}: {error.message}", f"  --> {error.location}"]
        source_line = self.get_source_line(error.filename, error.line)
        if source_line is not None:
            gutter = str(error.line)
            lines.append(f" {gutter} | {source_line}")
            if error.column:
                lines.append(f" {' ' * len(gutter)} | {' ' * (error.column - 1)}^")
        if error.suggestion:
            lines.append(f"  hint: {error.suggestion}")
        return "\n".join(lines)


def print_error(error: TamError, console: Optional[Console] = None, reporter: Optional[ErrorReporter] = None):
    """Pretty-print an error in a red panel.

    Pass the reporter of the lexer that produced the error to quote the
    offending source line.
    """
    console = console or Console(stderr=True)
    reporter = reporter or ErrorReporter()
    console.print(Panel(
        Text(reporter.format_error(error)),
        title=f"[bold red]{error.kind}[/bold red]",
        border_style="red",
        expand=False,
    ))
