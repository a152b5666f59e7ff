# src/tamlang/runner.py
"""Check one or more tamlang source files, each independently of the others."""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .lexer import Lexer, open_lexer
from .parser import ParseResult, Parser

logger = logging.getLogger("tamlang.runner")


@dataclass(frozen=True)
class FileReport:
    path: str
    result: Optional[ParseResult] = None
    io_error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.result is not None and self.result.ok

    @property
    def declared(self) -> Tuple[str, ...]:
        return self.result.declared if self.result is not None else ()

    @property
    def error(self):
        """The parse error, or None. I/O failures are reported in ``io_error``."""
        return self.result.error if self.result is not None else None

    @property
    def reporter(self):
        return self.result.reporter if self.result is not None else None


def check_source(text: str, filename: str = "<string>") -> ParseResult:
    return Parser(Lexer(text, filename=filename)).parse()


def check_file(path, encoding: str = "utf-8") -> FileReport:
    path = str(path)
    try:
        with open_lexer(path, encoding=encoding) as lexer:
            result = Parser(lexer).parse()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Cannot read %s: %s", path, e)
        return FileReport(path, io_error=str(e))
    return FileReport(path, result=result)


def check_files(paths: Iterable, encoding: str = "utf-8") -> List[FileReport]:
    reports = []
    for path in paths:
        report = check_file(path, encoding=encoding)
        logger.info("%s: %s", report.path, "ok" if report.ok else "failed")
        reports.append(report)
    return reports
