"""
tamlang - scanner and recursive-descent checker for the tam teaching language.
"""

__version__ = "0.1.0"

from .tam_token import Token
from .lexer import Lexer, open_lexer, tokenize
from .registry import DeclarationRegistry
from .parser import Parser, ParseResult
from .error_reporter import TamError, SyntaxError, UndeclaredVariableError
from .runner import FileReport, check_file, check_files, check_source

__all__ = [
    "Token", "Lexer", "open_lexer", "tokenize", "DeclarationRegistry",
    "Parser", "ParseResult", "TamError", "SyntaxError", "UndeclaredVariableError",
    "FileReport", "check_file", "check_files", "check_source",
]
