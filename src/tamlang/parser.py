# src/tamlang/parser.py
"""
Recursive-descent checker for tamlang.

The parser validates syntax and declaration-before-use in a single pass over
the token stream with one token of lookahead. It builds no tree; the only
state that survives a parse is the declaration registry. The first error
aborts the parse.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .tam_token import (
    ADDITIVE_OPERATORS, ASSIGN, BEGIN, COMPARISON_OPERATORS, ELSE, END, FOR, ID,
    IF, INT, LPAREN, MULTIPLICATIVE_OPERATORS, NUMBER, RPAREN, SEMICOLON,
    UNKNOWN, WHILE, describe,
)
from .error_reporter import ErrorReporter, TamError, SyntaxError as TamSyntaxError
from .registry import DeclarationRegistry

logger = logging.getLogger("tamlang.parser")


@dataclass(frozen=True)
class ParseResult:
    filename: str
    declared: Tuple[str, ...]
    error: Optional[TamError] = None
    # Source lines seen while parsing, for rendering the error
    reporter: Optional[ErrorReporter] = field(default=None, compare=False, repr=False)

    @property
    def ok(self) -> bool:
        return self.error is None


class Parser:
    def __init__(self, lexer, registry=None):
        self.lexer = lexer
        self.filename = getattr(lexer, "filename", None)
        self.registry = registry if registry is not None else DeclarationRegistry()
        self.errors = []

        self.statement_fns = {
            INT: self.variable_declaration,
            ID: self.assignment,
            IF: self.if_statement,
            FOR: self.for_loop,
            WHILE: self.while_loop,
        }

        self.cur_token = self.lexer.next_token()

    @property
    def declared(self) -> Tuple[str, ...]:
        return self.registry.names

    # ── Entry points ──────────────────────────────────────────────────

    def parse(self) -> ParseResult:
        """Check the whole input and report the outcome instead of raising."""
        try:
            self.parse_program()
        except TamError as e:
            self.errors.append(e)
            logger.debug("%s: rejected: %s", self.filename, e)
            # A rejected parse reports no declarations
            return ParseResult(self.filename, (), e, reporter=self._reporter())
        logger.debug("%s: accepted, %d variable(s) declared", self.filename, len(self.registry))
        return ParseResult(self.filename, self.declared, reporter=self._reporter())

    def _reporter(self):
        return getattr(self.lexer, "error_reporter", None)

    def parse_program(self):
        self.program()
        return self.declared

    # ── Token handling ────────────────────────────────────────────────

    def cur_token_is(self, kind):
        return self.cur_token is not None and self.cur_token.kind == kind

    def cur_token_in(self, kinds):
        return self.cur_token is not None and self.cur_token.kind in kinds

    def next_token(self):
        self.cur_token = self.lexer.next_token()

    def consume(self, kind):
        """Consume the lookahead token if it is of *kind*, else fail."""
        tok = self.cur_token
        if tok is None or tok.kind != kind:
            raise TamSyntaxError.expected_kind(
                kind, tok, filename=self.filename, suggestion=self._suggest(kind, tok))
        logger.debug("Consuming token: %s", tok)
        self.next_token()
        return tok

    def _suggest(self, expected, tok):
        if tok is not None and tok.kind == UNKNOWN:
            return f"'{tok.lexeme}' is not part of the language"
        if expected == SEMICOLON:
            return "Statements end with ';'"
        if expected == END:
            return "Close the block with 'bitir'"
        return None

    def _unexpected(self, context=None):
        tok = self.cur_token
        where = f" {context}" if context else ""
        if tok is None:
            return TamSyntaxError(f"Unexpected end of input{where}", filename=self.filename)
        return TamSyntaxError(
            f"Unexpected token{where}: {describe(tok)}",
            token=tok, filename=self.filename, suggestion=self._suggest(None, tok))

    def _require_declared(self):
        self.registry.require(self.cur_token, filename=self.filename)

    # ── Statements ────────────────────────────────────────────────────

    def program(self):
        while self.cur_token is not None:
            self.statement()

    def statement(self):
        if self.cur_token is None:
            return
        fn = self.statement_fns.get(self.cur_token.kind)
        if fn is None:
            raise self._unexpected()
        fn()

    def block(self):
        """BEGIN statement* END"""
        self.consume(BEGIN)
        while self.cur_token is not None and not self.cur_token_is(END):
            self.statement()
        self.consume(END)

    def variable_declaration(self):
        self.consume(INT)
        if not self.cur_token_is(ID):
            raise TamSyntaxError.expected_kind(ID, self.cur_token, filename=self.filename)

        name = self.cur_token.lexeme
        if self.registry.declare(name, self.cur_token.line):
            logger.debug("Declared variable: %s", name)
        else:
            logger.debug("Re-declared variable: %s", name)
        self.consume(ID)

        if self.cur_token_is(ASSIGN):
            self.consume(ASSIGN)
            self.expression()

        self.consume(SEMICOLON)

    def assignment(self, terminated=True):
        if not self.cur_token_is(ID):
            raise TamSyntaxError.expected_kind(ID, self.cur_token, filename=self.filename)
        self._require_declared()
        logger.debug("Assigning to variable: %s", self.cur_token.lexeme)
        self.consume(ID)
        self.consume(ASSIGN)
        self.expression()
        if terminated:
            self.consume(SEMICOLON)

    def if_statement(self):
        logger.debug("Parsing IF statement")
        self.consume(IF)
        self.consume(LPAREN)
        self.logical_expression()
        self.consume(RPAREN)
        self.block()

        if self.cur_token_is(ELSE):
            logger.debug("Parsing ELSE clause")
            self.consume(ELSE)
            self.block()

    def for_loop(self):
        logger.debug("Parsing FOR loop")
        self.consume(FOR)
        self.consume(LPAREN)
        self.assignment()
        self.logical_expression()
        self.consume(SEMICOLON)
        self.assignment(terminated=False)
        self.consume(RPAREN)
        self.block()

    def while_loop(self):
        logger.debug("Parsing WHILE loop")
        self.consume(WHILE)
        self.consume(LPAREN)
        self.logical_expression()
        self.consume(RPAREN)
        self.block()

    # ── Expressions ───────────────────────────────────────────────────

    def logical_expression(self):
        # A bare expression is accepted as a condition
        self.expression()
        if self.cur_token_in(COMPARISON_OPERATORS):
            self.consume(self.cur_token.kind)
            self.expression()

    def expression(self):
        self.term()
        while self.cur_token_in(ADDITIVE_OPERATORS):
            self.consume(self.cur_token.kind)
            self.term()

    def term(self):
        self.factor()
        while self.cur_token_in(MULTIPLICATIVE_OPERATORS):
            self.consume(self.cur_token.kind)
            self.factor()

    def factor(self):
        if self.cur_token_is(NUMBER):
            self.consume(NUMBER)
        elif self.cur_token_is(ID):
            self._require_declared()
            self.consume(ID)
        elif self.cur_token_is(LPAREN):
            self.consume(LPAREN)
            self.expression()
            self.consume(RPAREN)
        else:
            raise self._unexpected("in factor")
