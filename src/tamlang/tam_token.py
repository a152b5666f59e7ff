# src/tamlang/tam_token.py
"""Token kinds, the keyword table and the Token value type."""

from dataclasses import dataclass

# Literals and names
NUMBER = "NUMBER"
ID = "ID"

# Keywords
IF = "IF"
ELSE = "ELSE"
FOR = "FOR"
WHILE = "WHILE"
BEGIN = "BEGIN"
END = "END"
INT = "INT"

# Operators
ASSIGN = "ASSIGN"
EQ = "EQ"
NEQ = "NEQ"
LT = "LT"
GT = "GT"
LEQ = "LEQ"
GEQ = "GEQ"
PLUS = "PLUS"
MINUS = "MINUS"
MUL = "MUL"
DIV = "DIV"

# Punctuation
LPAREN = "LPAREN"
RPAREN = "RPAREN"
SEMICOLON = "SEMICOLON"

UNKNOWN = "UNKNOWN"

# Never carried by a token; the lexer signals end of input with None.
EOF = "EOF"

KEYWORDS = {
    "olurMu": IF,
    "budaMıDegil": ELSE,
    "dönmeDolap": FOR,
    "çarkıFelek": WHILE,
    "basla": BEGIN,
    "bitir": END,
    "tam": INT,
}

TWO_CHAR_OPERATORS = {
    "==": EQ,
    "!=": NEQ,
    "<=": LEQ,
    ">=": GEQ,
}

ONE_CHAR_OPERATORS = {
    "=": ASSIGN,
    "<": LT,
    ">": GT,
    "+": PLUS,
    "-": MINUS,
    "*": MUL,
    "/": DIV,
    "(": LPAREN,
    ")": RPAREN,
    ";": SEMICOLON,
}

COMPARISON_OPERATORS = frozenset({EQ, NEQ, LT, GT, LEQ, GEQ})
ADDITIVE_OPERATORS = frozenset({PLUS, MINUS})
MULTIPLICATIVE_OPERATORS = frozenset({MUL, DIV})


@dataclass(frozen=True)
class Token:
    kind: str
    lexeme: str
    line: int
    column: int = 1

    def __str__(self) -> str:
        return f"{self.kind}({self.lexeme})"


def describe(token) -> str:
    """Render a lookahead token, or end of input, for error messages."""
    if token is None:
        return "end of input"
    return str(token)
