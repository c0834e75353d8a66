"""
Insertion point for synthesized declarations.

A declaration must come after every #version / #extension directive and
after every precision statement, so that directive ordering stays valid and
the declared type picks up the default precision.
"""

import re
from typing import List

from ..errors import MissingSemicolonError
from ..lexer.tokens import (
    KEYWORD, NEWLINE, OPERATOR, PREPROCESSOR, WHITESPACE, Token,
)

ORDERED_DIRECTIVE = re.compile(r'^#\s*(extension|version)\b')


def find_next_semicolon(tokens: List[Token], start: int) -> int:
    """Return the index of the first ';' at or after start, or -1."""
    for i in range(start, len(tokens)):
        if tokens[i].kind == OPERATOR and tokens[i].text == ';':
            return i
    return -1


def find_insertion_index(tokens: List[Token]) -> int:
    """
    Compute where a synthesized declaration may be inserted.

    Args:
        tokens: Token sequence

    Returns:
        Index of the first token after the last ordered directive or
        precision statement, skipping any directives and whitespace after it

    Raises:
        MissingSemicolonError: If a precision statement has no ';'
    """
    start = -1
    for i, token in enumerate(tokens):
        if token.kind == PREPROCESSOR:
            if ORDERED_DIRECTIVE.match(token.text):
                start = max(start, i)
        elif token.kind == KEYWORD and token.text == 'precision':
            semi = find_next_semicolon(tokens, i)
            if semi == -1:
                raise MissingSemicolonError()
            start = max(start, semi)

    start += 1
    while start < len(tokens) and tokens[start].kind in (PREPROCESSOR, WHITESPACE):
        start += 1
    return start


def insert_declaration(tokens: List[Token], declaration: List[Token]) -> int:
    """
    Insert a declaration on its own line at the insertion point.

    Args:
        tokens: Token sequence, modified in place
        declaration: Tokens of the declaration statement

    Returns:
        Index of the first declaration token
    """
    start = find_insertion_index(tokens)
    if start > 0 and not tokens[start - 1].ends_with_line_break():
        tokens.insert(start, NEWLINE)
        start += 1
    tokens[start:start] = declaration

    end = start + len(declaration)
    if end < len(tokens) and not tokens[end].starts_with_line_break():
        tokens.insert(end, NEWLINE)
    return start
