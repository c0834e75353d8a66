"""
Token value type shared by the lexer and the rewriting passes.

A shader is held as a plain list of Token objects covering every character of
the source, whitespace and comments included, so that concatenating the token
texts reproduces the source exactly.

Tokens are immutable; a pass that changes a token replaces the list element.
"""

from dataclasses import dataclass

# ============================================================================
# Token kinds
# ============================================================================

KEYWORD = 'keyword'
BUILTIN = 'builtin'
IDENT = 'ident'
OPERATOR = 'operator'
PREPROCESSOR = 'preprocessor'
WHITESPACE = 'whitespace'
INTEGER = 'integer'
FLOAT = 'float'
LINE_COMMENT = 'line-comment'
BLOCK_COMMENT = 'block-comment'

NUMERIC_KINDS = (INTEGER, FLOAT)


@dataclass(frozen=True)
class Token:
    """
    A single lexeme.

    Attributes:
        kind: One of the token kind constants in this module
        text: Raw source text of the lexeme
    """
    kind: str
    text: str

    def ends_with_line_break(self) -> bool:
        return self.text[-1:] in ('\n', '\r')

    def starts_with_line_break(self) -> bool:
        return self.text[:1] in ('\n', '\r')


NEWLINE = Token(WHITESPACE, '\n')


def preprocessor(text: str) -> Token:
    """Build a preprocessor directive token."""
    return Token(PREPROCESSOR, text)
