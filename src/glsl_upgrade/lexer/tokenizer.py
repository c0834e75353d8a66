"""
Default tokenizer and stringifier.

The rewriting passes only depend on the token contract in tokens.py; these two
callables are the collaborators ShaderTranspiler uses unless others are
injected.

Design:
- One compiled alternation of named groups, matched with re.finditer
- Lossless: every character lands in exactly one token
- Never fails; unknown characters become single-character operator tokens
"""

import re
from typing import Iterable, List

from .literals import BUILTINS, KEYWORDS, OPERATORS
from .tokens import (
    BLOCK_COMMENT, BUILTIN, FLOAT, IDENT, INTEGER, KEYWORD, LINE_COMMENT,
    OPERATOR, PREPROCESSOR, WHITESPACE, Token,
)


class GLSLTokenizer:
    """
    Splits GLSL ES 1.00 source into Token objects.

    Usage:
        tokens = GLSLTokenizer().tokenize(source)
    """

    def __init__(self):
        """Initialize the tokenizer."""
        self.token_specification = [
            ('BLOCK_COMMENT', r'/\*[\s\S]*?(?:\*/|\Z)'),
            ('LINE_COMMENT', r'//[^\r\n]*'),
            # Directive runs to end of line; backslash-newline continues it
            ('PREPROCESSOR', r'#(?:\\\r?\n|[^\r\n])*'),
            ('WHITESPACE', r'\s+'),
            ('FLOAT', r'(?:\d+\.\d*|\.\d+)(?:[eE][+-]?\d+)?[fF]?|\d+[eE][+-]?\d+[fF]?'),
            ('INTEGER', r'0[xX][0-9a-fA-F]+[uU]?|\d+[uU]?'),
            ('WORD', r'[A-Za-z_]\w*'),
            ('OPERATOR', '|'.join(re.escape(op) for op in OPERATORS)),
            ('MISMATCH', r'[\s\S]'),
        ]
        self.group_kinds = {
            'BLOCK_COMMENT': BLOCK_COMMENT,
            'LINE_COMMENT': LINE_COMMENT,
            'PREPROCESSOR': PREPROCESSOR,
            'WHITESPACE': WHITESPACE,
            'FLOAT': FLOAT,
            'INTEGER': INTEGER,
            'OPERATOR': OPERATOR,
            'MISMATCH': OPERATOR,
        }
        self.token_re = re.compile(
            '|'.join(f'(?P<{name}>{pattern})' for name, pattern in self.token_specification)
        )

    def tokenize(self, source: str) -> List[Token]:
        """
        Tokenize shader source.

        Args:
            source: GLSL source code string

        Returns:
            List of tokens whose texts concatenate back to source
        """
        tokens = []
        for match in self.token_re.finditer(source):
            group = match.lastgroup
            text = match.group()
            if group == 'WORD':
                tokens.append(Token(self._classify_word(text), text))
            else:
                tokens.append(Token(self.group_kinds[group], text))
        return tokens

    def _classify_word(self, word: str) -> str:
        if word in KEYWORDS:
            return KEYWORD
        if word in BUILTINS:
            return BUILTIN
        return IDENT


_default_tokenizer = GLSLTokenizer()


def tokenize(source: str) -> List[Token]:
    """Tokenize source with the shared default GLSLTokenizer."""
    return _default_tokenizer.tokenize(source)


def stringify(tokens: Iterable[Token]) -> str:
    """Serialize a token sequence back into source text."""
    return ''.join(token.text for token in tokens)
