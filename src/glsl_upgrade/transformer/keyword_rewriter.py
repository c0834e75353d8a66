"""
Storage-qualifier keyword rewriting.

GLSL ES 1.00 -> target dialect:
    attribute -> in
    varying   -> out (vertex stage) / in (fragment stage)
"""

from dataclasses import replace

from ..lexer.tokens import KEYWORD, Token


class KeywordRewriter:
    """Rewrites legacy storage qualifiers one token at a time."""

    def __init__(self, is_vertex: bool):
        self.is_vertex = is_vertex
        self.keyword_map = {
            'attribute': 'in',
            'varying': 'out' if is_vertex else 'in',
        }

    def rewrite(self, token: Token) -> Token:
        """
        Rewrite a keyword token for the target dialect.

        Args:
            token: Any token

        Returns:
            The rewritten token, or token itself when nothing changes
        """
        if token.kind != KEYWORD or token.text not in self.keyword_map:
            return token
        return replace(token, text=self.keyword_map[token.text])
