"""
Built-in rewriting for the target dialect.

Handles two independent cases:
1. Texture sampling functions lose their type suffixes:
   texture2D -> texture, textureCube -> texture,
   texture2DLodEXT -> textureLod, texture2DProj -> textureProj
2. Fragment stage only: the magic outputs gl_FragColor and gl_FragDepth are
   replaced by explicitly declared 'out' variables

Declarations for synthesized outputs are queued rather than inserted, so the
caller can splice them in once the forward pass over the tokens is complete.
"""

import logging
import re
from dataclasses import replace
from typing import Dict, List

from ..lexer.tokens import BUILTIN, IDENT, KEYWORD, OPERATOR, WHITESPACE, Token
from .identifier_sanitizer import map_name

log = logging.getLogger(__name__)

TEXTURE_FUNCTION = re.compile(r'^texture(2D|Cube)?')
TEXTURE_SUFFIXES = re.compile(r'(2D|Cube|EXT)')

# builtin -> (base name of the synthesized variable, declared type)
FRAGMENT_OUTPUTS = {
    'gl_FragColor': ('fragColor', 'vec4'),
    'gl_FragDepth': ('fragDepth', 'float'),
    'gl_FragDepthEXT': ('fragDepth', 'float'),
}


def output_declaration(name: str, data_type: str) -> List[Token]:
    """Build the tokens of 'out <data_type> <name>;'."""
    return [
        Token(KEYWORD, 'out'),
        Token(WHITESPACE, ' '),
        Token(KEYWORD, data_type),
        Token(WHITESPACE, ' '),
        Token(IDENT, name),
        Token(OPERATOR, ';'),
    ]


class BuiltinRewriter:
    """
    Renames texture built-ins and synthesizes fragment outputs.

    One instance serves a single transpile call; the synthesized output names
    it memoizes are not shared between calls.

    Attributes:
        output_names: Maps base output name -> synthesized identifier
        declarations: Queued output declarations, in first-use order
    """

    def __init__(self, is_vertex: bool):
        self.is_vertex = is_vertex
        self.output_names: Dict[str, str] = {}
        self.declarations: List[List[Token]] = []

    def rewrite(self, token: Token) -> Token:
        """
        Rewrite a builtin token for the target dialect.

        Args:
            token: Any token

        Returns:
            The rewritten token, or token itself when nothing changes
        """
        if token.kind != BUILTIN:
            return token

        if TEXTURE_FUNCTION.match(token.text):
            return replace(token, text=TEXTURE_SUFFIXES.sub('', token.text))

        if not self.is_vertex and token.text in FRAGMENT_OUTPUTS:
            return Token(IDENT, self._output_name(token.text))

        return token

    def _output_name(self, builtin: str) -> str:
        base_name, data_type = FRAGMENT_OUTPUTS[builtin]
        name = self.output_names.get(base_name)
        if name is None:
            name = map_name(base_name)
            self.output_names[base_name] = name
            self.declarations.append(output_declaration(name, data_type))
            log.debug("Synthesized 'out %s %s' for %s", data_type, name, builtin)
        return name
