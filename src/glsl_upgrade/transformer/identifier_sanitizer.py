"""
Identifier collision avoidance against the target dialect's reserved words.

User identifiers that clash with a reserved word of the target dialect are
escaped with a fixed prefix. The synthesized fragment outputs are named
through the same mapping, so a user variable called fragColor never meets the
generated unique_fragColor. In a fragment shader a user variable that is
already called unique_fragColor (or unique_fragDepth) is escaped once more.
Other prefixed names are left alone.

Calls to a target texture built-in, such as texture(s, uv), are left alone as
well: the upgraded texture2D and textureCube calls resolve to them.

The mapping is a pure function, so the vertex and fragment stages of one
program agree on the escaped name of a shared varying. The one exception is a
varying already called unique_fragColor or unique_fragDepth, which only the
fragment stage renames.

Escaping rule:
    map_name('texture')        -> 'unique_texture'
    map_name('fragColor')      -> 'unique_fragColor'
    map_name('unique_texture') -> 'unique_unique_texture'
    map_name('color')          -> 'color'

Names that already carry the prefix are escaped again, so unmap_name (which
strips a single prefix) inverts map_name for every input.
"""

import logging
from typing import List

from ..errors import ReservedAttributeNameError
from ..lexer.tokens import (
    BLOCK_COMMENT, BUILTIN, IDENT, KEYWORD, LINE_COMMENT, NUMERIC_KINDS,
    OPERATOR, WHITESPACE, Token,
)
from .dialect import RESERVED_WORDS, TEXTURE_FUNCTIONS

log = logging.getLogger(__name__)

ESCAPE_PREFIX = 'unique_'

# Base names of the synthesized fragment outputs
SYNTHESIZED_NAMES = frozenset({'fragColor', 'fragDepth'})

# Names the synthesized fragment outputs are declared with
ESCAPED_OUTPUT_NAMES = frozenset(ESCAPE_PREFIX + name for name in SYNTHESIZED_NAMES)

# Token kinds skipped when looking for a call parenthesis
_CALL_SKIP_KINDS = (WHITESPACE, LINE_COMMENT, BLOCK_COMMENT)

# Token kinds that end the backward attribute scan
_SCAN_STOP_KINDS = (OPERATOR, IDENT, BUILTIN) + NUMERIC_KINDS


def needs_escape(name: str) -> bool:
    """Return True if a user identifier must be renamed in the target dialect."""
    return name in RESERVED_WORDS


def map_name(name: str) -> str:
    """
    Escape a name that cannot be used as-is in the target dialect.

    The synthesized output base names (fragColor, fragDepth) and names that
    already carry the prefix are always escaped, so unmap_name inverts it.

    Args:
        name: Identifier from the source shader

    Returns:
        The escaped name, or name unchanged when it is safe
    """
    if (needs_escape(name) or name in SYNTHESIZED_NAMES
            or name.startswith(ESCAPE_PREFIX)):
        return ESCAPE_PREFIX + name
    return name


def unmap_name(name: str) -> str:
    """
    Recover the original name of an identifier produced by map_name.

    Args:
        name: Identifier from an upgraded shader

    Returns:
        The name with one escape prefix removed, if it has one
    """
    if name.startswith(ESCAPE_PREFIX) and len(name) > len(ESCAPE_PREFIX):
        return name[len(ESCAPE_PREFIX):]
    return name


def is_attribute(tokens: List[Token], index: int) -> bool:
    """
    Decide whether the identifier at index is declared by an attribute.

    Scans backward from the token before index. An 'attribute' or 'in'
    keyword means the identifier is an attribute; any operator, literal,
    identifier or builtin in between means it is not. Whitespace, comments,
    directives and other keywords (types, precision) are skipped.

    Args:
        tokens: Token sequence
        index: Index of the identifier token

    Returns:
        True if the identifier is in attribute position
    """
    for i in range(index - 1, -1, -1):
        token = tokens[i]
        if token.kind == KEYWORD:
            if token.text in ('attribute', 'in'):
                return True
        elif token.kind in _SCAN_STOP_KINDS:
            return False
    return False


def is_call(tokens: List[Token], index: int) -> bool:
    """Return True if the token at index is followed by an opening parenthesis."""
    for token in tokens[index + 1:]:
        if token.kind in _CALL_SKIP_KINDS:
            continue
        return token.kind == OPERATOR and token.text == '('
    return False


class IdentifierSanitizer:
    """
    Renames identifiers that collide with the target dialect.

    Usage:
        sanitizer = IdentifierSanitizer(is_vertex=True, target_version='150')
        token = sanitizer.rewrite(tokens, index)
    """

    def __init__(self, is_vertex: bool, target_version: str):
        """
        Initialize the sanitizer.

        Args:
            is_vertex: True when sanitizing a vertex shader
            target_version: Target version, used in error messages
        """
        self.is_vertex = is_vertex
        self.target_version = target_version

    def rewrite(self, tokens: List[Token], index: int) -> Token:
        """
        Return the sanitized form of the identifier at index.

        Raises:
            ReservedAttributeNameError: If a vertex attribute uses a reserved word
        """
        token = tokens[index]
        if token.kind != IDENT:
            return token

        if token.text in RESERVED_WORDS:
            if token.text in TEXTURE_FUNCTIONS and is_call(tokens, index):
                return token
            # Attribute names are bound by name from the host application
            if self.is_vertex and is_attribute(tokens, index):
                raise ReservedAttributeNameError(token.text, self.target_version)
        elif self.is_vertex or token.text not in ESCAPED_OUTPUT_NAMES:
            return token

        escaped = map_name(token.text)
        log.debug("Renamed identifier %s -> %s", token.text, escaped)
        return Token(IDENT, escaped)
