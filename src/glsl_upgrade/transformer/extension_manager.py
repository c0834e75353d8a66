"""
Extension directive management.

Two independent operations:
- inject: declare the extensions the target dialect always requires
- prune: drop extensions whose functionality is core in the target dialect
"""

import logging
import re
from typing import List, Optional, Sequence

from ..lexer.tokens import NEWLINE, PREPROCESSOR, WHITESPACE, Token, preprocessor
from .dialect import CORE_EXTENSIONS, REQUIRED_EXTENSIONS

log = logging.getLogger(__name__)

EXTENSION_DIRECTIVE = re.compile(r'^#\s*extension\s+(.*):')


def extension_name(token: Token) -> Optional[str]:
    """Return the extension named by an '#extension NAME :' token, if any."""
    if token.kind != PREPROCESSOR:
        return None
    match = EXTENSION_DIRECTIVE.match(token.text)
    if not match or not match.group(1).strip():
        return None
    return match.group(1).strip()


class ExtensionManager:
    """
    Injects required and prunes obsolete #extension directives.

    Usage:
        manager = ExtensionManager()
        manager.inject_target_extensions(tokens, version_index + 1)
        manager.prune_obsolete_extensions(tokens)
    """

    def __init__(self, required: Sequence[str] = REQUIRED_EXTENSIONS,
                 obsolete: Sequence[str] = CORE_EXTENSIONS):
        """
        Initialize the extension manager.

        Args:
            required: Extensions every upgraded shader must declare
            obsolete: Extensions folded into the target dialect's core
        """
        self.required = tuple(required)
        self.obsolete = frozenset(obsolete)

    def declared_extensions(self, tokens: List[Token]) -> List[str]:
        """Names of all extension directives, in source order."""
        names = []
        for token in tokens:
            name = extension_name(token)
            if name is not None:
                names.append(name)
        return names

    def inject_target_extensions(self, tokens: List[Token], index: int) -> int:
        """
        Insert the required extension directives at index.

        The block is surrounded by newline tokens. Extensions the sequence
        already declares are skipped, so a shader that has been upgraded once
        is left untouched.

        Args:
            tokens: Token sequence, modified in place
            index: Insertion index, normally just after #version

        Returns:
            Number of tokens inserted
        """
        declared = set(self.declared_extensions(tokens))
        missing = [name for name in self.required if name not in declared]
        if not missing:
            return 0

        block = [NEWLINE]
        for name in missing:
            block.append(preprocessor(f'#extension {name} : enable'))
            block.append(NEWLINE)
        tokens[index:index] = block
        return len(block)

    def prune_obsolete_extensions(self, tokens: List[Token]) -> List[str]:
        """
        Remove directives for extensions that are core in the target dialect.

        Each removed directive takes the whitespace token that follows it
        along. The sequence is walked in reverse so that removals never shift
        the indices still to be visited.

        Args:
            tokens: Token sequence, modified in place

        Returns:
            Names of the removed extensions, in source order
        """
        removed = []
        for i in range(len(tokens) - 1, -1, -1):
            name = extension_name(tokens[i])
            if name is None or name not in self.obsolete:
                continue
            count = 2 if i + 1 < len(tokens) and tokens[i + 1].kind == WHITESPACE else 1
            del tokens[i:i + count]
            removed.append(name)

        removed.reverse()
        if removed:
            log.debug("Pruned core extensions: %s", ', '.join(removed))
        return removed
