"""
GLSL ES 1.00 -> GLSL 1.50 shader upgrade.

Architecture:
    source -> tokenizer -> VersionResolver -> [legacy rewrite pass] -> stringifier

The legacy rewrite pass only runs when the detected source version differs
from the target. It prunes core extensions, then walks the tokens once,
building a new sequence:
- keyword tokens  -> KeywordRewriter
- builtin tokens  -> BuiltinRewriter
- ident tokens    -> IdentifierSanitizer
Output declarations queued by the BuiltinRewriter are inserted afterwards.

Usage:
    fragment = transpile_fragment(source)
    vertex = transpile_vertex(source, target_version='150')
"""

import logging
from enum import Enum
from typing import Callable, Iterable, List, Optional

from .lexer.tokenizer import stringify, tokenize
from .lexer.tokens import BUILTIN, IDENT, KEYWORD, Token
from .transformer.builtin_rewriter import BuiltinRewriter
from .transformer.dialect import DEFAULT_TARGET_VERSION
from .transformer.extension_manager import ExtensionManager
from .transformer.identifier_sanitizer import IdentifierSanitizer
from .transformer.insertion_point import insert_declaration
from .transformer.keyword_rewriter import KeywordRewriter
from .transformer.version_resolver import VersionResolver

log = logging.getLogger(__name__)


class ShaderStage(Enum):
    VERTEX = 'vertex'
    FRAGMENT = 'fragment'


class ShaderTranspiler:
    """
    Upgrades shader source to a target GLSL version.

    The tokenizer and stringifier are injectable collaborators; every call
    to transpile() works on its own token list and its own rewriters, so one
    instance can be shared freely.
    """

    def __init__(self, target_version: str = DEFAULT_TARGET_VERSION,
                 tokenizer: Callable[[str], List[Token]] = tokenize,
                 stringifier: Callable[[Iterable[Token]], str] = stringify,
                 extension_manager: Optional[ExtensionManager] = None):
        """
        Initialize the transpiler.

        Args:
            target_version: Version to upgrade to (e.g., "150")
            tokenizer: Callable turning source text into a token list
            stringifier: Callable turning a token list back into text
            extension_manager: Extension policy; defaults to the standard lists
        """
        self.target_version = target_version
        self.tokenizer = tokenizer
        self.stringifier = stringifier
        self.extension_manager = extension_manager or ExtensionManager()

    def transpile(self, source: str, stage: ShaderStage) -> str:
        """
        Upgrade one shader.

        Args:
            source: Shader source code
            stage: ShaderStage.VERTEX or ShaderStage.FRAGMENT

        Returns:
            Upgraded shader source

        Raises:
            UnknownVersionError: Unsupported #version
            ReservedAttributeNameError: Vertex attribute uses a reserved word
            MissingSemicolonError: Unterminated precision statement
        """
        tokens = self.tokenizer(source)
        resolver = VersionResolver(self.target_version, self.extension_manager)
        source_version = resolver.resolve(tokens)

        if source_version != self.target_version:
            log.debug("Rewriting %s shader from %s to %s",
                      stage.value, source_version or 'unversioned', self.target_version)
            tokens = self._rewrite_legacy(tokens, stage is ShaderStage.VERTEX)

        return self.stringifier(tokens)

    def _rewrite_legacy(self, tokens: List[Token], is_vertex: bool) -> List[Token]:
        self.extension_manager.prune_obsolete_extensions(tokens)

        keywords = KeywordRewriter(is_vertex)
        builtins = BuiltinRewriter(is_vertex)
        sanitizer = IdentifierSanitizer(is_vertex, self.target_version)

        rewritten = []
        for index, token in enumerate(tokens):
            if token.kind == KEYWORD:
                token = keywords.rewrite(token)
            elif token.kind == BUILTIN:
                token = builtins.rewrite(token)
            elif token.kind == IDENT:
                token = sanitizer.rewrite(tokens, index)
            rewritten.append(token)

        for declaration in builtins.declarations:
            insert_declaration(rewritten, declaration)
        return rewritten


def transpile(source: str, stage: ShaderStage,
              target_version: str = DEFAULT_TARGET_VERSION) -> str:
    """Upgrade a shader of the given stage with the default collaborators."""
    return ShaderTranspiler(target_version).transpile(source, stage)


def transpile_vertex(source: str, target_version: str = DEFAULT_TARGET_VERSION) -> str:
    """Upgrade a vertex shader."""
    return transpile(source, ShaderStage.VERTEX, target_version)


def transpile_fragment(source: str, target_version: str = DEFAULT_TARGET_VERSION) -> str:
    """Upgrade a fragment shader."""
    return transpile(source, ShaderStage.FRAGMENT, target_version)
