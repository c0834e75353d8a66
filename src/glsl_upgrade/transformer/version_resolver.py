"""
#version directive detection and rewriting.

Outcomes of resolve():

    declared     returned    directive becomes     full rewrite
    --------     --------    -----------------     ------------
    target       target      unchanged             no
    "300 es"     "150"       #version 150          no (target "150")
    "100"        "100"       #version <target>     yes
    (none)       None        #version <target>     yes
    other        raises UnknownVersionError

The required extension block is injected right after the directive on every
successful path.

Known boundary: "300 es" is normalized to the baseline version before the
comparison, so upgrading it to any target other than the baseline raises
UnknownVersionError.
"""

import logging
import re
from typing import List, Optional

from ..errors import UnknownVersionError
from ..lexer.tokens import PREPROCESSOR, Token, preprocessor
from .dialect import BASELINE_VERSION, ES3_VERSION, LEGACY_VERSION
from .extension_manager import ExtensionManager

log = logging.getLogger(__name__)

VERSION_DIRECTIVE = re.compile(r'^\s*#\s*version\s+([0-9]+(\s+[a-zA-Z]+)?)\s*')


def version_directive(number: str) -> Token:
    return preprocessor(f'#version {number}')


class VersionResolver:
    """
    Locates and rewrites the #version directive of a token sequence.

    Usage:
        resolver = VersionResolver('150', ExtensionManager())
        source_version = resolver.resolve(tokens)
        if source_version != '150':
            ...  # legacy rewrite needed
    """

    def __init__(self, target_version: str, extension_manager: ExtensionManager):
        """
        Initialize the resolver.

        Args:
            target_version: Version the shader is being upgraded to
            extension_manager: Injects the required extensions
        """
        self.target_version = target_version
        self.extension_manager = extension_manager

    def resolve(self, tokens: List[Token]) -> Optional[str]:
        """
        Rewrite the version directive for the target dialect.

        Args:
            tokens: Token sequence, modified in place

        Returns:
            The source version, or None if the shader declares none

        Raises:
            UnknownVersionError: If the declared version is not supported
        """
        for i, token in enumerate(tokens):
            if token.kind != PREPROCESSOR:
                continue
            match = VERSION_DIRECTIVE.match(token.text)
            if not match:
                continue

            declared = ' '.join(match.group(1).split())
            number = declared
            if number == ES3_VERSION:
                number = BASELINE_VERSION
                tokens[i] = version_directive(number)

            if number == self.target_version:
                # Already in the target dialect
                self.extension_manager.inject_target_extensions(tokens, i + 1)
                log.debug("Shader declares #version %s, no rewrite needed", declared)
                return number
            if number == LEGACY_VERSION:
                tokens[i] = version_directive(self.target_version)
                self.extension_manager.inject_target_extensions(tokens, i + 1)
                log.debug("Upgrading #version %s to %s", number, self.target_version)
                return number
            raise UnknownVersionError(declared, self.target_version)

        tokens.insert(0, version_directive(self.target_version))
        self.extension_manager.inject_target_extensions(tokens, 1)
        log.debug("No #version directive, assuming %s", LEGACY_VERSION)
        return None
