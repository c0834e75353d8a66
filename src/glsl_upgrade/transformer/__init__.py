"""Token-stream rewriting passes."""

from .builtin_rewriter import BuiltinRewriter
from .extension_manager import ExtensionManager
from .identifier_sanitizer import (
    IdentifierSanitizer, is_attribute, is_call, map_name, unmap_name,
)
from .insertion_point import find_insertion_index, insert_declaration
from .keyword_rewriter import KeywordRewriter
from .version_resolver import VersionResolver

__all__ = [
    'BuiltinRewriter',
    'ExtensionManager',
    'IdentifierSanitizer',
    'KeywordRewriter',
    'VersionResolver',
    'find_insertion_index',
    'insert_declaration',
    'is_attribute',
    'is_call',
    'map_name',
    'unmap_name',
]
