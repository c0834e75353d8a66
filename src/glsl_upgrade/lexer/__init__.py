"""Token model and default tokenizer/stringifier collaborators."""

from .tokens import Token, NEWLINE
from .tokenizer import GLSLTokenizer, tokenize, stringify

__all__ = ['Token', 'NEWLINE', 'GLSLTokenizer', 'tokenize', 'stringify']
