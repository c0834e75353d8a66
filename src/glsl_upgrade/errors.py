"""
Exceptions raised while upgrading a shader.

Every error terminates the current transpile call; nothing is retried because
the transform is a pure function of its inputs.
"""

from typing import Optional


class TranspileError(Exception):
    """Base class for all transpile failures."""
    def __init__(self, message: str, location: Optional[tuple] = None):
        self.message = message
        self.location = location
        if location:
            line, col = location
            super().__init__(f"{message} at line {line+1}, column {col+1}")
        else:
            super().__init__(message)


class UnknownVersionError(TranspileError):
    """Raised when a #version directive declares an unsupported number."""
    def __init__(self, version: str, target_version: str):
        self.version = version
        self.target_version = target_version
        super().__init__(
            f"unknown #version type: {version} "
            f"(expected 100, 300 es or {target_version})"
        )


class ReservedAttributeNameError(TranspileError):
    """Raised when a vertex attribute is named with a reserved word."""
    def __init__(self, name: str, target_version: str):
        self.name = name
        self.target_version = target_version
        super().__init__(
            f"Unable to transpile to {target_version} automatically: "
            f"One of the vertex shader attributes is using a reserved "
            f"{target_version} keyword \"{name}\""
        )


class MissingSemicolonError(TranspileError):
    """Raised when a precision statement is never terminated."""
    def __init__(self):
        super().__init__("precision statement not followed by any semicolons")
