"""
Confluence Bridge - Custom Exceptions

Anti-Patterns Avoided:
- Exception shadowing: custom namespaced exceptions instead of builtins like
  ValueError or pydantic's ValidationError
"""


class ConfluenceBridgeError(Exception):
    """Base exception for Confluence Bridge.

    All custom exceptions inherit from this base class.
    """
    pass


class InputValidationError(ConfluenceBridgeError):
    """Raised when invocation input is malformed or incomplete.

    Covers a missing ``confluence`` prefix, an empty search term, a missing
    credential or an out-of-range result limit.
    """
    pass


class ConfigurationError(ConfluenceBridgeError):
    """Raised when configuration is invalid or missing."""
    pass


class ToolNotFoundError(ConfluenceBridgeError):
    """Raised when a tool name is not present in the tool registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")
