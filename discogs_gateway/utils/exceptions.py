"""Custom exceptions for the Discogs tool gateway."""
from typing import Optional


class DuplicateToolError(ValueError):
    """Two tool definitions were registered under the same name."""
    def __init__(self, name: str):
        super().__init__(f"Duplicate tool name: '{name}'")
        self.name = name


class ToolInputError(Exception):
    """Tool arguments failed validation."""
    def __init__(self, detail: str = "Invalid tool arguments"):
        super().__init__(detail)
        self.detail = detail


class DiscogsAPIError(Exception):
    """Discogs API request failed."""
    def __init__(self, detail: str = "Discogs API request failed", status_code: Optional[int] = None):
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code
