"""
gocfg Exception Hierarchy

Standardized exceptions for consistent error handling.

Guide:
    1. Bad input (unsupported language, oversized file) → ValidationError
    2. Front-end rejected the source → ParseFailure, reported once by the caller
    3. Traversal of a valid tree never raises

Example:
    try:
        blocks = blocks_from_file("main.go")
    except ParseFailure as e:
        console.print(f"[red]{e}[/red]")
"""

from typing import Any


class GoCfgError(Exception):
    """Base exception for all gocfg errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Initialize gocfg error.

        Args:
            message: Human-readable error message
            details: Optional additional details for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


# ============================================================
# Validation Errors
# ============================================================


class ValidationError(GoCfgError):
    """Input validation failures."""

    pass


class UnsupportedLanguageError(ValidationError):
    """No parser is registered for the requested language."""

    pass


class FileTooLargeError(ValidationError):
    """Source file exceeds the configured size limit."""

    pass


# ============================================================
# Analysis Errors
# ============================================================


class AnalysisError(GoCfgError):
    """Control-flow analysis failures."""

    pass


class ParsingError(AnalysisError):
    """Code parsing failures."""

    pass


class ParseFailure(ParsingError):
    """
    The front-end could not produce a clean syntax tree.

    Raised before the builder runs; details["errors"] lists the
    (line, column) of every error node, 1-based lines.
    """

    def __init__(self, file_path: str, errors: list[tuple[int, int]]):
        locations = ", ".join(f"{line}:{col}" for line, col in errors)
        super().__init__(
            f"Failed to parse {file_path}: syntax error at {locations}",
            details={"file_path": file_path, "errors": errors},
        )
        self.file_path = file_path
        self.errors = errors

    def __str__(self) -> str:
        return self.message
