"""
Source File representation
"""

from dataclasses import dataclass
from pathlib import Path

from ..exceptions import UnsupportedLanguageError


@dataclass
class SourceFile:
    """
    Represents one compilation unit.

    Attributes:
        file_path: Path the content was read from (informational)
        content: File content as string
        language: Programming language
        encoding: File encoding (default: utf-8)
    """

    file_path: str
    content: str
    language: str = "go"
    encoding: str = "utf-8"

    @classmethod
    def from_file(
        cls,
        file_path: str | Path,
        language: str | None = None,
        encoding: str = "utf-8",
    ) -> "SourceFile":
        """
        Load source file from disk.

        Args:
            file_path: Path to file
            language: Language override (auto-detected if None)
            encoding: File encoding

        Returns:
            SourceFile instance

        Raises:
            UnsupportedLanguageError: If the language cannot be detected
        """
        file_path = Path(file_path)
        content = file_path.read_text(encoding=encoding)

        if language is None:
            from .parser_registry import get_registry

            language = get_registry().detect_language(file_path)
            if language is None:
                raise UnsupportedLanguageError(
                    f"Could not detect language for: {file_path}",
                    details={"suffix": file_path.suffix},
                )

        return cls(
            file_path=str(file_path),
            content=content,
            language=language,
            encoding=encoding,
        )

    @classmethod
    def from_content(
        cls,
        content: str,
        file_path: str = "<memory>",
        language: str = "go",
        encoding: str = "utf-8",
    ) -> "SourceFile":
        """Create source file from content string."""
        return cls(
            file_path=file_path,
            content=content,
            language=language,
            encoding=encoding,
        )

    def get_line(self, line_num: int) -> str:
        """
        Get specific line from source (1-indexed).

        Returns:
            Line content (without newline), or "" when out of range
        """
        lines = self.content.splitlines()
        if 1 <= line_num <= len(lines):
            return lines[line_num - 1]
        return ""

    @property
    def line_count(self) -> int:
        """Get total number of lines"""
        return len(self.content.splitlines())

    @property
    def byte_size(self) -> int:
        """Get file size in bytes"""
        return len(self.content.encode(self.encoding))
