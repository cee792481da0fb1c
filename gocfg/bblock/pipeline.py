"""
Source → basic blocks

Entry points that run the front-end and the builder for one compilation unit.
"""

from pathlib import Path

from ..config import GoCfgSettings, get_settings
from ..exceptions import FileTooLargeError
from ..observability import LogPerformance, get_logger
from ..parsing import AstTree, SourceFile
from .builder import CfgBuilder
from .models import BasicBlock, count_edges

logger = get_logger(__name__)


def build_blocks(ast: AstTree) -> list[BasicBlock]:
    """Build the finished graph for an already parsed tree."""
    with LogPerformance(logger, "cfg_build", file=ast.source.file_path):
        blocks = CfgBuilder(ast).build()

    logger.info(
        "cfg_built",
        file=ast.source.file_path,
        blocks=len(blocks),
        edges=count_edges(blocks),
    )
    return blocks


def blocks_from_source(
    content: str,
    file_path: str = "<memory>",
    language: str | None = None,
) -> list[BasicBlock]:
    """
    Parse source text and build its basic-block graph.

    Raises:
        ParseFailure: If the source has syntax errors
        UnsupportedLanguageError: If no parser exists for the language
    """
    settings = get_settings()
    source = SourceFile.from_content(
        content,
        file_path=file_path,
        language=language or settings.parsing.language,
        encoding=settings.parsing.encoding,
    )
    return build_blocks(AstTree.parse(source))


def blocks_from_file(file_path: str | Path, settings: GoCfgSettings | None = None) -> list[BasicBlock]:
    """
    Read, parse and build the basic-block graph of a file.

    Raises:
        FileTooLargeError: If the file exceeds parsing.max_file_size_bytes
        ParseFailure: If the source has syntax errors
        UnsupportedLanguageError: If the language cannot be detected
        OSError: If the file cannot be read
    """
    settings = settings or get_settings()
    file_path = Path(file_path)

    size = file_path.stat().st_size
    if size > settings.parsing.max_file_size_bytes:
        raise FileTooLargeError(
            f"File too large to analyze: {file_path}",
            details={"size": size, "limit": settings.parsing.max_file_size_bytes},
        )

    source = SourceFile.from_file(file_path, encoding=settings.parsing.encoding)
    return build_blocks(AstTree.parse(source))
