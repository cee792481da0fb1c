"""
Global test configuration and fixtures
"""

import logging
from collections.abc import Callable
from pathlib import Path

import pytest
import structlog

from gocfg.bblock import BasicBlock, blocks_from_file
from gocfg.config import get_settings

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def reset_logging():
    """Keep structlog/stdlib configuration from leaking between tests"""
    get_settings.cache_clear()
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    get_settings.cache_clear()


@pytest.fixture
def fixture_path() -> Callable[[str], Path]:
    """Path of a Go program under tests/fixtures"""

    def _path(name: str) -> Path:
        return FIXTURES_DIR / name

    return _path


@pytest.fixture
def build_fixture() -> Callable[[str], list[BasicBlock]]:
    """Build the basic-block graph of a fixture program"""

    def _build(name: str) -> list[BasicBlock]:
        return blocks_from_file(FIXTURES_DIR / name)

    return _build


def by_line(blocks: list[BasicBlock]) -> dict[int, BasicBlock]:
    """Index finished blocks by end line"""
    return {b.end_line: b for b in blocks}


def successor_lines(block: BasicBlock) -> list[int]:
    return [s.end_line for s in block.successors]
