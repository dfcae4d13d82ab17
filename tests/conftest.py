"""
Pytest configuration and common fixtures for command line tests.
"""

import logging
import tempfile
from pathlib import Path
from typing import Generator

import pytest


@pytest.fixture
def tempDir() -> Generator[Path, None, None]:
    """
    Provide a temporary directory removed after the test.

    Yields:
        Path: Temporary directory path
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def restoreRootLogger() -> Generator[None, None, None]:
    """
    Restore root logger handlers and level after each test.

    The application reconfigures the root logger, handlers bound to captured
    streams must not outlive the test.
    """
    rootLogger = logging.getLogger()
    handlers = rootLogger.handlers[:]
    level = rootLogger.level
    yield
    for handler in rootLogger.handlers[:]:
        if handler not in handlers:
            rootLogger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in rootLogger.handlers:
            rootLogger.addHandler(handler)
    rootLogger.setLevel(level)


@pytest.fixture
def writeFile(tempDir):
    """
    Return a helper writing text files into the temporary directory.

    Returns:
        Callable[[str, str], Path]: (relative name, content) -> file path
    """

    def _writeFile(name: str, content: str) -> Path:
        filePath = tempDir / name
        filePath.parent.mkdir(parents=True, exist_ok=True)
        filePath.write_text(content, encoding="utf-8")
        return filePath

    return _writeFile
