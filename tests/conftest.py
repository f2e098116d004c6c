"""Pytest fixtures for urlspell tests."""

import logging
import tempfile
from pathlib import Path
from typing import Callable, Generator, Iterable, List

import pytest

from urlspell.models import RequestContext, ServerConfig
from urlspell.orchestration import SpellingFixup
from urlspell.scanning import DirectoryScanner


class FakeEntry:
    """Stand-in for os.DirEntry carrying only a name."""

    def __init__(self, name: str) -> None:
        self.name = name


class FakeDirectory:
    """Stand-in for an os.scandir() handle yielding names in a fixed order.

    Records whether it was closed so tests can check the handle is released
    on every exit path.
    """

    def __init__(self, names: Iterable[str], fail_after: int = -1) -> None:
        self.names = list(names)
        self.fail_after = fail_after
        self.closed = False

    def __enter__(self) -> "FakeDirectory":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.closed = True

    def __iter__(self):
        for i, name in enumerate(self.names):
            if i == self.fail_after:
                raise OSError("simulated read error")
            yield FakeEntry(name)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for isolated test environments.

    Yields:
        Path to the temporary directory.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def doc_root(temp_dir: Path) -> Path:
    """Create a document root with an empty ``doc`` directory.

    Returns:
        Path to the document root.
    """
    root = temp_dir / "htdocs"
    (root / "doc").mkdir(parents=True)
    return root


@pytest.fixture
def make_docs(doc_root: Path) -> Callable[..., Path]:
    """Return a helper that creates files in ``doc_root/doc``.

    Returns:
        Callable taking file names and returning the ``doc`` directory.
    """
    def _make(*names: str) -> Path:
        doc = doc_root / "doc"
        for name in names:
            (doc / name).write_text(f"contents of {name}\n")
        return doc

    return _make


@pytest.fixture
def fake_opener() -> Callable[..., Callable[[str], FakeDirectory]]:
    """Return a factory for directory openers with a fixed enumeration order.

    The opener records every FakeDirectory it hands out in ``opened``.
    """
    def _factory(names: List[str], fail_after: int = -1) -> Callable[[str], FakeDirectory]:
        def opener(directory: str) -> FakeDirectory:
            handle = FakeDirectory(names, fail_after=fail_after)
            opener.opened.append(handle)
            return handle

        opener.opened = []
        return opener

    return _factory


@pytest.fixture
def config() -> ServerConfig:
    """Server configuration with spelling correction on."""
    return ServerConfig(check_spelling=True, server_name="www.example.com")


@pytest.fixture
def fixup(config: ServerConfig) -> SpellingFixup:
    """SpellingFixup reading the real filesystem."""
    return SpellingFixup(config)


@pytest.fixture
def make_request(doc_root: Path) -> Callable[..., RequestContext]:
    """Return a helper building a request for a missing file in ``/doc/``."""
    def _make(uri: str, **kwargs) -> RequestContext:
        name = uri.rsplit("/", 1)[1]
        kwargs.setdefault("filename", str(doc_root / "doc" / name))
        return RequestContext(uri=uri, **kwargs)

    return _make


@pytest.fixture
def ordered_fixup(config: ServerConfig, fake_opener) -> Callable[[List[str]], SpellingFixup]:
    """Return a helper building a SpellingFixup over a fake directory listing."""
    def _make(names: List[str]) -> SpellingFixup:
        scanner = DirectoryScanner(directory_opener=fake_opener(names))
        return SpellingFixup(config, scanner=scanner)

    return _make


@pytest.fixture(autouse=True)
def reset_urlspell_logger() -> Generator[None, None, None]:
    """Undo logging setup done by CLI tests."""
    yield
    logger = logging.getLogger("urlspell")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
