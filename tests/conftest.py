from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

SAMPLE_SOCKSTAT = (
    "sockets: used 42\n"
    "TCP: inuse 7 orphan 0 tw 2 alloc 9 mem 1\n"
    "UDP: inuse 3 mem 2\n"
    "UDPLITE: inuse 0\n"
    "RAW: inuse 0\n"
    "FRAG: inuse 0 memory 0\n"
)


@pytest.fixture
def write_sockstat() -> Callable[[Path, str], Path]:
    def _write(path: Path, text: str) -> Path:
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sockstat_file(tmp_path: Path, write_sockstat) -> Path:
    return write_sockstat(tmp_path / "sockstat", SAMPLE_SOCKSTAT)
