import sys
from pathlib import Path

import pytest

# Add src to sys.path so tests run without an editable install
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from answer_marker.marking import MarkingEngine  # noqa: E402


RAM_ROM_SCHEME = (
    "- Explains RAM is volatile memory (1 mark)\n"
    "- Explains ROM is non-volatile (1 mark)"
)


@pytest.fixture
def engine():
    """Engine with the default vocabularies."""
    return MarkingEngine()


@pytest.fixture
def ram_rom_scheme():
    """Two-point memory mark scheme."""
    return RAM_ROM_SCHEME


@pytest.fixture
def scheme_file(tmp_path: Path):
    """Write the memory mark scheme to disk."""
    path = tmp_path / "scheme.txt"
    path.write_text(RAM_ROM_SCHEME, encoding="utf-8")
    return path
