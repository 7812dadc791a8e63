import tempfile
from pathlib import Path

import pytest

from live_settings.domain.exceptions import FileReadError
from live_settings.infrastructure.files.rag_loader import LocalRagFileReader


def test_reads_text_and_strips_bom():
    with tempfile.TemporaryDirectory() as d:
        f = Path(d) / "ctx.txt"
        f.write_bytes("\ufeffhello\nworld".encode("utf-8"))
        reader = LocalRagFileReader(encoding="utf-8", suffixes=[".txt"], max_bytes=1024)
        assert reader.read_text(f) == "hello\nworld"


def test_invalid_bytes_are_replaced():
    with tempfile.TemporaryDirectory() as d:
        f = Path(d) / "ctx.txt"
        f.write_bytes(b"ok \xff end")
        reader = LocalRagFileReader(encoding="utf-8", suffixes=[".txt"], max_bytes=1024)
        assert reader.read_text(f) == "ok \ufffd end"


def test_missing_and_rejected_files_return_none():
    with tempfile.TemporaryDirectory() as d:
        reader = LocalRagFileReader(encoding="utf-8", suffixes=[".txt"], max_bytes=1024)
        assert reader.read_text(Path(d) / "absent.txt") is None
        assert reader.read_text("") is None
        other = Path(d) / "data.pdf"
        other.write_bytes(b"%PDF")
        assert reader.read_text(other) is None


def test_directory_and_oversized_raise():
    with tempfile.TemporaryDirectory() as d:
        reader = LocalRagFileReader(encoding="utf-8", suffixes=[], max_bytes=4)
        with pytest.raises(FileReadError) as exc:
            reader.read_text(d)
        assert exc.value.code == "RAG_FILE_READ_ERROR"
        big = Path(d) / "big.txt"
        big.write_text("too long", encoding="utf-8")
        with pytest.raises(FileReadError) as exc:
            reader.read_text(big)
        assert exc.value.code == "RAG_FILE_TOO_LARGE"
