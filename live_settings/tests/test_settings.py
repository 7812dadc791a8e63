import tempfile
from pathlib import Path

import pytest

from live_settings.config.settings import Settings


def test_settings_from_yaml_and_env(monkeypatch):
    with tempfile.TemporaryDirectory() as d:
        cfg = Path(d) / "config.yaml"
        cfg.write_text("log_level: debug\nrag_file_suffixes: [txt, .MD]\nrag_file_max_bytes: 10\n", encoding="utf-8")
        monkeypatch.chdir(d)
        monkeypatch.setenv("LIVE_SETTINGS_CONFIG_FILE", str(cfg))
        monkeypatch.setenv("RAG_FILE_MAX_BYTES", "20")
        s = Settings()
    assert s.log_level == "DEBUG"
    assert s.rag_file_suffixes == [".txt", ".md"]
    assert s.rag_file_max_bytes == 20


def test_settings_rejects_bad_log_level(monkeypatch):
    with tempfile.TemporaryDirectory() as d:
        monkeypatch.chdir(d)
        monkeypatch.delenv("LIVE_SETTINGS_CONFIG_FILE", raising=False)
        monkeypatch.setenv("LOG_LEVEL", "loud")
        with pytest.raises(ValueError):
            Settings()
