"""配置管理模块。

支持从环境变量、.env 以及 config.yaml 加载配置，优先级依次降低。
config.yaml 的位置可通过 LIVE_SETTINGS_CONFIG_FILE 显式指定。
"""

import os
import warnings
from pathlib import Path
from typing import Any, Dict, List

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _load_config_from_yaml() -> Dict[str, Any]:
    """从 config.yaml 加载配置（若存在）。"""
    candidates = []
    explicit = os.getenv("LIVE_SETTINGS_CONFIG_FILE")
    if explicit:
        candidates.append(Path(explicit).expanduser())
    candidates.extend([
        Path.cwd() / "config.yaml",
        Path(__file__).resolve().parents[2] / "config.yaml",
    ])

    seen: set[Path] = set()
    for path in candidates:
        if path in seen:
            continue
        seen.add(path)
        try:
            if path.exists():
                data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
                if isinstance(data, dict):
                    return data
                warnings.warn(f"Config file {path} is not a mapping, ignored")
        except (OSError, yaml.YAMLError) as exc:
            warnings.warn(f"Failed to read config file {path}: {exc}")
    return {}


class Settings(BaseSettings):
    """配置设置（使用 Pydantic）。"""

    # ---- 日志 ----
    log_dir: str = Field(default="logs", description="日志目录")
    log_level: str = Field(default="INFO", description="日志级别，如 DEBUG、INFO、WARNING")
    log_redact_content: bool = Field(
        default=True,
        description="是否截断日志消息（prompt / RAG 可能包含敏感内容）",
    )

    # ---- RAG 文件加载 ----
    rag_file_encoding: str = Field(default="utf-8", description="读取 RAG 文件使用的编码")
    rag_file_suffixes: List[str] = Field(
        default_factory=lambda: [".txt"],
        description="允许作为 RAG 上下文加载的文件后缀",
    )
    rag_file_max_bytes: int = Field(
        default=5 * 1024 * 1024,
        ge=1,
        description="单个 RAG 文件的大小上限（字节）",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @staticmethod
    def _config_source() -> Dict[str, Any]:
        return _load_config_from_yaml()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("rag_file_suffixes")
    @classmethod
    def normalize_suffixes(cls, v: List[str]) -> List[str]:
        return [s.lower() if s.startswith(".") else f".{s.lower()}" for s in v if s]

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            cls._config_source,
            file_secret_settings,
        )


settings = Settings()
