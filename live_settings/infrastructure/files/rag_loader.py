"""RAG 文件读取：协议 + 本地实现。"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Protocol

from live_settings.config.settings import settings
from live_settings.domain.exceptions import FileReadError
from live_settings.infrastructure.logging.logger import logger


class RagFileReader(Protocol):
    """把文件内容作为字符串交给编辑器，便于替换为其他来源（上传、远程存储等）。"""

    def read_text(self, path: str | Path | None) -> Optional[str]:
        ...


@dataclass
class LocalRagFileReader:
    """从本地文件系统读取 RAG 文本。

    - 路径为空或文件不存在时返回 None（调用方不修改配置）。
    - 后缀不在允许列表时返回 None，对应文件选择器的 ``.txt,text/plain`` 过滤。
    - 无法解码的字节替换为 U+FFFD，不中断读取。
    """

    encoding: str = field(default_factory=lambda: settings.rag_file_encoding)
    suffixes: List[str] = field(default_factory=lambda: list(settings.rag_file_suffixes))
    max_bytes: int = field(default_factory=lambda: settings.rag_file_max_bytes)

    def read_text(self, path: str | Path | None) -> Optional[str]:
        if path is None or not str(path).strip():
            return None
        resolved = Path(path).expanduser()
        if not resolved.exists():
            logger.info("rag_file.missing", extra={"extra": {"path": str(resolved)}})
            return None
        if self.suffixes and resolved.suffix.lower() not in self.suffixes:
            logger.warning(
                "rag_file.suffix_rejected",
                extra={"extra": {"path": str(resolved), "allowed": self.suffixes}},
            )
            return None
        if not resolved.is_file():
            raise FileReadError(code="RAG_FILE_READ_ERROR", message=f"not a file: {resolved}", path=str(resolved))
        try:
            size = resolved.stat().st_size
            if size > self.max_bytes:
                raise FileReadError(
                    code="RAG_FILE_TOO_LARGE",
                    message=f"{resolved} is {size} bytes (limit {self.max_bytes})",
                    path=str(resolved),
                )
            data = resolved.read_bytes()
        except OSError as e:
            raise FileReadError(code="RAG_FILE_READ_ERROR", message=str(e), path=str(resolved)) from e
        text = data.decode(self.encoding, errors="replace")
        # BOM 不属于正文
        return text.removeprefix("\ufeff")
