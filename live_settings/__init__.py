"""live_settings 顶层包。

该包提供会话 Agent 配置（live connect config）的编辑核心，
包括 system instruction 的归一化与 prompt / RAG 复用编解码、
function declaration 的投影与按名更新、配置加载与日志等能力。
"""

from live_settings.api.service import SettingsService
from live_settings.codec import RAG_DELIMITER, decode, encode, normalize
from live_settings.editor import (
    project_function_declarations,
    set_function_description,
    set_prompt,
    set_rag,
)

__all__ = [
    "RAG_DELIMITER",
    "SettingsService",
    "decode",
    "encode",
    "normalize",
    "project_function_declarations",
    "set_function_description",
    "set_prompt",
    "set_rag",
]
