"""systemInstruction 编解码。

- classify / normalize: 把多态的 systemInstruction 归一化为单个字符串。
- decode / encode: 在单个字符串中复用 prompt 与 RAG 上下文两个逻辑字段。
"""

from live_settings.codec.instruction import (
    ContentInstruction,
    NoInstruction,
    PartListInstruction,
    RAG_DELIMITER,
    SystemInstruction,
    TextInstruction,
    classify,
    decode,
    encode,
    normalize,
    read_prompt_and_rag,
    trim,
)

__all__ = [
    "ContentInstruction",
    "NoInstruction",
    "PartListInstruction",
    "RAG_DELIMITER",
    "SystemInstruction",
    "TextInstruction",
    "classify",
    "decode",
    "encode",
    "normalize",
    "read_prompt_and_rag",
    "trim",
]
