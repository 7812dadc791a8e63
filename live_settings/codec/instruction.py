"""systemInstruction 的归一化与 prompt / RAG 复用编解码。

systemInstruction 在线格式中有多种形态：

- 缺失 / 空值
- 纯字符串
- 有序列表，元素为字符串或带 text 字段的 part
- 带 parts 字段的 content 对象，每个 part 带 text 字段

编辑器只处理单个字符串，因此先用 classify() 把输入转换成带标签的变体，
再由 normalize() 统一拼接。任何无法识别的形态都降级为空字符串，不抛异常。

prompt 与 RAG 上下文共用这一个字符串字段，中间以 RAG_DELIMITER 分隔：

    encode("你是助手", "参考资料") == "你是助手" + RAG_DELIMITER + "参考资料"

decode() 只在第一次出现的分隔符处切分；RAG 文本里本身含有分隔符时
不会做转义，多出来的部分会被归入 RAG（已知限制）。
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Tuple, Union

from live_settings.domain.models import RAG_DELIMITER, PromptRagPair


# trim() 去除的空白：空格类字符、制表/换页符、行终止符与 BOM；\x1c-\x1f 与 \x85 不算空白
JS_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def trim(text: str) -> str:
    return text.strip(JS_WHITESPACE)


@dataclass(frozen=True)
class NoInstruction:
    """缺失、空值或无法识别的形态。"""


@dataclass(frozen=True)
class TextInstruction:
    text: str


@dataclass(frozen=True)
class PartListInstruction:
    """字符串 / part 混合的有序列表。"""

    items: Tuple[Any, ...]


@dataclass(frozen=True)
class ContentInstruction:
    """带 parts 字段的 content 对象，parts 缺失时为空元组。"""

    parts: Tuple[Any, ...]


SystemInstruction = Union[NoInstruction, TextInstruction, PartListInstruction, ContentInstruction]


def _text_of(item: Any) -> str:
    """取出字符串或 part 的文本；part 可以是 Mapping，也可以是带 text 属性的对象。"""

    if isinstance(item, str):
        return item
    if isinstance(item, Mapping):
        text = item.get("text")
    else:
        text = getattr(item, "text", None)
    if text is None:
        return ""
    return text if isinstance(text, str) else str(text)


def _parts_of(value: Any) -> Any:
    if isinstance(value, Mapping):
        return value.get("parts")
    return getattr(value, "parts", None)


def _has_parts(value: Any) -> bool:
    if isinstance(value, Mapping):
        return "parts" in value
    return hasattr(value, "parts")


def classify(value: Any) -> SystemInstruction:
    """把任意 systemInstruction 值转换为带标签的变体。"""

    if value is None:
        return NoInstruction()
    if isinstance(value, str):
        return TextInstruction(value) if value else NoInstruction()
    if isinstance(value, (list, tuple)):
        return PartListInstruction(tuple(value))
    if _has_parts(value):
        parts = _parts_of(value)
        if not isinstance(parts, (list, tuple)):
            return ContentInstruction(())
        return ContentInstruction(tuple(parts))
    return NoInstruction()


def normalize(value: Any) -> str:
    """把 systemInstruction 归一化为单个字符串，多段文本用换行连接。"""

    instruction = classify(value)
    if isinstance(instruction, TextInstruction):
        return instruction.text
    if isinstance(instruction, PartListInstruction):
        return "\n".join(_text_of(item) for item in instruction.items)
    if isinstance(instruction, ContentInstruction):
        return "\n".join(_text_of(part) for part in instruction.parts)
    return ""


def decode(raw: str | None) -> PromptRagPair:
    """在第一个分隔符处拆出 prompt 与 RAG，两侧都用 trim() 去除首尾空白。"""

    if not raw:
        return PromptRagPair()
    idx = raw.find(RAG_DELIMITER)
    if idx == -1:
        return PromptRagPair(prompt=trim(raw), rag="")
    return PromptRagPair(
        prompt=trim(raw[:idx]),
        rag=trim(raw[idx + len(RAG_DELIMITER):]),
    )


def encode(prompt: str, rag: str) -> str:
    """合并 prompt 与 RAG；RAG 为空时原样返回 prompt，不追加分隔符。"""

    if not rag:
        return prompt
    return prompt + RAG_DELIMITER + rag


def read_prompt_and_rag(system_instruction: Any) -> PromptRagPair:
    return decode(normalize(system_instruction))
