"""针对单个字段的配置编辑。

每个操作都是纯函数 ``Config -> Config``：

- 不修改输入对象，返回新的 dict；
- 只替换目标路径上的节点（copy-on-write），其余键保持与输入引用一致；
- 对畸形配置降级处理，不抛异常（选择器取值校验除外）。

调用方负责把返回的新配置交给外部的 config sink。
"""

from collections.abc import Mapping
from typing import Any, Dict, Sequence

from live_settings.codec.instruction import encode, read_prompt_and_rag
from live_settings.domain.exceptions import ValidationError
from live_settings.domain.models import (
    DEFAULT_MODALITY,
    DEFAULT_VOICE,
    MODALITY_VALUES,
    VOICE_NAMES,
)
from live_settings.editor.declarations import declarations_of


# ---- copy-on-write helpers -------------------------------------------


def _assoc(mapping: Mapping[str, Any], key: str, value: Any) -> Dict[str, Any]:
    updated = dict(mapping)
    updated[key] = value
    return updated


def _assoc_in(mapping: Mapping[str, Any], path: Sequence[str], value: Any) -> Dict[str, Any]:
    """沿 path 逐层复制并写入 value；中间节点缺失或不是 Mapping 时用空 dict 代替。"""

    head, *rest = path
    if not rest:
        return _assoc(mapping, head, value)
    child = mapping.get(head)
    if not isinstance(child, Mapping):
        child = {}
    return _assoc(mapping, head, _assoc_in(child, rest, value))


def _get_in(mapping: Any, path: Sequence[str]) -> Any:
    node = mapping
    for key in path:
        if not isinstance(node, Mapping):
            return None
        node = node.get(key)
    return node


# ---- prompt / RAG ----------------------------------------------------


def set_prompt(config: Mapping[str, Any], new_prompt: str) -> Dict[str, Any]:
    """替换 prompt，保留当前 RAG 上下文。"""

    current = read_prompt_and_rag(config.get("systemInstruction"))
    return _assoc(config, "systemInstruction", encode(new_prompt, current.rag))


def set_rag(config: Mapping[str, Any], new_rag: str) -> Dict[str, Any]:
    """替换 RAG 上下文，保留当前 prompt。"""

    current = read_prompt_and_rag(config.get("systemInstruction"))
    return _assoc(config, "systemInstruction", encode(current.prompt, new_rag))


# ---- function declarations -------------------------------------------


def _with_description(tool: Any, target_name: str, new_description: str) -> Any:
    declarations = declarations_of(tool)
    if declarations is None:
        return tool
    if not any(_matches(fd, target_name) for fd in declarations):
        return tool
    return _assoc(
        tool,
        "functionDeclarations",
        [
            _assoc(fd, "description", new_description) if _matches(fd, target_name) else fd
            for fd in declarations
        ],
    )


def _matches(declaration: Any, target_name: str) -> bool:
    return isinstance(declaration, Mapping) and declaration.get("name") == target_name


def set_function_description(
    config: Mapping[str, Any], target_name: str, new_description: str
) -> Dict[str, Any]:
    """更新所有 name 等于 target_name 的函数声明的 description。

    名称通常唯一，但这里不做假设：所有匹配项都会被更新，没有匹配时返回等值的新配置。
    不含 functionDeclarations 的 tool 以及未匹配的声明保持原对象。
    """

    tools = config.get("tools")
    if not isinstance(tools, (list, tuple)):
        return dict(config)
    return _assoc(
        config,
        "tools",
        [_with_description(tool, target_name, new_description) for tool in tools],
    )


# ---- selectors -------------------------------------------------------

VOICE_PATH = ("speechConfig", "voiceConfig", "prebuiltVoiceConfig", "voiceName")


def set_voice(config: Mapping[str, Any], voice_name: str) -> Dict[str, Any]:
    if voice_name not in VOICE_NAMES:
        raise ValidationError(code="UNKNOWN_VOICE", message=f"Unknown voice: {voice_name!r}", value=voice_name)
    return _assoc_in(config, VOICE_PATH, voice_name)


def current_voice(config: Mapping[str, Any]) -> str:
    voice = _get_in(config, VOICE_PATH)
    return voice if isinstance(voice, str) and voice else DEFAULT_VOICE


def set_response_modality(config: Mapping[str, Any], modality: str) -> Dict[str, Any]:
    key = str(modality).lower()
    if key not in MODALITY_VALUES:
        raise ValidationError(
            code="UNKNOWN_MODALITY", message=f"Unknown response modality: {modality!r}", value=modality
        )
    return _assoc(config, "responseModalities", [MODALITY_VALUES[key]])


def current_response_modality(config: Mapping[str, Any]) -> str:
    modalities = config.get("responseModalities")
    if isinstance(modalities, (list, tuple)) and modalities:
        key = str(modalities[0]).lower()
        if key in MODALITY_VALUES:
            return key
    return DEFAULT_MODALITY
