"""配置线格式与派生视图模型。

本模块描述编辑核心读写的数据结构：

- LiveConnectConfig: 会话配置本体，键名沿用线格式（camelCase），由外部应用持有。
- Tool / FunctionDeclarationsTool / FunctionDeclaration: tools 列表中的元素。
- PromptRagPair: 从 systemInstruction 派生的 (prompt, rag) 视图，不落盘。

配置只按 Mapping 读取，编辑时一律返回新对象，未涉及的键保持引用不变。
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Mapping, TypedDict, Union


# systemInstruction 中 prompt 与 RAG 之间的保留分隔符（线格式的一部分，必须逐字一致）
RAG_DELIMITER = "\n\n---RAG CONTEXT---\n\n"

# 语音选择器可选项，第一个为默认值
VOICE_NAMES = ("Puck", "Charon", "Kore", "Fenrir", "Aoede")
DEFAULT_VOICE = VOICE_NAMES[0]

# 响应模态：选择器使用小写，写入配置时为大写枚举值
ResponseModality = Literal["audio", "text"]
MODALITY_VALUES: Dict[str, str] = {"audio": "AUDIO", "text": "TEXT"}
DEFAULT_MODALITY: ResponseModality = "audio"


class Part(TypedDict, total=False):
    text: str


class Content(TypedDict, total=False):
    role: str
    parts: List[Part]


# systemInstruction 允许的几种形态；实际输入可能是任何东西，见 codec.classify
SystemInstructionValue = Union[None, str, List[Union[str, Part]], Content]


class Schema(TypedDict, total=False):
    type: str
    description: str
    properties: Dict[str, Any]
    required: List[str]


class FunctionDeclaration(TypedDict, total=False):
    """可供 Agent 调用的函数声明，name 作为编辑键。"""

    name: str
    description: str
    parameters: Schema


class FunctionDeclarationsTool(TypedDict, total=False):
    functionDeclarations: List[FunctionDeclaration]


# 普通 tool（googleSearch、codeExecution 等）对编辑核心而言是不透明的 Mapping
Tool = Union[FunctionDeclarationsTool, Mapping[str, Any]]


class PrebuiltVoiceConfig(TypedDict, total=False):
    voiceName: str


class VoiceConfig(TypedDict, total=False):
    prebuiltVoiceConfig: PrebuiltVoiceConfig


class SpeechConfig(TypedDict, total=False):
    voiceConfig: VoiceConfig


class LiveConnectConfig(TypedDict, total=False):
    """会话配置中编辑核心关心的字段；其余字段原样透传。"""

    systemInstruction: SystemInstructionValue
    tools: List[Tool]
    speechConfig: SpeechConfig
    responseModalities: List[str]


@dataclass(frozen=True)
class PromptRagPair:
    """从 systemInstruction 解析出的 prompt 与 RAG 上下文（均已去除首尾空白）。"""

    prompt: str = ""
    rag: str = ""
