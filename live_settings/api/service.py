"""对外 API 服务模块。

SettingsService 把外部的 config source / sink 与编辑核心连接起来：
每个 UI 事件（文本变化、文件加载、输入框失焦、选择器切换）对应一个方法，
方法读取当前配置、调用纯函数编辑器生成新配置，并整体交给 sink。
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional

from live_settings.codec.instruction import read_prompt_and_rag
from live_settings.domain.exceptions import BusinessError
from live_settings.domain.models import PromptRagPair
from live_settings.editor import config_editor
from live_settings.editor.declarations import DeclarationRow, declaration_rows
from live_settings.infrastructure.files.rag_loader import LocalRagFileReader, RagFileReader
from live_settings.infrastructure.logging.logger import logger


ConfigSource = Callable[[], Mapping[str, Any]]
ConfigSink = Callable[[Dict[str, Any]], None]


@dataclass
class ConfigState:
    """最简单的配置持有者，既是 source 也是 sink；实际应用中由外部上下文提供。"""

    config: Dict[str, Any] = field(default_factory=dict)
    connected: bool = False

    def get(self) -> Mapping[str, Any]:
        return self.config

    def set(self, config: Dict[str, Any]) -> None:
        self.config = config


class SettingsService:
    """设置面板的事件处理入口。"""

    def __init__(
        self,
        source: ConfigSource,
        sink: ConfigSink,
        *,
        connected: Optional[Callable[[], bool]] = None,
        file_reader: Optional[RagFileReader] = None,
    ) -> None:
        self._source = source
        self._sink = sink
        self._connected = connected or (lambda: False)
        self._file_reader = file_reader or LocalRagFileReader()

    @classmethod
    def from_state(cls, state: ConfigState, **kwargs: Any) -> "SettingsService":
        return cls(state.get, state.set, connected=lambda: state.connected, **kwargs)

    # ---- 读取 ----------------------------------------------------

    @property
    def config(self) -> Mapping[str, Any]:
        return self._source()

    @property
    def connected(self) -> bool:
        return bool(self._connected())

    def prompt_and_rag(self) -> PromptRagPair:
        return read_prompt_and_rag(self.config.get("systemInstruction"))

    @property
    def prompt(self) -> str:
        return self.prompt_and_rag().prompt

    @property
    def rag(self) -> str:
        return self.prompt_and_rag().rag

    def function_declarations(self) -> List[DeclarationRow]:
        return declaration_rows(self.config)

    @property
    def voice(self) -> str:
        return config_editor.current_voice(self.config)

    @property
    def response_modality(self) -> str:
        return config_editor.current_response_modality(self.config)

    # ---- 编辑 ----------------------------------------------------

    def update_prompt(self, text: str) -> Dict[str, Any]:
        """textarea 变化时调用，text 为完整内容而非增量。"""

        return self._publish(
            config_editor.set_prompt(self.config, text),
            "prompt",
            length=len(text),
        )

    def update_rag(self, text: str) -> Dict[str, Any]:
        return self._publish(
            config_editor.set_rag(self.config, text),
            "rag",
            length=len(text),
        )

    def load_rag_from_file(self, path: str | Path | None) -> Optional[Dict[str, Any]]:
        """用文件内容替换 RAG 上下文（不是追加）。

        文件不存在、后缀不被接受或读取失败时不修改配置，返回 None。
        """

        try:
            text = self._file_reader.read_text(path)
        except BusinessError as e:
            logger.error(
                f"RAG file load failed: {e.message}",
                extra={"extra": {"code": e.code, "path": str(path)}},
            )
            return None
        if text is None:
            return None
        return self._publish(
            config_editor.set_rag(self.config, text),
            "rag_file",
            path=str(path),
            length=len(text),
        )

    def update_function_description(self, name: str, description: str) -> Dict[str, Any]:
        """输入框失焦时提交一次描述修改。"""

        return self._publish(
            config_editor.set_function_description(self.config, name, description),
            "function_description",
            function=name,
        )

    def select_voice(self, voice_name: str) -> Dict[str, Any]:
        return self._publish(config_editor.set_voice(self.config, voice_name), "voice", voice=voice_name)

    def select_response_modality(self, modality: str) -> Dict[str, Any]:
        return self._publish(
            config_editor.set_response_modality(self.config, modality),
            "response_modality",
            modality=modality,
        )

    def _publish(self, new_config: Dict[str, Any], edit: str, **fields: Any) -> Dict[str, Any]:
        if self.connected:
            # 已连接时设置仅在下次连接生效，不阻止编辑
            logger.warning(
                "settings.edit_while_connected",
                extra={"extra": {"edit": edit}},
            )
        self._sink(new_config)
        logger.info("settings.updated", extra={"extra": {"edit": edit, **fields}})
        return new_config
