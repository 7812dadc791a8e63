"""配置编辑器。

- declarations: 从 tools 投影出扁平的 function declaration 列表与展示行。
- config_editor: 针对单个字段的纯函数式编辑，返回新的配置对象。
"""

from live_settings.editor.config_editor import (
    current_response_modality,
    current_voice,
    set_function_description,
    set_prompt,
    set_rag,
    set_response_modality,
    set_voice,
)
from live_settings.editor.declarations import (
    DeclarationRow,
    declaration_rows,
    parameter_names,
    project_function_declarations,
)

__all__ = [
    "DeclarationRow",
    "current_response_modality",
    "current_voice",
    "declaration_rows",
    "parameter_names",
    "project_function_declarations",
    "set_function_description",
    "set_prompt",
    "set_rag",
    "set_response_modality",
    "set_voice",
]
