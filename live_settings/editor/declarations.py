"""function declaration 的只读投影。"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from live_settings.domain.models import FunctionDeclaration


@dataclass(frozen=True)
class DeclarationRow:
    """设置面板中一行函数声明的展示数据。"""

    name: str
    parameter_names: Tuple[str, ...]
    description: str


def declarations_of(tool: Any) -> Optional[list]:
    """返回 tool 携带的 functionDeclarations 列表；普通 tool 返回 None。"""

    if not isinstance(tool, Mapping):
        return None
    declarations = tool.get("functionDeclarations")
    if isinstance(declarations, (list, tuple)):
        return list(declarations)
    return None


def project_function_declarations(tools: Any) -> List[FunctionDeclaration]:
    """按 tool 顺序拼接所有 functionDeclarations，保持各自的内部顺序。"""

    if not isinstance(tools, (list, tuple)):
        return []
    projected: List[FunctionDeclaration] = []
    for tool in tools:
        declarations = declarations_of(tool)
        if declarations:
            projected.extend(declarations)
    return projected


def parameter_names(declaration: Any) -> List[str]:
    if not isinstance(declaration, Mapping):
        return []
    parameters = declaration.get("parameters")
    if not isinstance(parameters, Mapping):
        return []
    properties = parameters.get("properties")
    if not isinstance(properties, Mapping):
        return []
    return [str(key) for key in properties]


def declaration_rows(config: Mapping[str, Any]) -> List[DeclarationRow]:
    rows: List[DeclarationRow] = []
    for declaration in project_function_declarations(config.get("tools")):
        if not isinstance(declaration, Mapping):
            continue
        rows.append(
            DeclarationRow(
                name=str(declaration.get("name") or ""),
                parameter_names=tuple(parameter_names(declaration)),
                description=str(declaration.get("description") or ""),
            )
        )
    return rows
