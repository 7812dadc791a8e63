"""领域层模型与异常。

包含：
- models: LiveConnectConfig / Tool / FunctionDeclaration 等线格式结构，以及 PromptRagPair。
- exceptions: 业务异常类型定义。
"""
