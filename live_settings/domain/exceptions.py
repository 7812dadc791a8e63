"""统一业务异常模型。

编辑核心本身不抛出异常（畸形配置一律降级处理），
这里的异常只用于外围协作者：选择器取值校验、RAG 文件读取等，
便于 service 层统一捕获与记录。
"""


class BusinessError(Exception):
    """业务异常基类。

    Attributes:
        code: 机器可读错误码（如 "RAG_FILE_READ_ERROR"）。
        message: 用户可读错误信息。
        extra: 其他补充字段（例如 path、value 等）。
    """

    def __init__(self, code: str, message: str, **extra):
        self.code = code
        self.message = message
        self.extra = extra
        super().__init__(message)


class ValidationError(BusinessError):
    """选择器取值（voice / modality 等）校验失败。"""


class FileReadError(BusinessError):
    """RAG 文件存在但无法读取（权限、目录、超出大小限制等）。"""
