"""
Articut 错误类型

服务端不提供结构化错误码，只能按 msg 文本做子串匹配。
"""

from typing import Optional


class ArticutError(Exception):
    """所有 Articut 错误的基类"""

    description = "Articut error"

    def __init__(self, server_message: str = ""):
        self.server_message = server_message
        super().__init__(self.description)


class InvalidVersionError(ArticutError):
    description = "Specified version does not exist"


class InvalidLevelError(ArticutError):
    description = "Specified level does not exist"


class BadAuthError(ArticutError):
    description = "Authentication failed"


class InvalidAPIKeyError(ArticutError):
    description = "Invalid Articut key"


class InputTextTooLongError(ArticutError):
    description = "Your input text is too long"


class NotEnoughQuotaError(ArticutError):
    description = "Insufficient word count balance"


class InternalServerError(ArticutError):
    description = "Internal server error"


class InvalidContentTypeError(ArticutError):
    description = "Invalid content type"


class InvalidArgumentsError(ArticutError):
    description = "Invalid arguments"


class UserDictionaryParseError(ArticutError):
    description = "User defined dictionary parse error"


class UserDictionarySizeExceedError(ArticutError):
    description = "User defined dictionary file size exceeded"


class RateLimitedError(ArticutError):
    description = "Requests per minute exceeded"


class NetworkError(ArticutError, ConnectionError):
    """传输层失败或无法解析的响应体

    原始异常保存在 __cause__ 中。
    """

    description = "Articut request failed"

    def __init__(self, detail: str = ""):
        super().__init__()
        if detail:
            self.args = (f"{self.description}: {detail}",)


# 按顺序匹配，第一个命中的生效
# "Authtication" 是服务端原文的拼写，不能改
MESSAGE_ERRORS: tuple[tuple[str, type[ArticutError]], ...] = (
    ("Specified version does not exist", InvalidVersionError),
    ("Specified level does not exist", InvalidLevelError),
    ("Authtication failed", BadAuthError),
    ("Invalid Articut key", InvalidAPIKeyError),
    ("Your input_str is too long", InputTextTooLongError),
    ("Insufficient word count balance", NotEnoughQuotaError),
    ("Internal server error", InternalServerError),
    ("Invalid content_type", InvalidContentTypeError),
    ("Invalid arguments", InvalidArgumentsError),
    ("UserDefinedDICT Parsing", UserDictionaryParseError),
    ("Maximum UserDefinedDICT file size", UserDictionarySizeExceedError),
    ("Requests per minute exceeded", RateLimitedError),
)


def error_from_message(msg: str) -> Optional[ArticutError]:
    """将服务端 msg 映射为错误

    Args:
        msg: 服务端返回的 msg 字段

    Returns:
        第一个匹配的错误实例，无匹配返回 None（视为成功）
    """
    for phrase, error_cls in MESSAGE_ERRORS:
        if phrase in msg:
            return error_cls(msg)
    return None
