"""
Articut - 中文断词/标注服务的 Python 客户端
"""

import logging

from .base import ArticutResult, Level, Pinyin, PosTag, RequestOptions
from .clients.articut_client import Articut
from .exceptions import (
    ArticutError,
    BadAuthError,
    InputTextTooLongError,
    InternalServerError,
    InvalidAPIKeyError,
    InvalidArgumentsError,
    InvalidContentTypeError,
    InvalidLevelError,
    InvalidVersionError,
    NetworkError,
    NotEnoughQuotaError,
    RateLimitedError,
    UserDictionaryParseError,
    UserDictionarySizeExceedError,
    error_from_message,
)

__version__ = "0.1.0"
__all__ = [
    "Articut",
    "ArticutResult",
    "Level",
    "Pinyin",
    "PosTag",
    "RequestOptions",
    "ArticutError",
    "BadAuthError",
    "InputTextTooLongError",
    "InternalServerError",
    "InvalidAPIKeyError",
    "InvalidArgumentsError",
    "InvalidContentTypeError",
    "InvalidLevelError",
    "InvalidVersionError",
    "NetworkError",
    "NotEnoughQuotaError",
    "RateLimitedError",
    "UserDictionaryParseError",
    "UserDictionarySizeExceedError",
    "error_from_message",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
