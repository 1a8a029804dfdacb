"""客户端模块"""

from .articut_client import Articut

__all__ = ["Articut"]
