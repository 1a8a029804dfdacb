"""
Articut 客户端

封装卓腾语言科技 Articut 中文断词/标注服务
"""

import logging
import os
from typing import Optional

import httpx

from ..base import ArticutResult, RequestOptions
from ..exceptions import NetworkError, error_from_message


LOGGER = logging.getLogger(__name__)


class Articut:
    """Articut 异步客户端

    每次调用只发送一次请求，不重试、不缓存。

    Example:
        async with Articut("user@example.com", "API_KEY") as articut:
            result = await articut.parse("我想過過過兒過過的日子。")
            print(result.result_segmentation)
    """

    DEFAULT_URL = "https://api.droidtown.co/Articut/API/"

    def __init__(
        self,
        username: str | None = None,
        api_key: str | None = None,
        url: str | None = None,
        client: httpx.AsyncClient | None = None
    ):
        """初始化客户端

        Args:
            username: Articut 账号，默认从 ARTICUT_USERNAME 读取
            api_key: Articut API Key，默认从 ARTICUT_API_KEY 读取
            url: 服务地址，默认为官方 API
            client: 外部提供的 httpx.AsyncClient（不会被 aclose 关闭）
        """
        self.username = username or os.getenv("ARTICUT_USERNAME", "")
        self.api_key = api_key or os.getenv("ARTICUT_API_KEY", "")
        self.url = url or self.DEFAULT_URL

        if not self.username or not self.api_key:
            raise ValueError("ARTICUT_USERNAME and ARTICUT_API_KEY are required")

        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.AsyncClient:
        """懒加载 HTTP 客户端"""
        if self._client is None:
            self._client = httpx.AsyncClient()
        return self._client

    def _build_payload(self, text: str, options: RequestOptions) -> dict:
        payload = options.to_dict()
        payload["input_str"] = text
        payload["username"] = self.username
        payload["api_key"] = self.api_key
        return payload

    async def parse(
        self,
        text: str,
        options: Optional[RequestOptions] = None
    ) -> ArticutResult:
        """断词并标注

        Args:
            text: 要处理的中文文本
            options: 请求选项，None 表示全部使用默认值

        Returns:
            ArticutResult

        Raises:
            NetworkError: 连接失败或响应体无法解析
            ArticutError: 服务端 msg 命中已知错误
        """
        if options is None:
            options = RequestOptions()

        payload = self._build_payload(text, options)
        client = self._get_client()

        LOGGER.debug(
            "event=articut_parse status=starting level=%s length=%d",
            options.level.value, len(text)
        )

        try:
            response = await client.post(self.url, json=payload)
        except httpx.HTTPError as e:
            LOGGER.debug("event=articut_parse status=transport_error error=%s", e)
            raise NetworkError(str(e)) from e

        try:
            data = response.json()
        except ValueError as e:
            # 非 JSON 响应体
            LOGGER.debug(
                "event=articut_parse status=decode_error http_status=%d",
                response.status_code
            )
            raise NetworkError(f"invalid JSON body: {e}") from e

        try:
            msg = data["msg"]
            if not isinstance(msg, str):
                raise TypeError(f"msg must be a string, got {type(msg).__name__}")
            result = ArticutResult.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            raise NetworkError(f"unexpected response schema: {e!r}") from e

        error = error_from_message(msg)
        if error is not None:
            LOGGER.debug(
                "event=articut_parse status=server_error error=%s",
                type(error).__name__
            )
            raise error

        LOGGER.debug(
            "event=articut_parse status=finished exec_time=%s balance=%d",
            result.exec_time, result.word_count_balance
        )
        return result

    async def aclose(self):
        """关闭客户端"""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.aclose()
