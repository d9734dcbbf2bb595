import asyncio
from typing import Awaitable, Callable, Optional

import aiohttp

from paper_insert.core.common import logger
from paper_insert.core.config import ARXIV_QUERY_PREFIX, CatalogConfig
from paper_insert.core.exceptions import TransportError
from paper_insert.core.operators.base import Operator
from paper_insert.core.operators.processor.identifier_encoder import encode_identifier

FetchText = Callable[[str], Awaitable[str]]


def aiohttp_fetcher(timeout_seconds: Optional[float] = None) -> FetchText:
    """构造一个基于 aiohttp 的 "fetch text from URL" 函数

    每次调用都会创建独立的 ClientSession，并发的请求之间不共享连接。
    """
    timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def fetch_text(url: str) -> str:
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.get(url) as response:
                response.raise_for_status()
                return await response.text()

    return fetch_text


class ArxivCatalogClient(Operator):
    """从 arXiv 查询单篇论文元数据的算子

    输入为已经编码的 ID 片段，输出为原始响应文本（Atom feed）。
    """

    def __init__(
        self,
        endpoint_prefix: str = ARXIV_QUERY_PREFIX,
        fetch_text: Optional[FetchText] = None,
        timeout_seconds: Optional[float] = None,
    ):
        """初始化ArxivCatalogClient

        Args:
            endpoint_prefix: 查询 URL 前缀，编码后的 ID 直接拼接在后面
            fetch_text: 传输函数，默认使用 aiohttp
            timeout_seconds: 默认传输函数的总超时时间
        """
        self.endpoint_prefix = endpoint_prefix
        self.fetch_text = fetch_text or aiohttp_fetcher(timeout_seconds)

    @classmethod
    def from_config(cls, config: CatalogConfig, fetch_text: Optional[FetchText] = None) -> "ArxivCatalogClient":
        return cls(
            endpoint_prefix=config.endpoint_prefix,
            fetch_text=fetch_text,
            timeout_seconds=config.timeout_seconds,
        )

    def build_url(self, encoded_identifier: str) -> str:
        return self.endpoint_prefix + encoded_identifier

    async def fetch(self, identifier: str) -> str:
        """编码 ID 并请求 catalog

        Raises:
            TransportError: 网络错误、超时或非 2xx 状态
        """
        return await self.process(encode_identifier(identifier))

    async def process(self, encoded_identifier: str) -> str:
        url = self.build_url(encoded_identifier)
        logger.info(f"请求 arXiv: {url}")
        try:
            body = await self.fetch_text(url)
        except TransportError:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError, UnicodeDecodeError) as e:
            logger.warning(f"请求 arXiv 失败: url={url}, error={e!r}")
            raise TransportError(f"Request to {url} failed: {e}") from e

        logger.debug(f"arXiv 响应长度: {len(body)}")
        return body
