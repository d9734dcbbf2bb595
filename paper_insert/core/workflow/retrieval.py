from typing import Optional

from paper_insert.core.common import logger
from paper_insert.core.config import Config, DEFAULT_TEMPLATE
from paper_insert.core.exceptions import (
    AmbiguousEntriesError,
    DisambiguationUnresolved,
    NotFound,
    NotFoundError,
    TransportError,
    TransportFailure,
)
from paper_insert.core.operators.datasource.arxiv import ArxivCatalogClient, FetchText
from paper_insert.core.operators.processor import (
    ArxivResponseParser,
    IdentifierEncoder,
    TemplateRenderer,
)
from paper_insert.core.pipeline import SequentialPipeline

ENCODING = "encoding"
REQUESTING = "requesting"
PARSING = "parsing"
RENDERING = "rendering"


class RetrievalPipeline:
    """根据论文 ID 检索元数据并渲染为文本

    encoding -> requesting -> parsing -> rendering，任一阶段失败即结束。
    """

    def __init__(
        self,
        client: Optional[ArxivCatalogClient] = None,
        parser: Optional[ArxivResponseParser] = None,
        encoder: Optional[IdentifierEncoder] = None,
    ):
        self.client = client or ArxivCatalogClient()
        self.parser = parser or ArxivResponseParser()
        self.encoder = encoder or IdentifierEncoder()

    @classmethod
    def from_config(cls, config: Config, fetch_text: Optional[FetchText] = None) -> "RetrievalPipeline":
        return cls(
            client=ArxivCatalogClient.from_config(config.catalog, fetch_text=fetch_text),
            parser=ArxivResponseParser(strict_disambiguation=config.catalog.strict_disambiguation),
        )

    def build(self, template: str) -> SequentialPipeline:
        return (
            SequentialPipeline()
            .add_operator(ENCODING, self.encoder)
            .add_operator(REQUESTING, self.client)
            .add_operator(PARSING, self.parser)
            .add_operator(RENDERING, TemplateRenderer(template))
        )

    async def retrieve(self, identifier: str, template: str = DEFAULT_TEMPLATE) -> str:
        """检索论文并返回渲染后的文本

        Raises:
            TransportFailure: 请求失败
            NotFound: 没有找到对应论文，或响应无法解析
            DisambiguationUnresolved: 严格模式下返回了多篇论文
        """
        logger.info(f"开始检索论文: {identifier}")
        pipeline = self.build(template)
        try:
            results = await pipeline.execute(identifier)
        except TransportError as e:
            self._log_failure(pipeline, identifier, e)
            raise TransportFailure(identifier, str(e)) from e
        except NotFoundError as e:
            self._log_failure(pipeline, identifier, e)
            raise NotFound(identifier, str(e)) from e
        except AmbiguousEntriesError as e:
            self._log_failure(pipeline, identifier, e)
            raise DisambiguationUnresolved(identifier, str(e)) from e

        logger.info(f"检索完成: {identifier}")
        return results[RENDERING]

    @staticmethod
    def _log_failure(pipeline: SequentialPipeline, identifier: str, error: Exception):
        logger.info(f"检索失败: identifier={identifier}, stage={pipeline.failed_stage}, error={error}")
