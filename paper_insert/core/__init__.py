from paper_insert.core.operators.base import Operator, OperatorStatus, OperatorNode
from paper_insert.core.pipeline import SequentialPipeline
from paper_insert.core.models import PaperRecord
from paper_insert.core.exceptions import (
    PipelineError,
    TransportFailure,
    NotFound,
    DisambiguationUnresolved,
)

from paper_insert.core.operators.datasource import ArxivCatalogClient
from paper_insert.core.operators.processor import (
    IdentifierEncoder,
    ArxivResponseParser,
    TemplateRenderer,
    encode_identifier,
    render,
)
from paper_insert.core.operators.sink import TextDocument, DocumentInserter
from paper_insert.core.operators.storage import SettingsStore
from paper_insert.core.workflow import RetrievalPipeline, InsertPaperCommand

__all__ = [
    # 核心组件
    'Operator',
    'OperatorStatus',
    'OperatorNode',
    'SequentialPipeline',
    'PaperRecord',

    # 错误类型
    'PipelineError',
    'TransportFailure',
    'NotFound',
    'DisambiguationUnresolved',

    # 数据源算子
    'ArxivCatalogClient',

    # 处理算子
    'IdentifierEncoder',
    'ArxivResponseParser',
    'TemplateRenderer',
    'encode_identifier',
    'render',

    # 输出与存储
    'TextDocument',
    'DocumentInserter',
    'SettingsStore',

    # 工作流
    'RetrievalPipeline',
    'InsertPaperCommand',
]
