"""检索流程中的异常类型

组件级异常（CatalogError 子类）由各个算子抛出，
RetrievalPipeline 将其映射为 PipelineError 子类后交给调用方。
"""


class CatalogError(Exception):
    """组件级异常基类"""


class TransportError(CatalogError):
    """请求未完成或返回了非 2xx 状态"""


class NotFoundError(CatalogError):
    """响应中没有 entry，或响应无法解析"""


class AmbiguousEntriesError(CatalogError):
    """严格模式下响应包含多条 entry"""

    def __init__(self, message: str, entry_count: int):
        super().__init__(message)
        self.entry_count = entry_count


class PipelineError(Exception):
    """检索流程的终止性错误，携带用户输入的 identifier"""

    def __init__(self, identifier: str, message: str = ""):
        super().__init__(message or identifier)
        self.identifier = identifier


class TransportFailure(PipelineError):
    pass


class NotFound(PipelineError):
    pass


class DisambiguationUnresolved(PipelineError):
    pass
