from typing import Callable, Optional

from paper_insert.core.common import logger, notify as default_notify
from paper_insert.core.exceptions import DisambiguationUnresolved, NotFound, TransportFailure
from paper_insert.core.operators.sink.document import DocumentInserter, TextDocument
from paper_insert.core.operators.storage.settings_store import SettingsStore
from paper_insert.core.workflow.retrieval import RetrievalPipeline

TRANSPORT_FAILURE_NOTICE = "Failed to get arXiv. Check your internet connection or language prefix."
DISAMBIGUATION_NOTICE = "Could not automatically resolve disambiguation."


def not_found_notice(paper_id: str) -> str:
    return f"{paper_id} not found on arXiv."


class InsertPaperCommand:
    """按 ID 插入 arXiv 论文的命令

    读取当前模板，检索论文，并把结果插入到编辑器光标处；
    失败时给出提示，文档保持不变。
    """

    def __init__(
        self,
        pipeline: RetrievalPipeline,
        settings_store: SettingsStore,
        notify: Optional[Callable[[str], None]] = None,
    ):
        self.pipeline = pipeline
        self.settings_store = settings_store
        self.notify = notify or default_notify

    async def run(self, editor: TextDocument, paper_id: Optional[str]) -> bool:
        """执行命令

        Args:
            editor: 任何提供 replace_selection(text) 的编辑器对象
            paper_id: 用户输入的论文 ID，为空时不做任何事

        Returns:
            bool: 是否插入了文本
        """
        if not paper_id or not paper_id.strip():
            logger.debug("未输入论文 ID，跳过")
            return False

        template = self.settings_store.load().template
        try:
            text = await self.pipeline.retrieve(paper_id, template)
        except NotFound:
            self.notify(not_found_notice(paper_id))
            return False
        except TransportFailure:
            self.notify(TRANSPORT_FAILURE_NOTICE)
            return False
        except DisambiguationUnresolved:
            self.notify(DISAMBIGUATION_NOTICE)
            return False

        await DocumentInserter(editor).process(text)
        return True
