from pathlib import Path
from typing import Any, Optional

from paper_insert.core.common import logger
from paper_insert.core.operators.base import Operator


class TextDocument:
    """带选区的文本缓冲区，模拟编辑器在光标处插入文本的行为"""

    def __init__(self, text: str = "", selection: Optional[tuple] = None, path: Optional[str] = None):
        """初始化TextDocument

        Args:
            text: 文档内容
            selection: 选区 (start, end)，默认光标在文档末尾
            path: 文档对应的文件路径
        """
        self.text = text
        self.path = Path(path) if path else None
        if selection is None:
            selection = (len(text), len(text))
        self.set_selection(*selection)

    @classmethod
    def from_file(cls, path: str, cursor: Optional[int] = None) -> "TextDocument":
        file_path = Path(path)
        text = file_path.read_text(encoding="utf-8") if file_path.exists() else ""
        if cursor is None:
            cursor = len(text)
        return cls(text, (cursor, cursor), path=path)

    def set_selection(self, start: int, end: Optional[int] = None):
        if end is None:
            end = start
        if not 0 <= start <= end <= len(self.text):
            raise ValueError(f"Invalid selection ({start}, {end}) for text of length {len(self.text)}")
        self.selection = (start, end)

    @property
    def cursor(self) -> int:
        return self.selection[1]

    def replace_selection(self, replacement: str):
        """用文本替换当前选区，选区为空时即在光标处插入；之后光标移到插入文本末尾"""
        start, end = self.selection
        self.text = self.text[:start] + replacement + self.text[end:]
        cursor = start + len(replacement)
        self.selection = (cursor, cursor)

    def save(self, path: Optional[str] = None):
        target = Path(path) if path else self.path
        if target is None:
            raise ValueError("No path to save document to")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.text, encoding="utf-8")
        logger.info(f"文档已保存: {target}")


class DocumentInserter(Operator):
    """将渲染好的文本插入文档光标处的算子"""

    def __init__(self, document: TextDocument):
        self.document = document

    async def process(self, text: Any) -> TextDocument:
        self.document.replace_selection(str(text))
        return self.document
