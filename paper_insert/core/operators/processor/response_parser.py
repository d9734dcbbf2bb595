import xml.etree.ElementTree as ET
from typing import List, Optional

from paper_insert.core.common import logger
from paper_insert.core.exceptions import AmbiguousEntriesError, NotFoundError
from paper_insert.core.models import PaperRecord
from paper_insert.core.operators.base import Operator

# arXiv 使用 Atom 命名空间
ATOM_NS = {"atom": "http://www.w3.org/2005/Atom"}

# arXiv 对格式错误的 ID 会返回一条 id 为该前缀的 "Error" entry
ARXIV_ERROR_ID_PREFIXES = (
    "http://arxiv.org/api/errors",
    "https://arxiv.org/api/errors",
)


def _find(element: ET.Element, tag: str) -> Optional[ET.Element]:
    """按标签名查找第一个子元素，先查 Atom 命名空间，再查无命名空间"""
    found = element.find(f"atom:{tag}", ATOM_NS)
    if found is None:
        found = element.find(tag)
    return found


def _findall(element: ET.Element, tag: str) -> List[ET.Element]:
    found = element.findall(f"atom:{tag}", ATOM_NS)
    if not found:
        found = element.findall(tag)
    return found


def _text(element: ET.Element, tag: str) -> str:
    child = _find(element, tag)
    if child is None:
        return ""
    return "".join(child.itertext())


class ArxivResponseParser(Operator):
    """将 arXiv Atom 响应解析为 PaperRecord 的算子"""

    def __init__(self, strict_disambiguation: bool = False):
        """初始化ArxivResponseParser

        Args:
            strict_disambiguation: 为 True 时多条 entry 抛出 AmbiguousEntriesError，
                否则取第一条
        """
        self.strict_disambiguation = strict_disambiguation

    def parse(self, body: str) -> PaperRecord:
        """解析响应文本

        Raises:
            NotFoundError: 文档格式错误，或没有 entry
            AmbiguousEntriesError: 严格模式下有多条 entry
        """
        try:
            root = ET.fromstring(body)
        except ET.ParseError as e:
            # 无法解析的响应与"没有结果"同等处理
            logger.warning(f"arXiv 响应解析失败: {e}")
            raise NotFoundError(f"Malformed catalog response: {e}") from e

        entries = _findall(root, "entry")
        if not entries:
            raise NotFoundError("Catalog response contains no entry")

        if len(entries) > 1:
            if self.strict_disambiguation:
                raise AmbiguousEntriesError(
                    f"Catalog response contains {len(entries)} entries", len(entries)
                )
            logger.warning(f"arXiv 返回了 {len(entries)} 条 entry，取第一条")

        return self.project_entry(entries[0])

    def project_entry(self, entry: ET.Element) -> PaperRecord:
        entry_id = _text(entry, "id")
        if entry_id.strip().startswith(ARXIV_ERROR_ID_PREFIXES):
            raise NotFoundError(f"Catalog reported an error entry: {entry_id.strip()}")

        authors = []
        for author in _findall(entry, "author"):
            name = _find(author, "name")
            if name is not None:
                authors.append("".join(name.itertext()))

        return PaperRecord(
            id=entry_id,
            title=_text(entry, "title"),
            summary=_text(entry, "summary"),
            published=_text(entry, "published"),
            updated=_text(entry, "updated"),
            authors=tuple(authors),
        )

    async def process(self, body: str) -> PaperRecord:
        return self.parse(body)
