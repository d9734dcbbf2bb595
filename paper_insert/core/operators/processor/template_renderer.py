import re
from typing import Callable, Dict

from paper_insert.core.config import DEFAULT_TEMPLATE
from paper_insert.core.models import PaperRecord
from paper_insert.core.operators.base import Operator

FIELD_GETTERS: Dict[str, Callable[[PaperRecord], str]] = {
    "title": lambda record: record.title,
    "id": lambda record: record.id,
    "summary": lambda record: record.summary,
    "authors": lambda record: ", ".join(record.authors),
    "updated": lambda record: record.updated,
    "published": lambda record: record.published,
}

PLACEHOLDER_PATTERN = re.compile(r"\{\{(" + "|".join(FIELD_GETTERS) + r")\}\}")


def render(template: str, record: PaperRecord) -> str:
    """用论文字段替换模板中的占位符

    一次扫描完成替换，字段值中出现的占位符不会被再次替换；
    无法识别的占位符原样保留。
    """
    return PLACEHOLDER_PATTERN.sub(lambda m: FIELD_GETTERS[m.group(1)](record), template)


class TemplateRenderer(Operator):
    """将 PaperRecord 渲染为待插入文本的算子"""

    def __init__(self, template: str = DEFAULT_TEMPLATE):
        self.template = template

    async def process(self, record: PaperRecord) -> str:
        return render(self.template, record)
