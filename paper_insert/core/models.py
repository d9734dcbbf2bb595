from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class PaperRecord:
    """从 catalog 返回的 entry 中提取出的论文元数据

    所有字段都是 catalog 返回的原始字符串，缺失的字段为空字符串。
    """
    id: str               # catalog 返回的规范 id/URL
    title: str
    summary: str          # 摘要，保留原始换行与空白
    published: str        # 发布时间，不做解析
    updated: str          # 更新时间，不做解析
    authors: Tuple[str, ...] = field(default_factory=tuple)  # 按文档顺序
