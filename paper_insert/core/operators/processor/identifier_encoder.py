from typing import Any
from urllib.parse import quote, unquote

from paper_insert.core.operators.base import Operator

# 与 JavaScript encodeURIComponent 保持一致的安全字符
_SAFE_CHARS = "-_.!~*'()"


def encode_identifier(identifier: str) -> str:
    """将用户输入的论文 ID 编码为可拼接在查询 URL 后的片段

    先解码再编码，已经编码过的输入不会被二次编码。
    eg: hep-th/9901001v2 -> hep-th%2F9901001v2
    """
    return quote(unquote(identifier), safe=_SAFE_CHARS)


class IdentifierEncoder(Operator):
    """对论文 ID 做 URL 编码的算子"""

    async def process(self, identifier: Any) -> str:
        return encode_identifier(str(identifier))
