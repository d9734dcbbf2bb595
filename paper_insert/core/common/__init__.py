from paper_insert.core.common.logger import logger
from paper_insert.core.common.notice import notify

__all__ = ["logger", "notify"]
