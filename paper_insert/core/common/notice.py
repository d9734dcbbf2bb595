from paper_insert.core.common.logger import logger


def notify(message: str):
    """默认的用户提示输出：以 WARNING 级别写入日志"""
    logger.warning(message)
