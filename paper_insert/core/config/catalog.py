from .base import YamlConfig

ARXIV_QUERY_PREFIX = "https://export.arxiv.org/api/query?id_list="


class CatalogConfig(YamlConfig):
    endpoint_prefix: str = ARXIV_QUERY_PREFIX
    timeout_seconds: float = 30.0
    # 多条 entry 时报错而不是取第一条
    strict_disambiguation: bool = False
