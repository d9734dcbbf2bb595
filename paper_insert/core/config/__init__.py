from pathlib import Path

from paper_insert.core.config.base import YamlConfig
from paper_insert.core.config.catalog import CatalogConfig, ARXIV_QUERY_PREFIX
from paper_insert.core.config.settings import Settings, DEFAULT_TEMPLATE
from paper_insert.core.config.storage import StorageConfig


class Config(YamlConfig):
    catalog: CatalogConfig = CatalogConfig()
    storage: StorageConfig = StorageConfig()

    @property
    def settings_path(self) -> Path:
        return Path(self.storage.base_path) / self.storage.settings_file


# 为了方便使用，导出主要的类
__all__ = [
    "Config",
    "YamlConfig",
    "CatalogConfig",
    "StorageConfig",
    "Settings",
    "DEFAULT_TEMPLATE",
    "ARXIV_QUERY_PREFIX",
]
