from pathlib import Path
from typing import Any, Dict

import yaml

from paper_insert.core.common import logger
from paper_insert.core.config import Settings


class SettingsStore:
    """持久化用户设置（插入模板）的本地存储"""

    def __init__(self, path: str):
        """初始化SettingsStore

        Args:
            path: 设置文件路径（YAML）
        """
        self.path = Path(path)

    def read_storage(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}

        with open(self.path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Settings file {self.path} must contain a mapping")
        return data

    def load(self) -> Settings:
        """读取设置，并与默认值合并"""
        data = self.read_storage()
        known = {k: v for k, v in data.items() if k in Settings.model_fields}
        return Settings(**{**Settings().model_dump(), **known})

    def save(self, settings: Settings):
        settings.to_yaml(str(self.path))
        logger.debug(f"设置已保存: {self.path}")

    def update_template(self, template: str) -> Settings:
        settings = self.load().model_copy(update={"template": template})
        self.save(settings)
        logger.info("插入模板已更新")
        return settings
