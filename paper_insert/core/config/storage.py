from .base import YamlConfig


class StorageConfig(YamlConfig):
    base_path: str = "./data"
    settings_file: str = "settings.yaml"
