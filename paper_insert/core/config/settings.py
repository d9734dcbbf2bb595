from .base import YamlConfig

DEFAULT_TEMPLATE = "{{title}}\n{{authors}}\n{{summary}}"


class Settings(YamlConfig):
    """用户可编辑的插入模板，即持久化的 {template: str}"""

    template: str = DEFAULT_TEMPLATE
