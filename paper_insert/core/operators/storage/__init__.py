from paper_insert.core.operators.storage.settings_store import SettingsStore

__all__ = ["SettingsStore"]
