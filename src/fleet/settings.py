from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

from fleet.common import AppDirectories, AppInfo, AppPaths, LoggingConfig
from fleet.datastore import DataStoreSettings


class DataStoreConfig(BaseModel):
    root: Path | None = None


class Settings(BaseSettings):
    app: AppInfo = AppInfo()
    paths: AppPaths = AppPaths()
    logging: LoggingConfig = LoggingConfig()
    datastore: DataStoreConfig = DataStoreConfig()

    model_config = SettingsConfigDict(
        env_prefix="FLEET_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        nested_model_default_partial_update=True,
    )

    def to_app_directories(self) -> AppDirectories:
        return AppDirectories(app_name=self.paths.data_dir_name)

    def to_datastore_settings(self, root: Path | None = None) -> DataStoreSettings:
        return DataStoreSettings(
            directories=self.to_app_directories(),
            root=root or self.datastore.root,
        )


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


# Private singleton instance
_settings: Settings | None = None

# Convenience access - pre-initialized singleton
settings = get_settings()


__all__ = [
    "AppInfo",
    "AppPaths",
    "DataStoreConfig",
    "Settings",
    "get_settings",
    "settings",
]
