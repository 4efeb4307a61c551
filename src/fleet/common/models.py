"""Common models used across Fleet."""

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel

from fleet.constants import APP_NAME


class AppInfo(BaseModel):
    project_name: str = APP_NAME
    version: str = "0.1.0"
    environment: Literal["test", "dev", "prod"] = "dev"


class AppPaths(BaseModel):
    data_dir_name: str = APP_NAME
    logs_dir_name: str = "logs"
    log_filename: str = f"{APP_NAME}.log"


@dataclass(frozen=True)
class AppDirectories:
    """Application directory structure settings.

    Defines where Fleet keeps files relative to standard locations:
    - ~/.local/share/{app_name}/

    Attributes:
        app_name: Name used in the XDG data directory
    """

    app_name: str = APP_NAME
