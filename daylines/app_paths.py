from __future__ import annotations

import sys
from pathlib import Path


CONFIG_FILE_NAME = "daylines.json"


def app_base_dir() -> Path:
    """
    Returns the directory where runtime config files should live.

    - PyInstaller exe: alongside the exe
    - Source run: project root (parent of daylines package)
    """
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parent.parent


def default_config_path() -> Path:
    return app_base_dir() / CONFIG_FILE_NAME
