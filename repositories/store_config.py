"""
Store configuration.

This module contains *only* the resolution of where the inventory file lives.
The location is an explicit value handed to the store at construction, so tests
and alternate deployments can point it anywhere.

Environment variables (optional, may be set in a .env file):
- VENDING_DATA_DIR: Directory holding the store file (default: ~/.vending_machine)
- VENDING_DATA_FILE: Store file name (default: vending_data.json)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_DATA_DIR: Path = Path.home() / ".vending_machine"
DEFAULT_DATA_FILE: str = "vending_data.json"

# Look for .env in the project root
_ENV_PATH = Path(__file__).parent.parent / ".env"


@dataclass(frozen=True, slots=True)
class StoreConfig:
    """Location of the persisted inventory."""

    data_dir: Path
    file_name: str = DEFAULT_DATA_FILE

    def __post_init__(self) -> None:
        if not self.file_name or Path(self.file_name).name != self.file_name:
            raise ValueError("file_name must be a plain file name")

    @property
    def path(self) -> Path:
        return self.data_dir / self.file_name


def load_store_config(env_file: Path | None = _ENV_PATH) -> StoreConfig:
    """
    Build a StoreConfig from the environment.

    Values already present in the process environment win over the .env file.
    """

    if env_file is not None:
        load_dotenv(dotenv_path=env_file)

    data_dir = os.getenv("VENDING_DATA_DIR")
    file_name = os.getenv("VENDING_DATA_FILE")

    return StoreConfig(
        data_dir=Path(data_dir).expanduser() if data_dir else DEFAULT_DATA_DIR,
        file_name=file_name or DEFAULT_DATA_FILE,
    )


__all__ = [
    "DEFAULT_DATA_DIR",
    "DEFAULT_DATA_FILE",
    "StoreConfig",
    "load_store_config",
]
