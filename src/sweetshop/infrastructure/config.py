"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

# Project root when installed in editable mode (src/sweetshop/infrastructure/..)
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = _DEFAULT_DATA_DIR
    log_level: str = "WARNING"

    @property
    def products_file(self) -> Path:
        return self.data_dir / "products.json"

    @property
    def offers_file(self) -> Path:
        return self.data_dir / "offers.json"

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        data_dir = env.get("SWEETSHOP_DATA_DIR")
        return Settings(
            data_dir=Path(data_dir) if data_dir else _DEFAULT_DATA_DIR,
            log_level=env.get("SWEETSHOP_LOG_LEVEL", "WARNING").upper(),
        )
