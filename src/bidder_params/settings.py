from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

STATIC_SCHEMA_DIR = Path(__file__).resolve().parent / "static" / "bidder-params"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    schema_dir: Path = STATIC_SCHEMA_DIR
    schema_ext: str = ".json"
    strict: bool = False

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        if env is None:
            env = os.environ
        ext = env.get("BIDDER_PARAMS_SCHEMA_EXT", ".json").strip() or ".json"
        if not ext.startswith("."):
            ext = "." + ext
        return cls(
            schema_dir=Path(env.get("BIDDER_PARAMS_SCHEMA_DIR", str(STATIC_SCHEMA_DIR))),
            schema_ext=ext,
            strict=env.get("BIDDER_PARAMS_STRICT", "").strip().lower() in _TRUTHY,
        )
