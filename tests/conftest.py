from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict

import pytest


@pytest.fixture
def schema_dir(tmp_path: Path) -> Callable[..., Path]:
    """Write ``{filename: schema}`` into a fresh directory and return it.

    dict/bool values are dumped as JSON, str values are written verbatim.
    """

    def _make(files: Dict[str, Any]) -> Path:
        d = tmp_path / "bidder-params"
        d.mkdir(exist_ok=True)
        for name, body in files.items():
            text = body if isinstance(body, str) else json.dumps(body, indent=2)
            (d / name).write_bytes(text.encode("utf-8"))
        return d

    return _make


@pytest.fixture
def placement_schema() -> Dict[str, Any]:
    return {
        "$schema": "http://json-schema.org/draft-04/schema#",
        "type": "object",
        "properties": {"placementId": {"type": "integer"}},
        "required": ["placementId"],
    }
