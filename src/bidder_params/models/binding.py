from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..partners import PartnerName


@dataclass(frozen=True)
class SchemaBinding:
    partner: PartnerName
    path: str  # absolute path of the source file
    raw_text: str
    compiled: Any  # jsonschema validator instance, read-only after load


@dataclass(frozen=True)
class Violation:
    path: str  # JSON path into the payload, "$" for the root
    message: str
    validator: str  # failing keyword: "type", "required", ...

    def describe(self) -> str:
        return f"{self.path}: {self.message}"
