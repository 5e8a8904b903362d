from __future__ import annotations

import json
import sys
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from bidder_params.errors import SchemaLoadError
from bidder_params.partners import default_registry
from bidder_params.validator import new_param_validator


@dataclass
class CheckResult:
    name: str
    ok: bool
    details: Dict[str, Any]


def _now_iso() -> str:
    return time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime())


def run_doctor(schema_dir: str, schema_ext: str, strict: bool, report_out: Optional[str] = None) -> int:
    registry = default_registry()
    checks: List[CheckResult] = []
    schemas: Dict[str, Dict[str, str]] = {}

    try:
        validator = new_param_validator(schema_dir, registry, extension=schema_ext)
    except SchemaLoadError as e:
        checks.append(CheckResult("schemas_load", False, {"error": str(e), "kind": type(e).__name__}))
        validator = None

    if validator is not None:
        checks.append(CheckResult("schemas_load", True, {"bound": len(validator)}))
        missing = validator.missing(registry)
        checks.append(
            CheckResult(
                "registry_coverage",
                not (strict and missing),
                {"registered": len(registry), "bound": len(validator), "missing": list(missing)},
            )
        )
        schemas = {
            name: {"path": validator.source_path(name), "sha256": validator.fingerprint(name)}
            for name in sorted(validator.partners())
        }

    ok_all = all(c.ok for c in checks)
    report = {
        "summary": {"timestamp_utc": _now_iso(), "schema_dir": schema_dir, "strict": strict, "ok": ok_all},
        "checks": [{"name": c.name, "ok": c.ok, "details": c.details} for c in checks],
        "schemas": schemas,
    }
    blob = json.dumps(report, indent=2, ensure_ascii=False)
    if report_out:
        with open(report_out, "w", encoding="utf-8") as f:
            f.write(blob)
    sys.stdout.write(blob + "\n")
    return 0 if ok_all else 1
