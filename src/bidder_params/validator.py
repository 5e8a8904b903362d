"""Per-partner JSON Schema validation of OpenRTB ``imp[i].ext.<partner>`` params.

Schemas are read once from a flat directory of ``<partner>.json`` files and
compiled with jsonschema. The resulting ParamValidator only reads its two
lookup tables, so one instance can be shared by any number of threads.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from jsonschema import Draft4Validator
from jsonschema.exceptions import SchemaError
from jsonschema.validators import validator_for

from .errors import (
    MalformedSchemaError,
    MissingSchemaError,
    NoSchemaError,
    ParamValidationError,
    SchemaDirectoryError,
    SchemaLoadError,
    SchemaReadError,
    UnknownPartnerSchemaError,
)
from .metrics import SCHEMAS_LOADED, mark_failure
from .models import SchemaBinding, Violation
from .partners import PartnerName, PartnerRegistry, default_registry
from .settings import Settings
from .utils.hashing import sha256_hex

logger = logging.getLogger(__name__)

RawJSON = Union[bytes, bytearray, str]


class ParamValidator:
    """Enforces bid request ``imp[i].ext.<partner>`` values.

    Build it with :func:`new_param_validator`; the constructor trusts that the
    bindings it gets are complete and already compiled.
    """

    def __init__(self, bindings: Mapping[PartnerName, SchemaBinding]):
        self._bindings: Mapping[PartnerName, SchemaBinding] = MappingProxyType(dict(bindings))
        self._schema_contents: Mapping[str, str] = MappingProxyType(
            {name: b.raw_text for name, b in bindings.items()}
        )
        self._parsed_schemas: Mapping[str, Any] = MappingProxyType(
            {name: b.compiled for name, b in bindings.items()}
        )

    def validate(self, partner: str, ext: RawJSON) -> None:
        """Validate raw ``ext`` JSON against the partner's schema.

        Raises:
            NoSchemaError: no schema was bound for ``partner``
            json.JSONDecodeError: ``ext`` is not valid UTF-8 JSON (NaN and Infinity
                are rejected too)
            ParamValidationError: ``ext`` violates the schema
        """
        compiled = self._parsed_schemas.get(partner)
        if compiled is None:
            raise NoSchemaError(partner)

        payload = _decode_payload(ext)

        violations = tuple(
            Violation(path=err.json_path, message=err.message, validator=str(err.validator))
            for err in compiled.iter_errors(payload)
        )
        if violations:
            raise ParamValidationError(partner, violations)

    def schema(self, partner: str) -> str:
        """Raw source of the schema used for ``partner``, or "" if none is bound."""
        return self._schema_contents.get(partner, "")

    def source_path(self, partner: str) -> str:
        binding = self._bindings.get(partner)
        return binding.path if binding is not None else ""

    def partners(self) -> List[PartnerName]:
        return list(self._bindings)

    def schemas(self) -> Dict[str, str]:
        return dict(self._schema_contents)

    def fingerprint(self, partner: str) -> str:
        raw = self._schema_contents.get(partner)
        return sha256_hex(raw) if raw is not None else ""

    def missing(self, registry: PartnerRegistry) -> List[PartnerName]:
        return sorted(name for name in registry if name not in self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)

    def __repr__(self) -> str:
        return f"ParamValidator({len(self._bindings)} schemas)"


def _reject_constant(doc: str):
    def _raise(name: str) -> Any:
        raise json.JSONDecodeError(f"{name} is not valid JSON", doc, max(doc.find(name), 0))

    return _raise


def _decode_payload(ext: RawJSON) -> Any:
    if isinstance(ext, (bytes, bytearray)):
        try:
            ext = bytes(ext).decode("utf-8")
        except UnicodeDecodeError as e:
            doc = bytes(ext).decode("utf-8", "replace")
            raise json.JSONDecodeError(f"payload is not valid UTF-8: {e.reason}", doc, min(e.start, len(doc))) from e
    # NaN and Infinity are Python extensions, not JSON
    return json.loads(ext, parse_constant=_reject_constant(ext))


def _compile(path: Path, raw: str) -> Any:
    try:
        schema = json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedSchemaError(f"Failed to load json schema at {path}: {e}") from e

    if not isinstance(schema, (dict, bool)):
        raise MalformedSchemaError(
            f"Failed to load json schema at {path}: expected an object, got {type(schema).__name__}"
        )

    cls = validator_for(schema, default=Draft4Validator)
    try:
        cls.check_schema(schema)
    except SchemaError as e:
        raise MalformedSchemaError(f"Failed to load json schema at {path}: {e.message}") from e
    return cls(schema, format_checker=cls.FORMAT_CHECKER)


def _load_bindings(
    schema_dir: Path, registry: PartnerRegistry, extension: str
) -> Dict[PartnerName, SchemaBinding]:
    try:
        entries = sorted(schema_dir.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise SchemaDirectoryError(f"Failed to read JSON schemas from directory {schema_dir}. {e}") from e

    bindings: Dict[PartnerName, SchemaBinding] = {}
    for entry in entries:
        token = entry.name[: -len(extension)] if extension and entry.name.endswith(extension) else entry.name
        name = registry.lookup(token)
        if name is None:
            raise UnknownPartnerSchemaError(
                f"File {schema_dir}/{entry.name} does not match a valid partner name."
            )

        path = entry.resolve()
        try:
            raw = path.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SchemaReadError(f"Failed to read file {path}: {e}") from e

        bindings[name] = SchemaBinding(partner=name, path=str(path), raw_text=raw, compiled=_compile(path, raw))
        logger.debug("bound schema %s -> %s", name, path)
    return bindings


def new_param_validator(
    schema_dir: Union[str, Path],
    registry: Optional[PartnerRegistry] = None,
    *,
    extension: str = ".json",
    strict: bool = False,
) -> ParamValidator:
    """Load every schema in ``schema_dir`` and bind it to its partner.

    All-or-nothing: the first unreadable directory, unknown ``<token>.json``
    or malformed schema raises a SchemaLoadError and nothing is returned.
    Registered partners with no schema file are allowed unless ``strict``.
    """
    if registry is None:
        registry = default_registry()
    schema_dir = Path(schema_dir)

    try:
        bindings = _load_bindings(schema_dir, registry, extension)
        missing: Tuple[str, ...] = tuple(sorted(name for name in registry if name not in bindings))
        if missing and strict:
            raise MissingSchemaError(missing)
    except SchemaLoadError as e:
        mark_failure(type(e).__name__)
        logger.error("bidder param schemas from %s rejected: %s", schema_dir, e)
        raise

    if missing:
        logger.info("%d registered partners have no schema in %s", len(missing), schema_dir)
    logger.info("loaded %d bidder param schemas from %s", len(bindings), schema_dir)
    SCHEMAS_LOADED.set(len(bindings))
    return ParamValidator(bindings)


def validator_from_settings(
    settings: Optional[Settings] = None, registry: Optional[PartnerRegistry] = None
) -> ParamValidator:
    if settings is None:
        settings = Settings.from_env()
    return new_param_validator(
        settings.schema_dir, registry, extension=settings.schema_ext, strict=settings.strict
    )
