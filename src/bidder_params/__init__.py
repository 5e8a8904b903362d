"""bidder_params: validate OpenRTB per-bidder ``imp.ext`` params with JSON Schema."""
from .errors import (
    BidderParamsError,
    MalformedSchemaError,
    MissingSchemaError,
    NoSchemaError,
    ParamValidationError,
    SchemaDirectoryError,
    SchemaLoadError,
    SchemaReadError,
    UnknownPartnerError,
    UnknownPartnerSchemaError,
)
from .partners import PARTNER_NAME_GENERAL, PARTNER_TOKENS, PartnerName, PartnerRegistry, default_registry
from .settings import Settings
from .validator import ParamValidator, new_param_validator, validator_from_settings

__version__ = "2026.0.1"
