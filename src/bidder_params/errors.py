from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:
    from .models.binding import Violation


class BidderParamsError(Exception):
    """Base class for every error raised by bidder_params."""


# startup: any of these means the process must not serve traffic
class SchemaLoadError(BidderParamsError):
    pass


class SchemaDirectoryError(SchemaLoadError):
    pass


class UnknownPartnerSchemaError(SchemaLoadError):
    pass


class MalformedSchemaError(SchemaLoadError):
    pass


class SchemaReadError(SchemaLoadError):
    pass


class MissingSchemaError(SchemaLoadError):
    def __init__(self, missing: Tuple[str, ...]):
        self.missing = missing
        super().__init__(f"No JSON schema found for registered partners: {', '.join(missing)}")


# request time
class NoSchemaError(BidderParamsError, LookupError):
    def __init__(self, partner: str):
        self.partner = partner
        super().__init__(f"no schema registered for partner {partner!r}")


class UnknownPartnerError(BidderParamsError, LookupError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"{token!r} is not a known partner")


class ParamValidationError(BidderParamsError, ValueError):
    """The payload parsed but does not satisfy the partner's schema.

    str(err) is the concatenation of every violation description, in the
    order jsonschema reported them. ``violations`` keeps them individually.
    """

    def __init__(self, partner: str, violations: Tuple["Violation", ...]):
        self.partner = partner
        self.violations = violations
        super().__init__("; ".join(v.describe() for v in violations))
