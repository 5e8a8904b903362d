from __future__ import annotations

import json
from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Iterator, List, Mapping, Optional

from .errors import UnknownPartnerError

# Reserved for messages that are not tied to one partner when a map is keyed
# on partner name. Never a valid partner.
PARTNER_NAME_GENERAL = "general"

# Bidder codes must match the Prebid.js adapter codes.
PARTNER_TOKENS = (
    "33across",
    "adform",
    "adgeneration",
    "adkernel",
    "adkernelAdn",
    "admixer",
    "adocean",
    "adpone",
    "adtelligent",
    "advangelists",
    "aja",
    "applogy",
    "appnexus",
    "adoppler",
    "beachfront",
    "beintoo",
    "brightroll",
    "consumable",
    "conversant",
    "cpmstar",
    "datablocks",
    "emx_digital",
    "engagebdr",
    "eplanning",
    "audienceNetwork",
    "gamma",
    "gamoshi",
    "grid",
    "gumgum",
    "improvedigital",
    "ix",
    "kidoz",
    "kubient",
    "lifestreet",
    "lockerdome",
    "lunamedia",
    "marsmedia",
    "mgid",
    "nanointeractive",
    "ninthdecimal",
    "openx",
    "orbidder",
    "pubmatic",
    "pubnative",
    "pulsepoint",
    "rhythmone",
    "rtbhouse",
    "rubicon",
    "sharethrough",
    "smartrtb",
    "somoaudience",
    "sonobi",
    "sovrn",
    "synacormedia",
    "tappx",
    "telaria",
    "triplelift",
    "triplelift_native",
    "ucfunnel",
    "unruly",
    "valueimpression",
    "verizonmedia",
    "visx",
    "vrtcal",
    "yeahmobi",
    "yieldmo",
    "yieldone",
    "zeroclickfraud",
)


class PartnerName(str):
    """A partner (bidder) code. Serializes as its bare token."""

    __slots__ = ()

    def to_json(self) -> str:
        return json.dumps(str(self))

    @classmethod
    def from_json(cls, text: str, registry: "PartnerRegistry") -> "PartnerName":
        token = json.loads(text)
        if not isinstance(token, str):
            raise UnknownPartnerError(repr(token))
        name = registry.lookup(token)
        if name is None:
            raise UnknownPartnerError(token)
        return name


class PartnerRegistry:
    """Closed, read-only set of partner names keyed by their token."""

    def __init__(self, tokens: Iterable[str]):
        table = {}
        for tok in tokens:
            if tok == PARTNER_NAME_GENERAL:
                raise ValueError(f"{PARTNER_NAME_GENERAL!r} is reserved and cannot be a partner")
            if not tok:
                raise ValueError("partner token must be non-empty")
            if tok in table:
                raise ValueError(f"duplicate partner token {tok!r}")
            table[tok] = PartnerName(tok)
        self._names: Mapping[str, PartnerName] = MappingProxyType(table)

    def lookup(self, token: str) -> Optional[PartnerName]:
        return self._names.get(token)

    def all(self) -> List[PartnerName]:
        # unordered by contract
        return list(self._names.values())

    def __contains__(self, token: object) -> bool:
        return token in self._names

    def __iter__(self) -> Iterator[PartnerName]:
        return iter(self._names.values())

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"PartnerRegistry({len(self._names)} partners)"


@lru_cache(maxsize=1)
def default_registry() -> PartnerRegistry:
    return PartnerRegistry(PARTNER_TOKENS)
