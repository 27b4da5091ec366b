"""
OpenRTB wire models for the Playground XYZ endpoint.

Only the objects the partner reads or returns are modelled. Optional
objects are left out of the serialized payload entirely when unset.

Reference: https://github.com/InteractiveAdvertisingBureau/openrtb2.x
"""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class Format:
    """Banner size (OpenRTB 3.2.10)."""

    w: int
    h: int

    def to_dict(self) -> dict[str, Any]:
        return {"w": self.w, "h": self.h}


@dataclass
class Banner:
    """
    Banner object (OpenRTB 3.2.6).

    w/h carry the preferred size, format lists every acceptable size.
    """

    w: int
    h: int
    format: list[Format] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "w": self.w,
            "h": self.h,
            "format": [f.to_dict() for f in self.format],
        }


@dataclass
class Imp:
    """Impression object (OpenRTB 3.2.4), one per ad slot."""

    id: str
    banner: Optional[Banner] = None
    ext: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"id": self.id}
        if self.banner is not None:
            result["banner"] = self.banner.to_dict()
        result["ext"] = self.ext
        return result


@dataclass
class Site:
    """Site object (OpenRTB 3.2.13)."""

    domain: str
    name: str
    page: str

    def to_dict(self) -> dict[str, Any]:
        return {"domain": self.domain, "name": self.name, "page": self.page}


@dataclass
class Device:
    """Device object (OpenRTB 3.2.18)."""

    ua: str
    devicetype: int
    language: Optional[str] = None
    os: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"ua": self.ua, "devicetype": self.devicetype}
        if self.language:
            result["language"] = self.language
        if self.os:
            result["os"] = self.os
        return result


@dataclass
class WirePayload:
    """
    Batched bid request sent to the partner.

    user and regs are only serialized when consent info was supplied.
    """

    id: str
    imp: list[Imp] = field(default_factory=list)
    site: Optional[Site] = None
    device: Optional[Device] = None
    user_ext: Optional[dict[str, Any]] = None
    regs_ext: Optional[dict[str, Any]] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON-ready OpenRTB dictionary."""
        result: dict[str, Any] = {
            "id": self.id,
            "imp": [imp.to_dict() for imp in self.imp],
        }
        if self.site is not None:
            result["site"] = self.site.to_dict()
        if self.device is not None:
            result["device"] = self.device.to_dict()
        if self.user_ext is not None:
            result["user"] = {"ext": self.user_ext}
        if self.regs_ext is not None:
            result["regs"] = {"ext": self.regs_ext}
        return result


@dataclass
class WireBid:
    """Bid object (OpenRTB 4.2.3) as returned by the partner."""

    impid: str
    price: Any
    adm: Optional[str] = None
    adid: Optional[str] = None
    crid: Optional[str] = None
    w: Optional[int] = None
    h: Optional[int] = None

    @property
    def creative_id(self) -> Optional[str]:
        return self.adid if self.adid is not None else self.crid

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "WireBid":
        """Create from dictionary."""
        return cls(
            impid=data.get("impid", ""),
            price=data.get("price"),
            adm=data.get("adm"),
            adid=data.get("adid"),
            crid=data.get("crid"),
            w=data.get("w"),
            h=data.get("h"),
        )


@dataclass
class SeatBid:
    """Seat bid object (OpenRTB 4.2.2)."""

    seat: Optional[str] = None
    bid: list[WireBid] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SeatBid":
        """Create from dictionary, skipping bid entries that are not objects."""
        bids = data.get("bid")
        if not isinstance(bids, list):
            bids = []
        return cls(
            seat=data.get("seat"),
            bid=[WireBid.from_dict(b) for b in bids if isinstance(b, dict)],
        )


@dataclass
class WireResponse:
    """Bid response object (OpenRTB 4.2.1)."""

    id: Optional[str] = None
    seatbid: list[SeatBid] = field(default_factory=list)
    cur: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "WireResponse":
        """Create from dictionary. Callers check seatbid is a list first."""
        return cls(
            id=data.get("id"),
            seatbid=[
                SeatBid.from_dict(s)
                for s in data.get("seatbid", [])
                if isinstance(s, dict)
            ],
            cur=data.get("cur"),
        )
