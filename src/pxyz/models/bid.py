"""
Adapter output models returned to the host framework.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from ..utils.constants import DEFAULT_TTL, NET_REVENUE


class MediaType(str, Enum):
    """Media types the host framework understands."""

    BANNER = "banner"
    VIDEO = "video"
    NATIVE = "native"


class SyncType(str, Enum):
    """User-sync pixel types."""

    IMAGE = "image"
    IFRAME = "iframe"


@dataclass
class NormalizedBid:
    """
    A bid in the host framework's normalized shape.

    Attributes:
        request_id: Bid id of the ad slot this bid answers
        cpm: Bid price per mille
        creative_id: Partner creative id
        width: Creative width
        height: Creative height
        ad: Ad markup
        currency: ISO 4217 currency of cpm
        media_type: Always banner for this partner
        ttl: Seconds the bid stays valid
        net_revenue: Whether cpm is net of partner fees
    """

    request_id: str
    cpm: float
    creative_id: Any
    width: Optional[int]
    height: Optional[int]
    ad: Optional[str]
    currency: str
    media_type: MediaType = MediaType.BANNER
    ttl: int = DEFAULT_TTL
    net_revenue: bool = NET_REVENUE

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary using the host framework's keys."""
        return {
            "requestId": self.request_id,
            "cpm": self.cpm,
            "creativeId": self.creative_id,
            "width": self.width,
            "height": self.height,
            "ad": self.ad,
            "mediaType": self.media_type.value,
            "currency": self.currency,
            "ttl": self.ttl,
            "netRevenue": self.net_revenue,
        }


@dataclass
class HttpRequestDescriptor:
    """
    The HTTP call the host framework should make on the adapter's behalf.

    bidder_request is echoed back to interpret_response by the host.
    """

    url: str
    data: str
    method: str = "POST"
    bidder_request: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "method": self.method,
            "url": self.url,
            "data": self.data,
        }


@dataclass
class ServerResponse:
    """Raw partner response as handed back by the host; body may be None."""

    body: Any = None
    headers: dict[str, str] = field(default_factory=dict)


@dataclass
class SyncOptions:
    """User-sync capabilities the host allows for this auction."""

    iframe_enabled: bool = False
    pixel_enabled: bool = True

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "SyncOptions":
        """Create from the host's syncOptions object."""
        data = data or {}
        return cls(
            iframe_enabled=bool(data.get("iframeEnabled", False)),
            pixel_enabled=bool(data.get("pixelEnabled", True)),
        )


@dataclass
class SyncPixel:
    """A user-sync pixel to drop on the page."""

    type: SyncType
    url: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type.value, "url": self.url}
