"""
Host-side bid request models.

These mirror the objects the header-bidding framework hands to an adapter:
one BidRequest per ad unit and an AuctionContext (the host's "bidder
request") shared by the whole batch.
"""

import numbers
from dataclasses import dataclass, field
from typing import Any, Optional

from ..privacy.consent_models import GdprConsent

Size = tuple[int, int]


def _is_dimension(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def normalize_sizes(raw: Any) -> list[Size]:
    """
    Normalize a host size list to (w, h) tuples.

    Accepts [[300, 250], [300, 600]], a single flat [300, 250], or
    "300x250" strings. Unparseable entries are dropped.
    """
    if not raw:
        return []
    if (
        isinstance(raw, (list, tuple))
        and len(raw) == 2
        and all(_is_dimension(v) for v in raw)
    ):
        raw = [raw]

    sizes: list[Size] = []
    for entry in raw:
        if isinstance(entry, str) and "x" in entry:
            entry = entry.lower().split("x", 1)
        try:
            w, h = entry
            sizes.append((int(w), int(h)))
        except (TypeError, ValueError):
            continue
    return sizes


@dataclass
class BidParams:
    """
    Partner-specific bid params configured by the publisher.

    Attributes:
        placement_id: Playground XYZ (AppNexus) placement id
        publisher_id: Legacy publisher-level id
    """
    placement_id: Any = None
    publisher_id: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary using the host framework's keys."""
        result = {}
        if self.placement_id is not None:
            result["placementId"] = self.placement_id
        if self.publisher_id is not None:
            result["publisherId"] = self.publisher_id
        return result

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "BidParams":
        """Create from dictionary."""
        if not isinstance(data, dict):
            return cls()
        return cls(
            placement_id=data.get("placementId", data.get("placement_id")),
            publisher_id=data.get("publisherId", data.get("publisher_id")),
        )


@dataclass
class BidRequest:
    """
    A single ad slot to bid on.

    Attributes:
        bidder: Bidder code the request was routed to
        params: Partner-specific params
        ad_unit_code: Ad unit code on the page
        sizes: Candidate (w, h) sizes, first one preferred
        bid_id: Id echoed back as the bid's request id
        auction_id: Auction this slot belongs to
        bidder_request_id: Id of the batch sent to this bidder
    """
    params: BidParams = field(default_factory=BidParams)
    bidder: str = ""
    ad_unit_code: str = ""
    sizes: list[Size] = field(default_factory=list)
    bid_id: str = ""
    auction_id: str = ""
    bidder_request_id: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary using the host framework's keys."""
        return {
            "bidder": self.bidder,
            "params": self.params.to_dict(),
            "adUnitCode": self.ad_unit_code,
            "sizes": [list(size) for size in self.sizes],
            "bidId": self.bid_id,
            "auctionId": self.auction_id,
            "bidderRequestId": self.bidder_request_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BidRequest":
        """
        Create from the host's bid request object.

        Banner sizes from mediaTypes take precedence over the legacy sizes list.
        """
        banner = (data.get("mediaTypes") or {}).get("banner") or {}
        sizes = normalize_sizes(banner.get("sizes")) or normalize_sizes(
            data.get("sizes")
        )
        return cls(
            bidder=data.get("bidder", ""),
            params=BidParams.from_dict(data.get("params")),
            ad_unit_code=data.get("adUnitCode", ""),
            sizes=sizes,
            bid_id=data.get("bidId", ""),
            auction_id=data.get("auctionId", ""),
            bidder_request_id=data.get("bidderRequestId", ""),
        )


@dataclass
class AuctionContext:
    """
    Batch-level context the host passes alongside the bid requests.

    Attributes:
        bidder_code: Bidder code of the batch
        gdpr_consent: GDPR consent info, None when no CMP is on the page
        referer: Top-level page URL
        user_agent: Browser user agent
        language: Browser language
    """
    bidder_code: str = ""
    gdpr_consent: Optional[GdprConsent] = None
    referer: Optional[str] = None
    user_agent: Optional[str] = None
    language: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary using the host framework's keys."""
        result: dict[str, Any] = {"bidderCode": self.bidder_code}
        if self.gdpr_consent is not None:
            result["gdprConsent"] = self.gdpr_consent.to_dict()
        if self.referer:
            result["refererInfo"] = {"referer": self.referer}
        if self.user_agent:
            result["userAgent"] = self.user_agent
        if self.language:
            result["language"] = self.language
        return result

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "AuctionContext":
        """Create from the host's bidder request object."""
        if not data:
            return cls()
        referer_info = data.get("refererInfo") or {}
        return cls(
            bidder_code=data.get("bidderCode", ""),
            gdpr_consent=GdprConsent.from_dict(data.get("gdprConsent")),
            referer=referer_info.get("referer", data.get("referer")),
            user_agent=data.get("userAgent"),
            language=data.get("language"),
        )
