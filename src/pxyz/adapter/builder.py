"""
Request builder - maps host bid requests to one batched OpenRTB POST.
"""

import json
import re
from typing import Any, Iterable, Optional, Union
from urllib.parse import urlparse

from ..config import AdapterSettings, get_settings
from ..logging import LogContext, bidder_logger
from ..models import (
    AuctionContext,
    Banner,
    BidRequest,
    Device,
    Format,
    HttpRequestDescriptor,
    Imp,
    Site,
    WirePayload,
)
from ..utils.constants import (
    ADAPTER_VENDOR,
    BIDDER_CODE,
    GENERIC_EXT_NAMESPACE,
    PARTNER_EXT_NAMESPACE,
)
from ..utils.user_agent import parse_user_agent

BidRequestLike = Union[BidRequest, dict[str, Any]]
AuctionContextLike = Union[AuctionContext, dict[str, Any], None]

# parseInt-style prefix: optional whitespace, sign, digits
LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")

logger = bidder_logger(BIDDER_CODE)


def build_requests(
    bid_requests: Iterable[BidRequestLike],
    bidder_request: AuctionContextLike = None,
    settings: Optional[AdapterSettings] = None,
) -> Optional[HttpRequestDescriptor]:
    """
    Build the single POST request carrying every impression.

    Args:
        bid_requests: Valid bid requests for this bidder
        bidder_request: Batch context (consent, referer, user agent)
        settings: Adapter settings (uses global if not provided)

    Returns:
        HttpRequestDescriptor, or None when there is nothing to bid on
    """
    settings = settings or get_settings()
    requests = [_coerce_bid_request(b) for b in bid_requests]
    if not requests:
        logger.debug("No bid requests to send")
        return None

    context = _coerce_context(bidder_request)

    with LogContext(auction_id=requests[0].auction_id or None):
        payload = build_payload(requests, context, settings)
        logger.debug(
            "Built bid request",
            imp_count=len(payload.imp),
            has_consent=context.gdpr_consent is not None,
        )

    return HttpRequestDescriptor(
        url=settings.endpoint_url,
        data=json.dumps(payload.to_dict()),
        bidder_request=context,
    )


def build_payload(
    requests: list[BidRequest],
    context: AuctionContext,
    settings: AdapterSettings,
) -> WirePayload:
    """Assemble the OpenRTB payload for a non-empty list of bid requests."""
    payload = WirePayload(
        id=requests[0].auction_id,
        imp=[map_impression(r, settings) for r in requests],
        site=map_site(context.referer),
        device=map_device(context.user_agent, context.language),
    )

    consent = context.gdpr_consent
    if consent is not None:
        payload.user_ext = consent.to_user_ext()
        payload.regs_ext = consent.to_regs_ext()

    return payload


def map_impression(request: BidRequest, settings: AdapterSettings) -> Imp:
    """Map one bid request to an OpenRTB impression."""
    generic_ext: dict[str, Any] = {}
    placement_id = _parse_placement_id(request.params.placement_id)
    if placement_id is not None:
        generic_ext["placement_id"] = placement_id

    return Imp(
        id=request.bid_id,
        banner=map_banner(request.sizes),
        ext={
            GENERIC_EXT_NAMESPACE: generic_ext,
            PARTNER_EXT_NAMESPACE: {
                "adapter": {
                    "vendor": ADAPTER_VENDOR,
                    "prebid": settings.adapter_version,
                }
            },
        },
    )


def map_banner(sizes: list[tuple[int, int]]) -> Optional[Banner]:
    """First size becomes banner w/h, all sizes go into format."""
    if not sizes:
        return None
    formats = [Format(w=w, h=h) for w, h in sizes]
    return Banner(w=formats[0].w, h=formats[0].h, format=formats)


def map_site(referer: Optional[str]) -> Optional[Site]:
    """Derive the site object from the page URL."""
    if not referer:
        return None
    parsed = urlparse(referer)
    if not parsed.scheme or not parsed.hostname:
        return None
    return Site(
        domain=f"{parsed.scheme}://{parsed.hostname}",
        name=parsed.hostname,
        page=referer,
    )


def map_device(user_agent: Optional[str], language: Optional[str]) -> Optional[Device]:
    """Derive the device object from the browser user agent."""
    if not user_agent:
        return None
    parsed = parse_user_agent(user_agent)
    return Device(
        ua=user_agent,
        devicetype=parsed.openrtb_device_type,
        language=language,
        os=parsed.os if parsed.os != "unknown" else None,
    )


def _parse_placement_id(value: Any) -> Any:
    """
    Placement ids are sent as integers parsed from their leading digits
    ("10433394abc" -> 10433394). Values without leading digits are sent
    as given.
    """
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        return value
    match = LEADING_INT_RE.match(str(value))
    if match:
        return int(match.group(1), 10)
    return value


def _coerce_bid_request(bid: BidRequestLike) -> BidRequest:
    if isinstance(bid, BidRequest):
        return bid
    return BidRequest.from_dict(bid)


def _coerce_context(context: AuctionContextLike) -> AuctionContext:
    if isinstance(context, AuctionContext):
        return context
    return AuctionContext.from_dict(context)
