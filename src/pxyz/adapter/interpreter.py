"""
Response interpreter - flattens the partner's OpenRTB response into
normalized bids.

Nothing in here raises on bad partner data. A missing body, an error
body or a malformed seatbid all come back as an empty bid list.
"""

import json
import math
from typing import Any, Optional

from ..config import AdapterSettings, get_settings
from ..logging import LogContext, bidder_logger
from ..models import (
    AuctionContext,
    HttpRequestDescriptor,
    MediaType,
    NormalizedBid,
    ServerResponse,
    WireBid,
    WireResponse,
)
from ..utils.constants import BIDDER_CODE

logger = bidder_logger(BIDDER_CODE)


def interpret_response(
    server_response: Any,
    request: Any = None,
    settings: Optional[AdapterSettings] = None,
) -> list[NormalizedBid]:
    """
    Translate the partner response into normalized bids.

    At most one bid is returned per impression that was sent: bids for
    unknown impressions are dropped and, for duplicates, the highest
    price wins.

    Args:
        server_response: ServerResponse, or a dict with a "body" key
        request: The request descriptor (or {"bidderRequest": ...}) the
                 response answers
        settings: Adapter settings (uses global if not provided)

    Returns:
        List of NormalizedBid, possibly empty
    """
    settings = settings or get_settings()
    sent = _sent_payload(request)

    with LogContext(auction_id=sent.get("id") or None):
        return _interpret(server_response, request, sent, settings)


def _interpret(
    server_response: Any,
    request: Any,
    sent: dict[str, Any],
    settings: AdapterSettings,
) -> list[NormalizedBid]:
    bidder_code = _bidder_code(request)
    body = _extract_body(server_response)

    if not body or not isinstance(body, dict) or body.get("error"):
        message = f"in response for {bidder_code} adapter"
        if isinstance(body, dict) and body.get("error"):
            message += f": {body['error']}"
        logger.error(message)
        return []

    if not isinstance(body.get("seatbid"), list):
        logger.error(f"in response for {bidder_code} adapter Malformed seatbid response")
        return []

    response = WireResponse.from_dict(body)
    currency = response.cur or settings.default_currency
    imp_ids = _sent_imp_ids(sent)

    # impid -> best bid, in order of first appearance
    best: dict[str, NormalizedBid] = {}
    for seat in response.seatbid:
        for wire_bid in seat.bid:
            cpm = _parse_price(wire_bid.price)
            if cpm is None:
                logger.debug(
                    "Skipping bid without a usable price",
                    impid=wire_bid.impid,
                    price=wire_bid.price,
                )
                continue
            if imp_ids is not None and wire_bid.impid not in imp_ids:
                logger.warning("Skipping bid for unknown impression", impid=wire_bid.impid)
                continue
            current = best.get(wire_bid.impid)
            if current is not None:
                logger.debug("Duplicate bid for impression", impid=wire_bid.impid)
                if current.cpm >= cpm:
                    continue
            best[wire_bid.impid] = new_bid(wire_bid, cpm, currency, settings)

    bids = list(best.values())
    logger.debug("Interpreted bid response", bid_count=len(bids))
    return bids


def new_bid(
    wire_bid: WireBid,
    cpm: float,
    currency: str,
    settings: AdapterSettings,
) -> NormalizedBid:
    """Map one partner bid to the host's bid shape."""
    return NormalizedBid(
        request_id=wire_bid.impid,
        cpm=cpm,
        creative_id=wire_bid.creative_id,
        width=wire_bid.w,
        height=wire_bid.h,
        ad=wire_bid.adm,
        currency=currency,
        media_type=MediaType.BANNER,
        ttl=settings.ttl,
        net_revenue=settings.net_revenue,
    )


def _parse_price(price: Any) -> Optional[float]:
    """Positive finite price, or None for no-bid."""
    if price is None or isinstance(price, bool):
        return None
    try:
        value = float(price)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def _extract_body(server_response: Any) -> Any:
    if server_response is None:
        return None
    if isinstance(server_response, ServerResponse):
        body = server_response.body
    elif isinstance(server_response, dict):
        body = server_response.get("body")
    else:
        body = getattr(server_response, "body", None)

    if isinstance(body, (str, bytes)):
        if not body:
            return None
        try:
            return json.loads(body)
        except ValueError:
            logger.warning("Response body is not valid JSON")
            return None
    return body


def _bidder_code(request: Any) -> str:
    context = None
    if isinstance(request, HttpRequestDescriptor):
        context = request.bidder_request
    elif isinstance(request, dict):
        context = request.get("bidderRequest")

    if isinstance(context, AuctionContext):
        return context.bidder_code or BIDDER_CODE
    if isinstance(context, dict):
        return context.get("bidderCode") or BIDDER_CODE
    return BIDDER_CODE


def _sent_payload(request: Any) -> dict[str, Any]:
    """Decode the OpenRTB payload the request descriptor carried, if any."""
    if isinstance(request, HttpRequestDescriptor):
        data = request.data
    elif isinstance(request, dict):
        data = request.get("data")
    else:
        return {}

    if isinstance(data, dict):
        return data
    if not isinstance(data, (str, bytes)) or not data:
        return {}
    try:
        payload = json.loads(data)
    except ValueError:
        logger.warning("Request descriptor data is not valid JSON")
        return {}
    return payload if isinstance(payload, dict) else {}


def _sent_imp_ids(sent: dict[str, Any]) -> Optional[set[str]]:
    """Impression ids that were sent, or None when the request is unknown."""
    imps = sent.get("imp")
    if not isinstance(imps, list):
        return None
    return {imp.get("id") for imp in imps if isinstance(imp, dict)}
