"""
Playground XYZ bidder spec.

Bundles the four adapter operations the host framework registers under
the playgroundxyz bidder code.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Union

from ..config import AdapterSettings, get_settings
from ..logging import bidder_logger
from ..models import BidParams, BidRequest, SyncOptions, SyncPixel, SyncType
from ..utils.constants import BIDDER_CODE, SUPPORTED_MEDIA_TYPES
from .builder import build_requests
from .interpreter import interpret_response

logger = bidder_logger(BIDDER_CODE)


def is_bid_request_valid(bid: Union[BidRequest, dict[str, Any], None]) -> bool:
    """
    Check a bid request carries a placement id (or a legacy publisher id).

    Zero, empty and missing ids are rejected. Never raises.
    """
    if isinstance(bid, BidRequest):
        params = bid.params
    elif isinstance(bid, dict):
        params = BidParams.from_dict(bid.get("params"))
    else:
        return False

    valid = bool(params.placement_id or params.publisher_id)
    if not valid:
        logger.debug("Rejected bid request without placement id")
    return valid


def get_user_syncs(
    sync_options: Union[SyncOptions, dict[str, Any], None] = None,
    server_responses: Optional[list[Any]] = None,
    settings: Optional[AdapterSettings] = None,
) -> list[SyncPixel]:
    """
    Return the cookie-sync pixel.

    Always a single image pixel, whatever iframe_enabled says.
    """
    settings = settings or get_settings()
    return [SyncPixel(type=SyncType.IMAGE, url=settings.user_sync_url)]


@dataclass(frozen=True)
class BidderSpec:
    """
    Adapter contract consumed by the host framework.

    Attributes:
        code: Bidder code the adapter is registered under
        supported_media_types: Media types the partner can fill
        is_bid_request_valid: Param validator
        build_requests: Bid requests -> HTTP request descriptor
        interpret_response: HTTP response -> normalized bids
        get_user_syncs: Sync options -> sync pixels
    """
    code: str
    is_bid_request_valid: Callable[..., bool]
    build_requests: Callable[..., Any]
    interpret_response: Callable[..., list]
    get_user_syncs: Callable[..., list[SyncPixel]]
    supported_media_types: list[str] = field(default_factory=list)


spec = BidderSpec(
    code=BIDDER_CODE,
    supported_media_types=list(SUPPORTED_MEDIA_TYPES),
    is_bid_request_valid=is_bid_request_valid,
    build_requests=build_requests,
    interpret_response=interpret_response,
    get_user_syncs=get_user_syncs,
)
