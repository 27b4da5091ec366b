"""
Playground XYZ bid adapter for header-bidding auctions.

Builds the partner's OpenRTB request from page ad slots, interprets its
response into normalized bids, and reports the cookie-sync pixel.
"""

from .adapter import (
    BidderSpec,
    build_requests,
    get_user_syncs,
    interpret_response,
    is_bid_request_valid,
    spec,
)
from .models import (
    AuctionContext,
    BidRequest,
    HttpRequestDescriptor,
    NormalizedBid,
    SyncOptions,
    SyncPixel,
)
from .privacy import GdprConsent

__version__ = '1.0.0'

__all__ = [
    'AuctionContext',
    'BidRequest',
    'BidderSpec',
    'GdprConsent',
    'HttpRequestDescriptor',
    'NormalizedBid',
    'SyncOptions',
    'SyncPixel',
    'build_requests',
    'get_user_syncs',
    'interpret_response',
    'is_bid_request_valid',
    'spec',
]
