"""
Playground XYZ Bid Adapter

Maps host bid requests to the partner's OpenRTB endpoint and maps the
partner's response back to normalized bids.

Usage:
    from src.pxyz.adapter import spec

    valid = [b for b in bid_requests if spec.is_bid_request_valid(b)]
    request = spec.build_requests(valid, bidder_request)
    # host performs the HTTP call
    bids = spec.interpret_response({"body": response_json}, request)
"""

from .builder import build_requests
from .interpreter import interpret_response
from .spec import BidderSpec, get_user_syncs, is_bid_request_valid, spec

__all__ = [
    "BidderSpec",
    "build_requests",
    "get_user_syncs",
    "interpret_response",
    "is_bid_request_valid",
    "spec",
]
