"""Data models for the Playground XYZ adapter."""

from .bid import (
    HttpRequestDescriptor,
    MediaType,
    NormalizedBid,
    ServerResponse,
    SyncOptions,
    SyncPixel,
    SyncType,
)
from .bid_request import AuctionContext, BidParams, BidRequest, normalize_sizes
from .openrtb import (
    Banner,
    Device,
    Format,
    Imp,
    SeatBid,
    Site,
    WireBid,
    WirePayload,
    WireResponse,
)

__all__ = [
    'AuctionContext',
    'Banner',
    'BidParams',
    'BidRequest',
    'Device',
    'Format',
    'HttpRequestDescriptor',
    'Imp',
    'MediaType',
    'NormalizedBid',
    'SeatBid',
    'ServerResponse',
    'Site',
    'SyncOptions',
    'SyncPixel',
    'SyncType',
    'WireBid',
    'WirePayload',
    'WireResponse',
    'normalize_sizes',
]
