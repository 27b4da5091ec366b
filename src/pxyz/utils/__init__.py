"""Adapter utilities."""

from .constants import BIDDER_CODE, ENDPOINT_URL, USER_SYNC_URL
from .user_agent import ParsedUserAgent, extract_os, parse_user_agent

__all__ = [
    'BIDDER_CODE',
    'ENDPOINT_URL',
    'USER_SYNC_URL',
    'ParsedUserAgent',
    'extract_os',
    'parse_user_agent',
]
