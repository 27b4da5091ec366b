"""User Agent parsing for OpenRTB device classification."""

import re
from dataclasses import dataclass

from .constants import (
    DEVICE_TYPE_CONNECTED_TV,
    DEVICE_TYPE_MOBILE,
    DEVICE_TYPE_PC,
)


@dataclass
class ParsedUserAgent:
    """Parsed user agent information."""

    os: str
    os_version: str | None
    device_type: str
    is_mobile: bool
    is_tablet: bool
    is_connected_tv: bool

    @property
    def openrtb_device_type(self) -> int:
        """OpenRTB devicetype: 1 mobile/tablet, 3 connected TV, 2 everything else."""
        if self.is_mobile or self.is_tablet:
            return DEVICE_TYPE_MOBILE
        if self.is_connected_tv:
            return DEVICE_TYPE_CONNECTED_TV
        return DEVICE_TYPE_PC


# OS detection patterns (order matters - more specific first)
OS_PATTERNS: list[tuple[str, re.Pattern]] = [
    ("ios", re.compile(r"(?:iPhone|iPad|iPod).*OS (\d+[_\.]\d+)", re.I)),
    ("android", re.compile(r"Android (\d+\.?\d*)", re.I)),
    ("tizen", re.compile(r"Tizen (\d+\.\d+)", re.I)),
    ("webos", re.compile(r"Web0S|webOS", re.I)),
    ("windows", re.compile(r"Windows NT (\d+\.\d+)", re.I)),
    ("macos", re.compile(r"Mac OS X (\d+[_\.]\d+)", re.I)),
    ("linux", re.compile(r"Linux", re.I)),
    ("chromeos", re.compile(r"CrOS", re.I)),
]

MOBILE_PATTERNS: list[re.Pattern] = [
    re.compile(r"Mobile|Android|iPhone|iPod|BlackBerry|IEMobile|Opera Mini", re.I),
]

TABLET_PATTERNS: list[re.Pattern] = [
    re.compile(r"iPad|Android(?!.*Mobile)|Tablet", re.I),
]

CONNECTED_TV_PATTERNS: list[re.Pattern] = [
    re.compile(
        r"SmartTV|SMART-TV|Smart TV|HbbTV|AppleTV|GoogleTV|CrKey|Roku|"
        r"BRAVIA|NetCast|Web0S|Tizen.*TV|PhilipsTV|Viera",
        re.I,
    ),
    # Amazon Fire TV model codes (AFTB, AFTMM, ...)
    re.compile(r"\bAFT[A-Z]"),
]


def parse_user_agent(ua_string: str) -> ParsedUserAgent:
    """
    Parse a user agent string to extract OS and device info.

    Args:
        ua_string: The user agent string to parse

    Returns:
        ParsedUserAgent with extracted information
    """
    if not ua_string:
        return ParsedUserAgent(
            os="unknown",
            os_version=None,
            device_type="unknown",
            is_mobile=False,
            is_tablet=False,
            is_connected_tv=False,
        )

    os_name, os_version = extract_os(ua_string)
    is_connected_tv = _matches(ua_string, CONNECTED_TV_PATTERNS)
    # TV platforms often carry "Android" or "Linux" tokens
    is_tablet = not is_connected_tv and _matches(ua_string, TABLET_PATTERNS)
    is_mobile = not is_connected_tv and _matches(ua_string, MOBILE_PATTERNS)

    if is_connected_tv:
        device_type = "ctv"
    elif is_tablet:
        device_type = "tablet"
    elif is_mobile:
        device_type = "mobile"
    else:
        device_type = "desktop"

    return ParsedUserAgent(
        os=os_name,
        os_version=os_version,
        device_type=device_type,
        is_mobile=is_mobile,
        is_tablet=is_tablet,
        is_connected_tv=is_connected_tv,
    )


def extract_os(ua_string: str) -> tuple[str, str | None]:
    """
    Extract operating system and version from user agent.

    Args:
        ua_string: The user agent string

    Returns:
        Tuple of (os_name, version) - version may be None
    """
    if not ua_string:
        return ("unknown", None)

    for os_name, pattern in OS_PATTERNS:
        match = pattern.search(ua_string)
        if match:
            version = None
            if match.lastindex:
                version = match.group(1).replace("_", ".")
            return (os_name, version)

    return ("unknown", None)


def _matches(ua_string: str, patterns: list[re.Pattern]) -> bool:
    return any(pattern.search(ua_string) for pattern in patterns)
