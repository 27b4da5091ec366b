"""Playground XYZ adapter constants."""

# Bidder code the host framework registers this adapter under
BIDDER_CODE = "playgroundxyz"

# Partner endpoint (batched OpenRTB POST)
ENDPOINT_URL = "https://ads.playground.xyz/host-config/prebid?v=2"

# Cookie-sync pixel, routed through AppNexus
USER_SYNC_URL = (
    "//ib.adnxs.com/getuidnb?"
    "https://ads.playground.xyz/usersync?partner=appnexus&uid=$UID"
)

DEFAULT_CURRENCY = "USD"
DEFAULT_TTL = 300  # seconds
NET_REVENUE = True

# imp.ext namespaces
GENERIC_EXT_NAMESPACE = "appnexus"
PARTNER_EXT_NAMESPACE = "pxyz"

# Reported to the partner in imp.ext.pxyz.adapter
ADAPTER_VENDOR = "prebid"
ADAPTER_VERSION = "1.0.0"

SUPPORTED_MEDIA_TYPES: list[str] = ["banner"]

# OpenRTB 2.5 device types (List 5.21)
DEVICE_TYPE_MOBILE = 1
DEVICE_TYPE_PC = 2
DEVICE_TYPE_CONNECTED_TV = 3
