from enum import Enum


class Rating(str, Enum):
    """Traffic-light trust rating for token metadata and image storage"""
    GREEN = "Green"
    YELLOW = "Yellow"
    RED = "Red"
    UNKNOWN = "Unknown"


class Protocol(str, Enum):
    """How a resolved URI is reached"""
    DECENTRALIZED = "decentralized"  # IPFS scheme or IPFS-looking gateway path
    WEB = "web"                      # any other well-formed URI
    NONE = "none"                    # not a URI at all


class LocationType(str, Enum):
    """Coarse storage location reported by the type classifiers"""
    EMBEDDED = "embedded"
    DECENTRALIZED = "decentralized"
    WEB = "web"
    OTHER = "other"
