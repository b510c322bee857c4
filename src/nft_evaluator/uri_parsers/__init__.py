from .base import URIParser, DEFAULT_IPFS_GATEWAY
from .resolver import URIResolver, parse_uri
from .ipfs_parser import IPFSParser
from .gateway_path_parser import GatewayPathParser
from .http_parser import HTTPParser

__all__ = [
    "URIParser",
    "URIResolver",
    "parse_uri",
    "DEFAULT_IPFS_GATEWAY",
    "IPFSParser",
    "GatewayPathParser",
    "HTTPParser",
]
