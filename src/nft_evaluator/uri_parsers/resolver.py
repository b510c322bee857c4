import logging
from typing import Any, List, Optional
from pydantic import AnyUrl
from .base import URIParser, DEFAULT_IPFS_GATEWAY
from .http_parser import HTTPParser
from .ipfs_parser import IPFSParser
from .gateway_path_parser import GatewayPathParser
from ..models import ResolvedUri

logger = logging.getLogger(__name__)


def parse_uri(uri: Any) -> Optional[AnyUrl]:
    """Parse an absolute URI, returning None if it is not one"""
    if not isinstance(uri, str):
        return None
    try:
        return AnyUrl(uri)
    except ValueError:
        return None


class URIResolver:
    def __init__(self, gateway: str = DEFAULT_IPFS_GATEWAY, parsers: Optional[List[URIParser]] = None):
        self.gateway = gateway
        if parsers is None:
            self.parsers = [
                IPFSParser(gateway),
                GatewayPathParser(gateway),
                HTTPParser(),
            ]
        else:
            self.parsers = parsers

    def resolve(self, uri: Any) -> ResolvedUri:
        """Classify a URI and rewrite IPFS references to the gateway"""
        url = parse_uri(uri)
        if url is None:
            logger.debug(f"Not a well-formed URI: {uri!r}")
            return ResolvedUri.unresolved()

        for parser in self.parsers:
            if parser.can_handle(url):
                return parser.resolve(uri, url)

        return ResolvedUri.unresolved()

    def fetchable_url(self, uri: str) -> str:
        """
        Get a URL a browser can load for a media URI.

        Data URIs are returned untouched, IPFS URIs and IPFS gateway paths
        are pointed at the configured gateway, anything else is returned
        as given.

        Raises:
            ValueError: if the URI is empty or not a well-formed URI
        """
        if not uri:
            raise ValueError("No URI given")

        url = parse_uri(uri)
        if url is None:
            raise ValueError(f"Invalid URI: {uri}")

        if url.scheme == "data":
            return uri

        # unlike resolve(), a bare "Qm" in the path is not taken as a gateway link
        if url.scheme == "ipfs" or "ipfs" in (url.path or ""):
            return self.resolve(uri).url

        return uri
