from pydantic import AnyUrl
from .base import URIParser, DEFAULT_IPFS_GATEWAY
from ..models import ResolvedUri
from ..types import Protocol


class IPFSParser(URIParser):
    """Native ipfs:// URIs, with or without the redundant ipfs/ authority"""

    def __init__(self, gateway: str = DEFAULT_IPFS_GATEWAY):
        self.gateway = gateway

    def can_handle(self, url: AnyUrl) -> bool:
        return url.scheme == "ipfs"

    def resolve(self, uri: str, url: AnyUrl) -> ResolvedUri:
        # ipfs://ipfs/Qm... and ipfs://Qm...
        href = str(url)
        if href.startswith("ipfs://ipfs/"):
            ipfs_hash = href[len("ipfs://ipfs/"):]
        else:
            ipfs_hash = href[len("ipfs://"):]

        return ResolvedUri(url=f"{self.gateway}{ipfs_hash}", protocol=Protocol.DECENTRALIZED, host=url.host)
