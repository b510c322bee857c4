from pydantic import AnyUrl
from .base import URIParser, DEFAULT_IPFS_GATEWAY
from ..models import ResolvedUri
from ..types import Protocol


class GatewayPathParser(URIParser):
    """
    URIs that carry an IPFS hash in their path, e.g. a third-party gateway
    link like https://gateway.pinata.cloud/ipfs/Qm...

    Detection is a plain substring check for "ipfs" or "Qm" anywhere in the
    path, so ordinary paths that happen to contain either are rewritten to
    the gateway as well.
    """

    def __init__(self, gateway: str = DEFAULT_IPFS_GATEWAY):
        self.gateway = gateway

    def can_handle(self, url: AnyUrl) -> bool:
        path = url.path or ""
        return "ipfs" in path or "Qm" in path

    def resolve(self, uri: str, url: AnyUrl) -> ResolvedUri:
        path = url.path or ""
        ipfs_hash = path[len("/ipfs/"):] if path.startswith("/ipfs/") else path

        return ResolvedUri(url=f"{self.gateway}{ipfs_hash}", protocol=Protocol.DECENTRALIZED, host=url.host)
