from pydantic import AnyUrl
from .base import URIParser
from ..models import ResolvedUri
from ..types import Protocol


class HTTPParser(URIParser):
    """Fallback for every other well-formed URI, fetched as-is"""

    def can_handle(self, url: AnyUrl) -> bool:
        return True

    def resolve(self, uri: str, url: AnyUrl) -> ResolvedUri:
        return ResolvedUri(url=uri, protocol=Protocol.WEB, host=url.host)
