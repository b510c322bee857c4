"""
Errors raised by the NFT evaluator.

Malformed URIs and unparsable metadata are not errors: they are reported
through ``Protocol.NONE`` and ``Rating.UNKNOWN``. Only failures to reach
the metadata host escape an evaluation.
"""


class NFTEvaluatorError(Exception):
    """Base class for all evaluator errors"""


class FetchFailure(NFTEvaluatorError):
    """Metadata could not be retrieved from its host"""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")
