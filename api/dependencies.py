"""
Shared route dependencies.
"""

from nft_evaluator import NFTEvaluator, get_settings


def get_evaluator() -> NFTEvaluator:
    """Evaluator built from the environment; overridden in tests."""
    return NFTEvaluator(settings=get_settings())
