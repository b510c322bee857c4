from typing import Optional
import asyncio
import json
import logging
import typer

from .config import Settings
from .evaluator import NFTEvaluator
from .exceptions import FetchFailure
from .types import Rating
from .utils import pretty_address, shorten_metadata


app = typer.Typer()

RATING_COLORS = {
    Rating.GREEN: typer.colors.GREEN,
    Rating.YELLOW: typer.colors.YELLOW,
    Rating.RED: typer.colors.RED,
    Rating.UNKNOWN: typer.colors.WHITE,
}


def _configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _build_evaluator(gateway: Optional[str], timeout: Optional[float]) -> NFTEvaluator:
    overrides = {}
    if gateway is not None:
        overrides["IPFS_GATEWAY"] = gateway
    if timeout is not None:
        overrides["FETCH_TIMEOUT"] = timeout
    return NFTEvaluator(settings=Settings(**overrides))


def _fail(error: FetchFailure):
    typer.secho(f"Error: {error}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


@app.command()
def evaluate(
    token_uri: str,
    gateway: Optional[str] = typer.Option(None, help="IPFS gateway base URL"),
    timeout: Optional[float] = typer.Option(None, help="Fetch timeout in seconds"),
    as_json: bool = typer.Option(False, "--json", help="Print the full result as JSON"),
    max_length: int = typer.Option(100, help="Shorten metadata strings longer than this in JSON output (0 = keep all)"),
    contract: Optional[str] = typer.Option(None, help="Contract address, used to label the output"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each evaluation step"),
):
    """Rate how decentralized an NFT's metadata and image storage is"""
    _configure_logging(verbose)
    evaluator = _build_evaluator(gateway, timeout)

    try:
        result = asyncio.run(evaluator.evaluate_nft(token_uri))
    except FetchFailure as e:
        _fail(e)

    if as_json:
        data = json.loads(result.model_dump_json())
        data["metadata"] = shorten_metadata(data["metadata"], max_length)
        typer.echo(json.dumps(data, indent=4))
        return

    if contract:
        typer.echo(f"Contract {pretty_address(contract)}")
    typer.secho(f"Rating: {result.rating.value}", fg=RATING_COLORS[result.rating], bold=True)
    for reason in result.reasons:
        typer.echo(f"   • {reason}")


@app.command("metadata-type")
def metadata_type(
    token_uri: str,
    gateway: Optional[str] = typer.Option(None, help="IPFS gateway base URL"),
    timeout: Optional[float] = typer.Option(None, help="Fetch timeout in seconds"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each evaluation step"),
):
    """Report where the token metadata is stored"""
    _configure_logging(verbose)
    evaluator = _build_evaluator(gateway, timeout)

    try:
        location = asyncio.run(evaluator.classify_metadata_location(token_uri))
    except FetchFailure as e:
        _fail(e)

    typer.echo(location.value)


@app.command("image-type")
def image_type(
    image: str,
    gateway: Optional[str] = typer.Option(None, help="IPFS gateway base URL"),
):
    """Report where an image URI points"""
    evaluator = _build_evaluator(gateway, None)
    typer.echo(evaluator.classify_image_location(image).value)


@app.command("resolve")
def resolve(
    uri: str,
    gateway: Optional[str] = typer.Option(None, help="IPFS gateway base URL"),
):
    """Show how a URI is classified and where it would be fetched from"""
    evaluator = _build_evaluator(gateway, None)
    resolved = evaluator.uri_resolver.resolve(uri)

    data = resolved.model_dump(mode="json")
    try:
        data["fetchable_url"] = evaluator.uri_resolver.fetchable_url(uri)
    except ValueError:
        data["fetchable_url"] = None
    typer.echo(json.dumps(data, indent=4))


if __name__ == "__main__":
    app()
