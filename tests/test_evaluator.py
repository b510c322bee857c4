"""
Tests for the metadata and image rating policy and the location classifiers.
"""

import base64
import json

import pytest

from nft_evaluator import FetchFailure, LocationType, Rating
from nft_evaluator.evaluator import (
    IMAGE_ARWEAVE,
    IMAGE_EMBEDDED,
    IMAGE_IPFS,
    IMAGE_PRIVATE_SERVER,
    IMAGE_UNKNOWN,
    METADATA_IPFS,
    METADATA_ONCHAIN,
    METADATA_PRIVATE_SERVER,
    METADATA_UNKNOWN,
    parse_metadata,
)

from conftest import GATEWAY, encode_metadata


class TestEvaluateImage:

    @pytest.mark.parametrize("image, expected", [
        ("data:image/png;base64,AAAA", (Rating.GREEN, IMAGE_EMBEDDED)),
        ("data:image/svg+xml;utf8,<svg></svg>", (Rating.GREEN, IMAGE_EMBEDDED)),
        ("ipfs://QmImage", (Rating.GREEN, IMAGE_IPFS)),
        ("https://gateway.pinata.cloud/ipfs/QmImage", (Rating.GREEN, IMAGE_IPFS)),
        ("https://arweave.net/abc", (Rating.GREEN, IMAGE_ARWEAVE)),
        ("https://www.arweave.net/abc", (Rating.RED, IMAGE_PRIVATE_SERVER)),
        ("ar://abc", (Rating.RED, IMAGE_PRIVATE_SERVER)),
        ("https://evil.example/x.png", (Rating.RED, IMAGE_PRIVATE_SERVER)),
        ("data:text/plain,hello", (Rating.RED, IMAGE_PRIVATE_SERVER)),
        ("image.png", (Rating.YELLOW, IMAGE_UNKNOWN)),
        (None, (Rating.YELLOW, IMAGE_UNKNOWN)),
        (12, (Rating.YELLOW, IMAGE_UNKNOWN)),
    ])
    def test_decision_table(self, evaluator, image, expected):
        assert evaluator.evaluate_image({"image": image}) == expected

    def test_missing_image_is_yellow(self, evaluator):
        assert evaluator.evaluate_image({"name": "no image"}) == (Rating.YELLOW, IMAGE_UNKNOWN)

    def test_non_mapping_metadata_has_no_image(self, evaluator):
        assert evaluator.evaluate_image(["https://evil.example/x.png"]) == (Rating.YELLOW, IMAGE_UNKNOWN)


class TestEvaluateEncodedPayload:

    @pytest.mark.asyncio
    async def test_arweave_image(self, make_evaluator):
        evaluator, transport = make_evaluator()
        metadata = {"image": "https://arweave.net/abc"}

        result = await evaluator.evaluate_nft(encode_metadata(metadata))

        assert result.as_tuple() == (Rating.GREEN, [METADATA_ONCHAIN, IMAGE_ARWEAVE], metadata)
        assert transport.requested == []

    @pytest.mark.asyncio
    async def test_bare_base64_without_image_is_yellow(self, evaluator):
        metadata = {"name": "Plain", "attributes": []}

        result = await evaluator.evaluate_nft(encode_metadata(metadata, prefix=""))

        assert result.rating == Rating.YELLOW
        assert result.reasons == [METADATA_ONCHAIN, IMAGE_UNKNOWN]
        assert result.metadata == metadata

    @pytest.mark.asyncio
    async def test_embedded_image(self, evaluator):
        metadata = {"name": "Onchain", "image": "data:image/png;base64,AAAA"}

        result = await evaluator.evaluate_nft(encode_metadata(metadata))

        assert result.rating == Rating.GREEN
        assert result.reasons == [METADATA_ONCHAIN, IMAGE_EMBEDDED]

    @pytest.mark.asyncio
    async def test_payload_that_is_not_json(self, evaluator):
        token_uri = "data:application/json;base64," + base64.b64encode(b"not json").decode("ascii")

        result = await evaluator.evaluate_nft(token_uri)

        assert result.as_tuple() == (Rating.UNKNOWN, [METADATA_UNKNOWN], None)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("constant", [b"NaN", b"Infinity", b"-Infinity", b"{\"image\": NaN}"])
    async def test_payload_with_non_json_constant(self, evaluator, constant):
        token_uri = base64.b64encode(constant).decode("ascii")

        result = await evaluator.evaluate_nft(token_uri)

        assert result.as_tuple() == (Rating.UNKNOWN, [METADATA_UNKNOWN], None)

    @pytest.mark.asyncio
    async def test_payload_that_is_not_utf8(self, evaluator):
        token_uri = base64.b64encode(b"\xff\xfe\xfd").decode("ascii")

        result = await evaluator.evaluate_nft(token_uri)

        assert result.as_tuple() == (Rating.UNKNOWN, [METADATA_UNKNOWN], None)

    @pytest.mark.asyncio
    async def test_json_null_is_not_metadata(self, evaluator):
        result = await evaluator.evaluate_nft(encode_metadata(None))

        assert result.rating == Rating.UNKNOWN
        assert result.metadata is None


class TestEvaluateLinkedMetadata:

    @pytest.mark.asyncio
    async def test_ipfs_metadata_rates_image(self, make_evaluator):
        metadata = {"image": "ipfs://QmImage"}
        evaluator, transport = make_evaluator({GATEWAY + "QmMeta/1": json.dumps(metadata)})

        result = await evaluator.evaluate_nft("ipfs://ipfs/QmMeta/1")

        assert result.as_tuple() == (Rating.GREEN, [METADATA_IPFS, IMAGE_IPFS], metadata)
        assert transport.requested == [GATEWAY + "QmMeta/1"]

    @pytest.mark.asyncio
    async def test_ipfs_metadata_with_private_image(self, make_evaluator):
        metadata = {"image": "https://images.example.com/1.png"}
        evaluator, _ = make_evaluator({GATEWAY + "QmMeta": json.dumps(metadata)})

        result = await evaluator.evaluate_nft("https://gateway.pinata.cloud/ipfs/QmMeta")

        assert result.rating == Rating.RED
        assert result.reasons == [METADATA_IPFS, IMAGE_PRIVATE_SERVER]

    @pytest.mark.asyncio
    async def test_private_server_ignores_image(self, make_evaluator):
        metadata = {"image": "https://evil.example/x.png"}
        evaluator, transport = make_evaluator({"https://api.example.com/token/1": json.dumps(metadata)})

        result = await evaluator.evaluate_nft("https://api.example.com/token/1")

        assert result.as_tuple() == (Rating.RED, [METADATA_PRIVATE_SERVER], metadata)
        assert transport.requested == ["https://api.example.com/token/1"]

    @pytest.mark.asyncio
    async def test_private_server_with_ipfs_image_is_still_red(self, make_evaluator):
        metadata = {"image": "ipfs://QmImage"}
        evaluator, _ = make_evaluator({"https://api.example.com/token/2": json.dumps(metadata)})

        result = await evaluator.evaluate_nft("https://api.example.com/token/2")

        assert result.rating == Rating.RED
        assert result.reasons == [METADATA_PRIVATE_SERVER]

    @pytest.mark.asyncio
    async def test_body_that_is_not_json(self, make_evaluator):
        evaluator, _ = make_evaluator({"https://api.example.com/token/3": "<html>Not Found</html>"})

        result = await evaluator.evaluate_nft("https://api.example.com/token/3")

        assert result.as_tuple() == (Rating.UNKNOWN, [METADATA_UNKNOWN], None)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token_uri", ["not a uri", 'data:application/json,{"name":"x"}'])
    async def test_nothing_to_fetch_is_unknown(self, make_evaluator, token_uri):
        evaluator, transport = make_evaluator()

        result = await evaluator.evaluate_nft(token_uri)

        assert result.as_tuple() == (Rating.UNKNOWN, [METADATA_UNKNOWN], None)
        assert transport.requested == []

    @pytest.mark.asyncio
    async def test_unreachable_metadata_raises(self, make_evaluator):
        evaluator, _ = make_evaluator()

        with pytest.raises(FetchFailure):
            await evaluator.evaluate_nft("https://down.example.com/token/1")


class TestClassifyMetadataLocation:

    @pytest.mark.asyncio
    async def test_embedded(self, evaluator):
        assert await evaluator.classify_metadata_location(encode_metadata({"name": "x"})) == LocationType.EMBEDDED

    @pytest.mark.asyncio
    async def test_embedded_but_not_json(self, evaluator):
        token_uri = base64.b64encode(b"plain text").decode("ascii")
        assert await evaluator.classify_metadata_location(token_uri) == LocationType.OTHER

    @pytest.mark.asyncio
    async def test_decentralized(self, make_evaluator):
        evaluator, _ = make_evaluator({GATEWAY + "QmMeta": "{}"})
        assert await evaluator.classify_metadata_location("ipfs://QmMeta") == LocationType.DECENTRALIZED

    @pytest.mark.asyncio
    async def test_web(self, make_evaluator):
        evaluator, _ = make_evaluator({"https://api.example.com/1": "{}"})
        assert await evaluator.classify_metadata_location("https://api.example.com/1") == LocationType.WEB

    @pytest.mark.asyncio
    async def test_web_but_not_json(self, make_evaluator):
        evaluator, _ = make_evaluator({"https://api.example.com/1": "oops"})
        assert await evaluator.classify_metadata_location("https://api.example.com/1") == LocationType.OTHER

    @pytest.mark.asyncio
    async def test_not_a_uri(self, make_evaluator):
        evaluator, transport = make_evaluator()
        assert await evaluator.classify_metadata_location("not a uri") == LocationType.OTHER
        assert transport.requested == []

    @pytest.mark.asyncio
    async def test_agrees_with_evaluation_branch(self, make_evaluator):
        documents = {
            GATEWAY + "QmMeta": '{"image": "ipfs://QmImage"}',
            "https://api.example.com/1": '{"image": "ipfs://QmImage"}',
            "https://api.example.com/2": "oops",
        }
        expected = {
            "ipfs://QmMeta": (LocationType.DECENTRALIZED, METADATA_IPFS),
            "https://api.example.com/1": (LocationType.WEB, METADATA_PRIVATE_SERVER),
            "https://api.example.com/2": (LocationType.OTHER, METADATA_UNKNOWN),
            encode_metadata({"image": "ipfs://QmImage"}): (LocationType.EMBEDDED, METADATA_ONCHAIN),
        }
        evaluator, _ = make_evaluator(documents)

        for token_uri, (location, reason) in expected.items():
            assert await evaluator.classify_metadata_location(token_uri) == location
            assert (await evaluator.evaluate_nft(token_uri)).reasons[0] == reason


class TestClassifyImageLocation:

    @pytest.mark.parametrize("image, expected", [
        ("data:image/png;base64,AAAA", LocationType.EMBEDDED),
        ("ipfs://QmImage", LocationType.DECENTRALIZED),
        ("https://example.com/ipfs/QmImage", LocationType.DECENTRALIZED),
        ("https://arweave.net/abc", LocationType.WEB),
        ("https://evil.example/x.png", LocationType.WEB),
        ("image.png", LocationType.OTHER),
        (None, LocationType.OTHER),
    ])
    def test_locations(self, evaluator, image, expected):
        assert evaluator.classify_image_location(image) == expected


class TestParseMetadata:

    @pytest.mark.parametrize("text", ["NaN", "[1, Infinity]", '{"a": -Infinity}', "oops", None])
    def test_rejected(self, text):
        assert parse_metadata(text) is None

    def test_accepted(self):
        assert parse_metadata('{"image": "ipfs://QmImage", "size": 1.5}') == {"image": "ipfs://QmImage", "size": 1.5}
