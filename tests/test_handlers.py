"""Tests for the Lambda handlers."""
import base64
import json
from unittest.mock import MagicMock, patch

import pytest

from nftgen.clients.contract import ContractError
from nftgen.handlers import admin, assets, enqueue, worker
from nftgen.models import GenerationResult


def _event(body):
    return {"body": json.dumps(body)}


def _body(response):
    return json.loads(response["body"])


class TestWorkerHandler:

    @pytest.fixture
    def service(self):
        with patch("nftgen.handlers.worker.CollectionService") as mock_cls, \
             patch("nftgen.handlers.worker.contract_client", return_value=None):
            yield mock_cls.return_value

    def test_generate(self, service):
        service.generate_and_upload.return_value = GenerationResult(
            success=True, message="NFT #5 generated", token_id=5
        )

        response = worker.handler(_event({"action": "generate"}), None)

        assert response["statusCode"] == 200
        assert _body(response)["token_id"] == 5

    def test_default_action_is_generate(self, service):
        service.generate_and_upload.return_value = GenerationResult(success=True, message="ok")

        worker.handler({}, None)

        service.generate_and_upload.assert_called_once()

    def test_sqs_record(self, service):
        service.create_new_collection.return_value = GenerationResult(success=True, message="ok")
        event = {"Records": [{"body": json.dumps({"action": "create_collection", "collection": "Space Dogs"})}]}

        response = worker.handler(event, None)

        assert response["statusCode"] == 200
        service.create_new_collection.assert_called_once_with("Space Dogs")

    def test_generate_for_collection(self, service):
        service.generate_for_collection.return_value = GenerationResult(
            success=False, message='Collection "x" does not exist.'
        )

        response = worker.handler(_event({"action": "generate_for_collection", "collection": "x"}), None)

        assert response["statusCode"] == 500
        assert _body(response)["success"] is False

    def test_unknown_action(self, service):
        response = worker.handler(_event({"action": "burn"}), None)

        assert response["statusCode"] == 400

    def test_collection_required(self, service):
        response = worker.handler(_event({"action": "create_collection"}), None)

        assert response["statusCode"] == 400
        assert "collection" in _body(response)["error"]

    def test_invalid_json(self, service):
        assert worker.handler({"body": "{nope"}, None)["statusCode"] == 400

    @pytest.mark.parametrize("body", ["[]", "\"x\"", "3"])
    def test_non_object_body(self, service, body):
        assert worker.handler({"body": body}, None)["statusCode"] == 400

    def test_non_object_sqs_record(self, service):
        event = {"Records": [{"body": "[1]"}]}

        assert worker.handler(event, None)["statusCode"] == 400

    def test_unexpected_error(self, service):
        service.generate_and_upload.side_effect = RuntimeError("boom")

        response = worker.handler(_event({}), None)

        assert response["statusCode"] == 500
        assert _body(response)["error"] == "boom"


class TestEnqueueHandler:

    def test_queues_body(self):
        sqs = MagicMock()
        sqs.send_message.return_value = {"MessageId": "m-1"}
        body = json.dumps({"action": "generate"})

        with patch("nftgen.handlers.enqueue.QUEUE_URL", "https://sqs/queue"):
            response = enqueue.handler({"body": body}, None, sqs=sqs)

        assert response["statusCode"] == 200
        assert _body(response) == {"status": "queued", "messageId": "m-1"}
        sqs.send_message.assert_called_once_with(QueueUrl="https://sqs/queue", MessageBody=body)

    def test_decodes_base64_body(self):
        sqs = MagicMock()
        sqs.send_message.return_value = {"MessageId": "m-2"}
        raw = json.dumps({"action": "create_collection", "collection": "Dogs"})
        event = {"body": base64.b64encode(raw.encode()).decode(), "isBase64Encoded": True}

        enqueue.handler(event, None, sqs=sqs)

        assert sqs.send_message.call_args.kwargs["MessageBody"] == raw

    def test_rejects_unknown_action(self):
        sqs = MagicMock()

        response = enqueue.handler(_event({"action": "burn"}), None, sqs=sqs)

        assert response["statusCode"] == 400
        sqs.send_message.assert_not_called()


class TestAssetHandlers:

    @pytest.fixture(autouse=True)
    def valid_storage(self, storage_config):
        with patch("nftgen.handlers.assets.get_storage_config", return_value=storage_config):
            yield

    def _factory(self, found=None, error=None):
        storage = MagicMock()
        if error:
            storage.find_object.side_effect = error
        else:
            storage.find_object.return_value = found
        return MagicMock(return_value=storage), storage

    def test_metadata_found(self):
        metadata = {"name": "Dogs #7", "image": "https://minio.example.com/nft-collection/images/7.png"}
        factory, storage = self._factory(found=("metadata/7.json", json.dumps(metadata).encode()))

        response = assets.metadata_handler({"pathParameters": {"tokenId": "7"}}, None, storage_factory=factory)

        assert response["statusCode"] == 200
        assert response["headers"]["Cache-Control"] == "no-cache"
        assert _body(response) == {"name": "Dogs #7", "image": "/api/nft-image/7"}
        assert storage.find_object.call_args.args[0] == [
            "metadata/7.json", "7.json", "collections/metadata/7.json",
        ]

    def test_metadata_not_found(self):
        factory, _ = self._factory(found=None)

        response = assets.metadata_handler({"pathParameters": {"tokenId": "7"}}, None, storage_factory=factory)

        assert response["statusCode"] == 404

    def test_metadata_requires_token(self):
        response = assets.metadata_handler({}, None, storage_factory=MagicMock())

        assert response["statusCode"] == 404

    def test_metadata_rejects_non_numeric_token(self):
        response = assets.metadata_handler(
            {"pathParameters": {"tokenId": "../secrets"}}, None, storage_factory=MagicMock()
        )

        assert response["statusCode"] == 400

    def test_metadata_storage_error(self):
        factory, _ = self._factory(error=RuntimeError("connection reset"))

        response = assets.metadata_handler({"pathParameters": {"tokenId": "7"}}, None, storage_factory=factory)

        assert response["statusCode"] == 500
        assert _body(response) == {"error": "Server error"}

    def test_metadata_without_storage_config(self, empty_storage_config):
        with patch("nftgen.handlers.assets.get_storage_config", return_value=empty_storage_config):
            response = assets.metadata_handler(
                {"pathParameters": {"tokenId": "7"}}, None, storage_factory=MagicMock()
            )

        assert response["statusCode"] == 500
        assert _body(response) == {"error": "Database connection failed"}

    def test_image_found(self):
        factory, _ = self._factory(found=("images/7.png", b"\x89PNG"))

        response = assets.image_handler({"pathParameters": {"tokenId": "7"}}, None, storage_factory=factory)

        assert response["statusCode"] == 200
        assert response["isBase64Encoded"] is True
        assert response["headers"]["Content-Type"] == "image/png"
        assert base64.b64decode(response["body"]) == b"\x89PNG"

    def test_image_not_found(self):
        factory, _ = self._factory(found=None)

        response = assets.image_handler({"pathParameters": {"tokenId": "7"}}, None, storage_factory=factory)

        assert response["statusCode"] == 404


class TestAdminHandler:

    @pytest.fixture
    def contract(self):
        contract = MagicMock()
        with patch("nftgen.handlers.admin.contract_client", return_value=contract):
            yield contract

    def test_pause(self, contract):
        contract.pause.return_value = {"transactionHash": "0x1"}

        response = admin.handler(_event({"operation": "pause"}), None)

        assert response["statusCode"] == 200
        assert _body(response) == {"operation": "pause", "result": {"transactionHash": "0x1"}}

    def test_set_base_uri(self, contract):
        contract.set_base_uri.return_value = {}

        admin.handler(_event({"operation": "set_base_uri", "base_uri": "https://x/metadata"}), None)

        contract.set_base_uri.assert_called_once_with("https://x/metadata")

    def test_set_base_uri_requires_uri(self, contract):
        response = admin.handler(_event({"operation": "set_base_uri"}), None)

        assert response["statusCode"] == 400

    def test_contract_error_status(self, contract):
        contract.unpause.side_effect = ContractError("Authentication failed", status_code=401)

        response = admin.handler(_event({"operation": "unpause"}), None)

        assert response["statusCode"] == 401
        assert _body(response)["error"] == "Authentication failed"

    def test_unknown_operation(self, contract):
        assert admin.handler(_event({"operation": "burn"}), None)["statusCode"] == 400

    def test_non_object_body(self, contract):
        assert admin.handler({"body": "[1]"}, None)["statusCode"] == 400

    def test_transfers(self):
        client = MagicMock()
        client.recent_transfers.return_value = []

        with patch("nftgen.handlers.admin.SETTLEMINT_GRAPHQL_URL", "https://graph"), \
             patch("nftgen.handlers.admin.IndexerClient", return_value=client):
            response = admin.handler(_event({"operation": "transfers", "first": 5}), None)

        assert response["statusCode"] == 200
        assert _body(response) == {"count": 0, "transfers": []}
        client.recent_transfers.assert_called_once_with(5)

    def test_transfers_rejects_bad_count(self):
        response = admin.handler(_event({"operation": "transfers", "first": "lots"}), None)

        assert response["statusCode"] == 400
