"""AWS Lambda handler for HTTP to SQS enqueue."""

import base64
import json

import boto3

from ..config import QUEUE_URL
from ._common import response
from .worker import ACTIONS

_sqs = None


def _get_sqs():
    global _sqs
    if _sqs is None:
        _sqs = boto3.client("sqs")
    return _sqs


def handler(event, context, sqs=None):
    """
    HTTP to SQS proxy.

    Receives a generation request and queues the body for the worker, so the
    caller doesn't wait on image compositing and uploads.
    """
    body = event.get("body") or "{}"

    if event.get("isBase64Encoded"):
        body = base64.b64decode(body).decode("utf-8")

    try:
        action = json.loads(body).get("action", "generate")
    except (json.JSONDecodeError, AttributeError):
        return response(400, {"error": "Invalid JSON body"})
    if action not in ACTIONS:
        return response(400, {"error": f"Unknown action '{action}'"})

    sqs = sqs or _get_sqs()
    result = sqs.send_message(QueueUrl=QUEUE_URL, MessageBody=body)

    return response(200, {"status": "queued", "messageId": result["MessageId"]})
