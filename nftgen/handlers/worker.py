"""AWS Lambda handler for NFT generation."""

import json
import logging

from ._common import contract_client, parse_body, response
from ..services import CollectionService

ACTIONS = ("generate", "create_collection", "generate_for_collection")


def handler(event, context):
    """
    AWS Lambda handler - triggered by SQS or HTTP.

    Input payload:
    {
        "action": "generate" | "create_collection" | "generate_for_collection",
        "collection": "My Dogs"      # required for collection actions
    }

    Output: GenerationResult as JSON (200 on success, 500 on failure).
    """
    try:
        body = parse_body(event)
    except ValueError:
        return response(400, {"error": "Invalid JSON body"})

    action = body.get("action", "generate")
    if action not in ACTIONS:
        return response(400, {"error": f"Unknown action '{action}'"})

    collection = (body.get("collection") or "").strip()
    if action != "generate" and not collection:
        return response(400, {"error": "Missing 'collection' field"})

    try:
        print(f"Processing action: {action}", flush=True)
        service = CollectionService(contract=contract_client())

        if action == "create_collection":
            result = service.create_new_collection(collection)
        elif action == "generate_for_collection":
            result = service.generate_for_collection(collection)
        else:
            result = service.generate_and_upload()

        print(result.message, flush=True)
        return response(200 if result.success else 500, result.to_dict())

    except Exception as e:
        print(f"ERROR: {e}", flush=True)
        return response(500, {"error": str(e)})


# Local testing
if __name__ == "__main__":
    import sys

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    if len(sys.argv) < 2:
        print("Usage: python -m nftgen.handlers.worker <action> [collection]")
        print()
        print("Arguments:")
        print("  action     - generate | create_collection | generate_for_collection")
        print("  collection - collection name (create_collection) or folder (generate_for_collection)")
        print()
        print("Example:")
        print('  python -m nftgen.handlers.worker create_collection "Space Dogs"')
        sys.exit(1)

    test_input = {"action": sys.argv[1]}
    if len(sys.argv) > 2:
        test_input["collection"] = sys.argv[2]

    print("Running with input:")
    print(json.dumps(test_input, indent=2))
    print()

    result = handler({"body": json.dumps(test_input)}, None)
    print("\nResult:")
    print(json.dumps(json.loads(result["body"]), indent=2))
