import os
from dotenv import load_dotenv

load_dotenv()

# Smart-contract service (SettleMint) - loaded from .env
SETTLEMINT_API_URL = os.getenv("SETTLEMINT_API_URL", "")
SETTLEMINT_GRAPHQL_URL = os.getenv("SETTLEMINT_GRAPHQL_URL", "")
SETTLEMINT_TOKEN = os.getenv("SETTLEMINT_TOKEN", "")
CONTRACT_ADDRESS = os.getenv("CONTRACT_ADDRESS", "")
ADMIN_WALLET_ADDRESS = os.getenv("ADMIN_WALLET_ADDRESS", "")

# S3 / MinIO object storage
S3_ENDPOINT = os.getenv("S3_ENDPOINT", "")
S3_API_PORT = os.getenv("S3_API_PORT", "")
S3_ACCESS_KEY = os.getenv("S3_ACCESS_KEY", "")
S3_SECRET_KEY = os.getenv("S3_SECRET_KEY", "")
S3_BUCKET_NAME = os.getenv("S3_BUCKET_NAME", "nft-collection")

# Local paths
OUTPUT_DIR = os.getenv("NFT_OUTPUT_DIR", "./public/output")
COLLECTIONS_DIR = os.getenv("NFT_COLLECTIONS_DIR", "./public/collections")
LAYERS_DIR = os.getenv("NFT_LAYERS_DIR", "./public/assets/layers")

# Contract transaction defaults (zero-fee network)
GAS_LIMIT = "200000"
GAS_PRICE = "0"

HTTP_TIMEOUT = 30

# Generation queue (enqueue handler)
QUEUE_URL = os.getenv("QUEUE_URL", "")
