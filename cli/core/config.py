# cli/core/config.py
import os

# URL of the token issuer API
BASE_URL = os.environ.get("TOKENS_API_URL", "http://localhost:8000")

# Shared secret sent in the x-api-key header
API_KEY = os.environ.get("TOKENS_API_KEY", "")

# Request timeout in seconds
TIMEOUT = float(os.environ.get("TOKENS_API_TIMEOUT", "10"))
