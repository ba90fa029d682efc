"""Access control for the gateway reference API.

Host-facing payment endpoints require the shared bearer key. Every route,
including the checkout script's result callback, is rate limited per
client address.
"""

import os
import secrets
import logging

from fastapi import HTTPException, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from slowapi import Limiter
from slowapi.util import get_remote_address

logger = logging.getLogger(__name__)

security = HTTPBearer()

# Also guards the unauthenticated payments/result callback
DEFAULT_RATE_LIMIT = os.getenv("RATE_LIMIT", "60/minute")

limiter = Limiter(key_func=get_remote_address, default_limits=[DEFAULT_RATE_LIMIT])


async def verify_api_key(credentials: HTTPAuthorizationCredentials = Security(security)) -> str:
    """Guard the host's payment endpoints with the key shared through ``API_KEY``.

    Only the host's backend calls start, return, checkout and the listings.
    The checkout result callback is called from the buyer's browser and is
    left open.

    Raises:
        HTTPException: 500 when the gateway has no key configured, 401 when
            the host sent a different key.
    """
    expected_key = os.getenv("API_KEY")
    if not expected_key:
        logger.error("Gateway API key (API_KEY) is not configured, refusing host request")
        raise HTTPException(status_code=500, detail="Gateway API key not configured")
    if not secrets.compare_digest(credentials.credentials, expected_key):
        logger.warning("Rejected host request with a wrong gateway API key")
        raise HTTPException(status_code=401, detail="Invalid gateway API key")
    return credentials.credentials
