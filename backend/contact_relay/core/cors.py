# contact_relay/core/cors.py
from typing import Dict, Optional, Sequence


def cors_headers(origin: Optional[str], allowed: Sequence[str]) -> Dict[str, str]:
    """CORS headers for one request.

    An origin on the allow-list is echoed back. Anything else (including no
    Origin header at all) gets the first allow-listed origin, which a browser
    will not accept for a different origin.
    """
    allow_origin = origin if origin and origin in allowed else allowed[0]
    return {
        "Access-Control-Allow-Origin": allow_origin,
        "Access-Control-Allow-Methods": "POST, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type",
        "Access-Control-Max-Age": "86400",
    }
