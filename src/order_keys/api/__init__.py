"""
order_keys.api

HTTP API package.

Responsibilities:
- Expose key generation and reordering over JSON endpoints (FastAPI).
"""

# Package marker.
