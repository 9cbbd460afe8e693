"""
order_keys.services

Service-layer package.

Responsibilities:
- Translate sibling-index operations (insert at K, move from I to K) into engine calls.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services stay synchronous and storage-free; callers persist the returned keys.
