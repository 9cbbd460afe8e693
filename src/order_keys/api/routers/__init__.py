"""
order_keys.api.routers

FastAPI routers.
"""

# Package marker.
