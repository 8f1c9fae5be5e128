"""
Orders services package.

- OrderService: order creation and the status state machine
- OrderRouteService: pre-pickup route / ETA edits
- OrderQueryService: customer and merchant read paths
"""

# Core order operations
from .order_service import OrderService

# Route edits
from .route_service import OrderRouteService

# Read paths
from .query_service import OrderQueryService

__all__ = [
    'OrderService',
    'OrderRouteService',
    'OrderQueryService',
]
