"""
Orders serializers package - modular serializer layer.
"""

# Order read serializers
from .order_serializers import (
    OrderItemSerializer,
    OrderSerializer,
)

# Input serializers
from .input_serializers import (
    OrderItemInputSerializer,
    OrderCreateSerializer,
    UpdateOrderRouteSerializer,
)

# Status serializers
from .status_serializers import UpdateOrderStatusSerializer

__all__ = [
    'OrderItemSerializer',
    'OrderSerializer',
    'OrderItemInputSerializer',
    'OrderCreateSerializer',
    'UpdateOrderRouteSerializer',
    'UpdateOrderStatusSerializer',
]
