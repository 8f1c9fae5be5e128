"""
Core backend base components.

Foundational serializer and viewset classes shared by every app so that
responses and lookups look the same across the API.
"""

from .serializers import FieldsetMixin
from .viewsets import UUID_LOOKUP_REGEX, BaseGenericViewSet, NestedRestaurantMixin

__all__ = [
    # Serializers
    'FieldsetMixin',

    # ViewSets
    'UUID_LOOKUP_REGEX',
    'BaseGenericViewSet',
    'NestedRestaurantMixin',
]
