from rest_framework import serializers
from .models import User


class UserSummarySerializer(serializers.ModelSerializer):
    """Minimal public view of a user, embedded in merchant order listings."""

    class Meta:
        model = User
        fields = ["id", "name"]
        read_only_fields = fields
