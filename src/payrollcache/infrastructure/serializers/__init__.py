"""Snapshot serializers."""

from payrollcache.infrastructure.serializers.json import JsonSerializer

__all__ = ["JsonSerializer"]
