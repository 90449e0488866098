"""Core interfaces (Protocol classes) for payrollcache."""

from payrollcache.core.interfaces.local_store import ILocalStore
from payrollcache.core.interfaces.remote_store import (
    ChangeCallback,
    ChangeEvent,
    IRemoteStore,
    ISubscription,
    Row,
)
from payrollcache.core.interfaces.serializer import ISerializer

__all__ = [
    "IRemoteStore",
    "ISubscription",
    "ILocalStore",
    "ISerializer",
    "ChangeEvent",
    "ChangeCallback",
    "Row",
]
