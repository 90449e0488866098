"""Identifier generation for new records."""

import uuid


def new_id() -> str:
    """Create a collision-resistant record identifier.

    Returns:
        A random UUID4 as a 32-character hex string.
    """
    return uuid.uuid4().hex
