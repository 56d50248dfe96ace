"""
safecoll Utilities Package.

Error types shared by the collection helpers.
"""

from safecoll.utils.errors import (
    IllegalArgumentError,
    SafeCollError,
)

__all__ = [
    "SafeCollError",
    "IllegalArgumentError",
]
