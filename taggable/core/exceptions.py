"""
Errors raised by the tagging layer
"""
from pymongo.errors import PyMongoError

# Store failures are pymongo's own errors, propagated unchanged
StoreError = PyMongoError


class InvalidArgument(ValueError):
    """A tag, tag path or document id is malformed"""
