"""
Common utility functions
"""
from bson.errors import InvalidId
from bson.objectid import ObjectId
from typing import Any, Dict, List, Optional
from taggable.core.exceptions import InvalidArgument

def to_object_id(value: Any) -> ObjectId:
    """Convert a string ID to ObjectId, raising InvalidArgument if malformed"""
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str):
        raise InvalidArgument(f"Invalid document ID: {value!r}")
    try:
        return ObjectId(value)
    except InvalidId:
        raise InvalidArgument(f"Invalid document ID: {value!r}")

def document_to_dict(document) -> Optional[Dict[str, Any]]:
    """Convert a document instance to a JSON-friendly dictionary"""
    if document is None:
        return None
    result = document.to_mongo()
    result['_id'] = str(result['_id'])
    return result

def parse_tag_list(value: Optional[str]) -> List[str]:
    """Split a comma separated query-string value into tags"""
    if not value:
        return []
    return [tag.strip() for tag in value.split(',') if tag.strip()]
