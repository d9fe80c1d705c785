"""
Document model and queries

A thin mapping between Python objects and MongoDB documents. Subclasses name
their collection and declare their fields; each field's type doubles as the
factory for its default value.
"""
from bson.objectid import ObjectId
from typing import Dict, Any, List, Optional
from taggable.core.exceptions import InvalidArgument
from taggable.database.db import get_collection
from taggable.utils.helpers import to_object_id


class Query:
    """Composable filter bound to a document class"""

    def __init__(self, model, conditions: Optional[Dict[str, Any]] = None):
        self.model = model
        self.conditions = dict(conditions or {})
        if '$and' in self.conditions:
            self.conditions['$and'] = list(self.conditions['$and'])

    def and_(self, conditions: List[Dict[str, Any]]) -> 'Query':
        """AND extra conditions into the filter, keeping existing ones"""
        self.conditions.setdefault('$and', []).extend(conditions)
        return self

    def exec(self) -> List['Document']:
        """Run the query and return document instances"""
        cursor = self.model.get_collection().find(self.conditions)
        return [self.model.from_mongo(doc) for doc in cursor]

    def count(self) -> int:
        return self.model.get_collection().count_documents(self.conditions)

    def __iter__(self):
        return iter(self.exec())

    def __repr__(self):
        return f"Query({self.model.__name__}, {self.conditions!r})"


class Document:
    """Base class for documents stored in a MongoDB collection"""

    collection_name: str = ''
    fields: Dict[str, type] = {}

    def __init__(self, _id: Optional[ObjectId] = None, **data):
        unknown = set(data) - set(self.fields)
        if unknown:
            raise InvalidArgument(f"Unknown fields for {self.__class__.__name__}: {sorted(unknown)}")
        self._id = _id if _id is not None else ObjectId()
        for name, field_type in self.fields.items():
            value = data.get(name)
            if value is None:
                value = field_type()
            elif field_type is list:
                value = list(value)
            setattr(self, name, value)

    def __repr__(self):
        return f"{self.__class__.__name__}(_id={self._id!r})"

    def to_mongo(self) -> Dict[str, Any]:
        """Serialize to a MongoDB document"""
        doc = {'_id': self._id}
        for name, field_type in self.fields.items():
            value = getattr(self, name)
            doc[name] = list(value) if field_type is list else value
        return doc

    def save(self) -> 'Document':
        """Insert or replace the stored document"""
        self.get_collection().replace_one({'_id': self._id}, self.to_mongo(), upsert=True)
        return self

    @classmethod
    def from_mongo(cls, doc: Dict[str, Any]) -> 'Document':
        data = {name: doc.get(name) for name in cls.fields}
        return cls(_id=doc['_id'], **data)

    @classmethod
    def get_collection(cls):
        return get_collection(cls.collection_name)

    @classmethod
    def find(cls, conditions: Optional[Dict[str, Any]] = None) -> Query:
        return Query(cls, conditions)

    @classmethod
    def find_by_id(cls, doc_id) -> Optional['Document']:
        """Find a document by ID"""
        doc = cls.get_collection().find_one({'_id': to_object_id(doc_id)})
        if doc is None:
            return None
        return cls.from_mongo(doc)

    @classmethod
    def update(cls, conditions: Dict[str, Any], update: Dict[str, Any]) -> int:
        """Apply `update` to the single document matching `conditions`.

        The match and the write happen as one atomic step on the server.
        Returns the number of documents modified (0 or 1).
        """
        result = cls.get_collection().update_one(conditions, update)
        return result.modified_count
