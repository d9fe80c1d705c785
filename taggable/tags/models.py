"""
Tag operations for documents

Adds the ability to add and remove tags on a document, and to filter queries
by tags. Meant to be used like GitHub's issue labels.

Local operations (`add_tag`, `remove_tag`) only change the in-memory
instance; call `save()` afterwards to persist. Atomic operations
(`add_tag_atomic`, `remove_tag_atomic`) run a conditional update on the
database, so the "already tagged?" check happens server side in the same step
as the write, and then mirror the accepted change on the local instance.

No index is created on the tags path; a compound index with other fields of
the collection is usually the better choice.
"""
from typing import Any, Dict, Iterable, List, Optional, Union
from taggable.config.config import logger
from taggable.core.exceptions import InvalidArgument
from taggable.documents.models import Query

DEFAULT_TAGS_PATH = 'tags'


def validate_tag(tag: Any) -> str:
    """Reject anything that is not a non-empty string"""
    if not isinstance(tag, str) or not tag.strip():
        raise InvalidArgument(f"Tag must be a non-empty string, got {tag!r}")
    return tag


def _unique(tags: Optional[Iterable[str]]) -> List[str]:
    if isinstance(tags, str):
        raise InvalidArgument(f"Expected a collection of tags, got the string {tags!r}")
    if not tags:
        return []
    return list(dict.fromkeys(tags))


def build_tag_conditions(path: str, include_tags: Optional[Iterable[str]] = None,
                         exclude_tags: Optional[Iterable[str]] = None) -> List[Dict[str, Any]]:
    """Build query conditions for tag presence/absence.

    `include_tags`: the document must have every one of these tags.
    `exclude_tags`: the document must NOT have all of these tags together.
    A document missing at least one of them still matches.
    """
    conditions = []

    include_tags = _unique(include_tags)
    if include_tags:
        conditions.append({path: {'$all': include_tags}})

    exclude_tags = _unique(exclude_tags)
    if exclude_tags:
        conditions.append({path: {'$not': {'$all': exclude_tags}}})

    return conditions


class TaggableMixin:
    """Tag operations, mixed into a Document subclass by make_taggable()"""

    tags_path: str = DEFAULT_TAGS_PATH

    def _tags(self) -> List[str]:
        return getattr(self, self.tags_path)

    def has_tag(self, tag: str) -> bool:
        """Whether the in-memory instance has the tag"""
        return tag in self._tags()

    def add_tag(self, tag: str) -> bool:
        """Add a tag to the local instance only.

        Returns False if the tag already existed, True if it was added.
        """
        validate_tag(tag)
        tags = self._tags()
        if tag in tags:
            return False
        tags.append(tag)
        return True

    def remove_tag(self, tag: str) -> bool:
        """Remove a tag from the local instance only.

        Returns False if the tag didn't exist, True if it was removed.
        """
        validate_tag(tag)
        tags = self._tags()
        if tag not in tags:
            return False
        tags.remove(tag)
        return True

    def add_tag_atomic(self, tag: str) -> bool:
        """Add a tag to the stored document atomically, then to this instance.

        Returns False if the stored document already had the tag, True if it
        was added. Store errors propagate and leave this instance unchanged.
        """
        validate_tag(tag)
        path = self.tags_path

        conditions = {'_id': self._id, path: {'$ne': tag}}
        update = {'$push': {path: tag}}

        added = self.__class__.update(conditions, update) > 0

        if added:
            tags = self._tags()
            if tag not in tags:
                tags.append(tag)
            logger.info(f"Added tag '{tag}' to {self.collection_name} {self._id}")
        else:
            logger.debug(f"{self.collection_name} {self._id} already tagged '{tag}'")

        return added

    def remove_tag_atomic(self, tag: str) -> bool:
        """Remove a tag from the stored document atomically, then from this instance.

        Returns False if the stored document didn't have the tag, True if it
        was removed. Store errors propagate and leave this instance unchanged.
        """
        validate_tag(tag)
        path = self.tags_path

        conditions = {'_id': self._id, path: tag}
        update = {'$pull': {path: tag}}

        removed = self.__class__.update(conditions, update) > 0

        if removed:
            tags = self._tags()
            while tag in tags:
                tags.remove(tag)
            logger.info(f"Removed tag '{tag}' from {self.collection_name} {self._id}")
        else:
            logger.debug(f"{self.collection_name} {self._id} has no tag '{tag}'")

        return removed

    @classmethod
    def filter_by_tags(cls, query: Union[Query, Dict[str, Any]],
                       include_tags: Optional[Iterable[str]] = None,
                       exclude_tags: Optional[Iterable[str]] = None) -> Union[Query, Dict[str, Any]]:
        """Alter a query to filter by tags.

        A Query is augmented in place and returned. A plain filter dict is
        left alone and a new dict with the extra conditions is returned.
        With no tags given the query is returned unchanged.
        """
        conditions = build_tag_conditions(cls.tags_path, include_tags, exclude_tags)
        if not conditions:
            return query

        if isinstance(query, dict):
            combined = dict(query)
            combined['$and'] = list(query.get('$and', [])) + conditions
            return combined

        return query.and_(conditions)

    @classmethod
    def find_by_tags(cls, include_tags: Optional[Iterable[str]] = None,
                     exclude_tags: Optional[Iterable[str]] = None) -> Query:
        return cls.filter_by_tags(cls.find(), include_tags, exclude_tags)


def make_taggable(document_cls, path: str = DEFAULT_TAGS_PATH):
    """Return a subclass of `document_cls` that stores tags under `path`.

    The field is declared as a list of strings. `document_cls` itself is not
    modified.
    """
    if not isinstance(path, str) or not path or path == '_id':
        raise InvalidArgument(f"Invalid tags path: {path!r}")

    fields = dict(document_cls.fields)
    fields[path] = list

    return type(document_cls.__name__, (TaggableMixin, document_cls), {
        'fields': fields,
        'tags_path': path,
        '__module__': document_cls.__module__,
        '__doc__': document_cls.__doc__,
    })
