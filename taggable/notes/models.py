"""
Note model
"""
from typing import Any, Dict
from taggable.config.config import TAGS_PATH, logger
from taggable.core.exceptions import InvalidArgument
from taggable.documents.models import Document
from taggable.tags.models import make_taggable


class Note(Document):
    """A titled note that can carry tags"""

    collection_name = 'notes'
    fields = {
        'title': str,
        'content': str,
    }


Note = make_taggable(Note, path=TAGS_PATH)


def create_note(data: Dict[str, Any]) -> Note:
    """Create and store a new note"""
    tags = data.get('tags', [])
    if not isinstance(tags, list):
        raise InvalidArgument('Tags must be a list')

    note = Note(title=data['title'], content=data.get('content', ''))
    for tag in tags:
        note.add_tag(tag)
    note.save()

    logger.info(f"Created note: {note.title} with ID: {note._id}")
    return note
