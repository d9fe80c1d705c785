"""
Pytest fixtures

Every test runs against a fresh in-memory MongoDB (mongomock).
"""
import mongomock
import pytest

from taggable.database import db
from taggable.documents.models import Document
from taggable.tags.models import make_taggable


class Item(Document):
    collection_name = 'items'
    fields = {'title': str}


# Stored under a custom path to exercise the path option
Item = make_taggable(Item, path='labels')


@pytest.fixture(autouse=True)
def mongo_client():
    """Install a mongomock client for the duration of a test"""
    client = mongomock.MongoClient()
    db.set_client(client)
    yield client
    db.set_client(None)


@pytest.fixture
def item_model():
    return Item


@pytest.fixture
def stored_item():
    """Factory that saves an Item with the given labels"""
    def _create(labels, title='item'):
        return Item(title=title, labels=labels).save()
    return _create


@pytest.fixture
def app():
    from taggable.core.app import create_app

    app = create_app()
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
