"""Tests for the collection storage backends."""

import pytest
from botocore.exceptions import ClientError
from flask import session

from novaeco.storage import (
    CollectionStore,
    MemoryCollectionStore,
    SessionCollectionStore,
    StorageError,
    build_store,
)
from novaeco.storage.dynamo import DynamoCollectionStore
from novaeco.storage.sql import SQLCollectionStore


class BrokenStore(CollectionStore):
    """Backend that is always unavailable."""

    def _read(self, key):
        raise StorageError('backend down')

    def _write(self, key, payload):
        raise StorageError('backend down')

    def _delete(self, key):
        raise StorageError('backend down')


class FakeTable:
    """Minimal stand-in for a boto3 DynamoDB Table."""

    def __init__(self, fail_with=None):
        self.items = {}
        self.fail_with = fail_with

    def _maybe_fail(self, operation):
        if self.fail_with:
            raise ClientError({'Error': {'Code': self.fail_with, 'Message': 'boom'}}, operation)

    def get_item(self, Key):
        self._maybe_fail('GetItem')
        item = self.items.get(Key['collection_key'])
        return {'Item': item} if item else {}

    def put_item(self, Item):
        self._maybe_fail('PutItem')
        self.items[Item['collection_key']] = Item

    def delete_item(self, Key):
        self._maybe_fail('DeleteItem')
        self.items.pop(Key['collection_key'], None)


SAMPLE = [{'id': '1', 'name': 'Box', 'price': 2.5}, {'id': '2', 'name': 'Mailer', 'price': 0}]


class TestCollectionStore:
    """Behaviour shared by every backend, exercised on the memory store."""

    def test_round_trip(self, store):
        store.save('products', SAMPLE)
        assert store.load('products') == SAMPLE

    def test_missing_key_returns_default(self, store):
        assert store.load('products', default=[]) == []
        assert store.load('auth') is None

    def test_default_is_copied(self, store):
        default = [{'id': '1'}]
        loaded = store.load('products', default=default)
        loaded.append({'id': '2'})
        loaded[0]['id'] = 'changed'
        assert default == [{'id': '1'}]

    def test_corrupt_json_falls_back_to_default(self, store):
        store.data['products'] = '{not json'
        assert store.load('products', default=['fallback']) == ['fallback']

    def test_save_replaces_whole_collection(self, store):
        store.save('products', SAMPLE)
        store.save('products', SAMPLE[:1])
        assert store.load('products') == SAMPLE[:1]

    def test_remove(self, store):
        store.save('auth', {'isAuthenticated': True})
        store.remove('auth')
        assert store.load('auth') is None

    def test_unavailable_backend_reads_default(self):
        assert BrokenStore().load('products', default=[]) == []

    def test_unavailable_backend_write_raises(self):
        with pytest.raises(StorageError):
            BrokenStore().save('products', SAMPLE)


class TestSQLCollectionStore:

    def test_round_trip(self, app):
        with app.app_context():
            store = SQLCollectionStore()
            store.save('contactMessages', SAMPLE)
            assert store.load('contactMessages') == SAMPLE

    def test_overwrite_and_remove(self, app):
        with app.app_context():
            store = SQLCollectionStore()
            store.save('products', SAMPLE)
            store.save('products', [])
            assert store.load('products', default=SAMPLE) == []

            store.remove('products')
            assert store.load('products', default=SAMPLE) == SAMPLE

    def test_remove_missing_key_is_noop(self, app):
        with app.app_context():
            SQLCollectionStore().remove('never-saved')


class TestDynamoCollectionStore:

    def test_round_trip(self):
        table = FakeTable()
        store = DynamoCollectionStore(table)
        store.save('products', SAMPLE)

        assert 'payload' in table.items['products']
        assert store.load('products') == SAMPLE

    def test_remove(self):
        store = DynamoCollectionStore(FakeTable())
        store.save('auth', {'isAuthenticated': True})
        store.remove('auth')
        assert store.load('auth', default={}) == {}

    def test_client_error_on_read_falls_back(self):
        store = DynamoCollectionStore(FakeTable(fail_with='ResourceNotFoundException'))
        assert store.load('products', default=[]) == []

    def test_client_error_on_write_raises(self):
        store = DynamoCollectionStore(FakeTable(fail_with='ProvisionedThroughputExceededException'))
        with pytest.raises(StorageError):
            store.save('products', SAMPLE)


class TestSessionCollectionStore:

    def test_round_trip_marks_session_permanent(self, app):
        with app.test_request_context('/'):
            store = SessionCollectionStore(session)
            store.save('auth', {'isAuthenticated': True})

            assert session.permanent is True
            assert store.load('auth') == {'isAuthenticated': True}

    def test_remove(self, app):
        with app.test_request_context('/'):
            store = SessionCollectionStore(session)
            store.save('auth', {'isAuthenticated': True})
            store.remove('auth')
            assert 'auth' not in session


class TestBuildStore:

    def test_memory_backend(self):
        assert isinstance(build_store({'STORAGE_BACKEND': 'memory'}), MemoryCollectionStore)

    def test_sql_is_default(self):
        assert isinstance(build_store({}), SQLCollectionStore)

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            build_store({'STORAGE_BACKEND': 'floppy'})
