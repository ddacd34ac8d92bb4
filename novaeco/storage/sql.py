"""SQL-backed storage through Flask-SQLAlchemy."""

import logging
from sqlalchemy.exc import SQLAlchemyError
from novaeco.extensions import db
from novaeco.models import StoredCollection
from .base import CollectionStore, StorageError

logger = logging.getLogger(__name__)


class SQLCollectionStore(CollectionStore):
    """One row per collection key in ``stored_collections``.
    
    Needs an application context.
    """
    
    def _read(self, key):
        try:
            row = db.session.get(StoredCollection, key)
        except SQLAlchemyError as e:
            db.session.rollback()
            raise StorageError(str(e)) from e
        return row.payload if row else None
    
    def _write(self, key, payload):
        try:
            row = db.session.get(StoredCollection, key)
            if row is None:
                db.session.add(StoredCollection(key=key, payload=payload))
            else:
                row.payload = payload
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error('Failed to save collection %r: %s', key, e)
            raise StorageError(str(e)) from e
    
    def _delete(self, key):
        try:
            row = db.session.get(StoredCollection, key)
            if row is not None:
                db.session.delete(row)
                db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error('Failed to remove collection %r: %s', key, e)
            raise StorageError(str(e)) from e
