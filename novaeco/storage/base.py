"""Whole-collection JSON storage."""

import copy
import json
import logging

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when a backend cannot be read or written."""


class CollectionStore:
    """Load and save named collections as JSON blobs.
    
    Every save replaces the full blob stored under the key. Reads never
    raise: a missing key, an unavailable backend or a corrupt blob all
    fall back to a copy of the caller's default.
    
    Subclasses implement ``_read``, ``_write`` and ``_delete`` and raise
    ``StorageError`` when the backend fails.
    """
    
    def load(self, key, default=None):
        try:
            raw = self._read(key)
        except StorageError as e:
            logger.warning('Storage unavailable reading %r, using default: %s', key, e)
            return copy.deepcopy(default)
        
        if raw is None:
            return copy.deepcopy(default)
        
        try:
            return json.loads(raw)
        except (TypeError, ValueError) as e:
            logger.warning('Corrupt data under %r, using default: %s', key, e)
            return copy.deepcopy(default)
    
    def save(self, key, collection):
        self._write(key, json.dumps(collection))
    
    def remove(self, key):
        self._delete(key)
    
    def _read(self, key):
        raise NotImplementedError
    
    def _write(self, key, payload):
        raise NotImplementedError
    
    def _delete(self, key):
        raise NotImplementedError
