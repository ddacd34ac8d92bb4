"""In-process storage for local development and tests."""

from .base import CollectionStore


class MemoryCollectionStore(CollectionStore):
    """Keeps blobs in a dict; contents are lost when the process exits."""
    
    def __init__(self, data=None):
        self.data = data if data is not None else {}
    
    def _read(self, key):
        return self.data.get(key)
    
    def _write(self, key, payload):
        self.data[key] = payload
    
    def _delete(self, key):
        self.data.pop(key, None)
