"""Per-client storage in the signed Flask session cookie."""

from .base import CollectionStore


class SessionCollectionStore(CollectionStore):
    """Stores blobs in a Flask session.
    
    Writes mark the session permanent so the cookie outlives the browser
    session (``PERMANENT_SESSION_LIFETIME``).
    """
    
    def __init__(self, session):
        self.session = session
    
    def _read(self, key):
        return self.session.get(key)
    
    def _write(self, key, payload):
        self.session[key] = payload
        self.session.permanent = True
    
    def _delete(self, key):
        self.session.pop(key, None)
