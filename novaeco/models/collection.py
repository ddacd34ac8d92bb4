"""Stored collection model."""

from datetime import datetime
from novaeco.extensions import db


class StoredCollection(db.Model):
    """One JSON blob per collection key, replaced on every save."""
    __tablename__ = 'stored_collections'
    
    key = db.Column(db.String(100), primary_key=True)
    payload = db.Column(db.Text, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    
    def __repr__(self):
        return f'<StoredCollection {self.key}>'
