"""Collection storage backends."""

from .base import CollectionStore, StorageError
from .memory import MemoryCollectionStore
from .session import SessionCollectionStore


def build_store(config):
    """Create the shared store selected by ``STORAGE_BACKEND``."""
    backend = config.get('STORAGE_BACKEND', 'sql')
    
    if backend == 'sql':
        from .sql import SQLCollectionStore
        return SQLCollectionStore()
    if backend == 'dynamodb':
        from .dynamo import DynamoCollectionStore
        return DynamoCollectionStore.from_config(config['DYNAMODB_TABLE'], config['AWS_REGION'])
    if backend == 'memory':
        return MemoryCollectionStore()
    
    raise ValueError(f'Unknown STORAGE_BACKEND: {backend}')


__all__ = [
    'CollectionStore',
    'StorageError',
    'MemoryCollectionStore',
    'SessionCollectionStore',
    'build_store',
]
