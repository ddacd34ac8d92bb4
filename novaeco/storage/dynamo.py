"""DynamoDB-backed storage for the AWS deployment."""

import logging
import boto3
from botocore.exceptions import BotoCoreError, ClientError
from .base import CollectionStore, StorageError

logger = logging.getLogger(__name__)

KEY_ATTRIBUTE = 'collection_key'
PAYLOAD_ATTRIBUTE = 'payload'


class DynamoCollectionStore(CollectionStore):
    """One item per collection key.
    
    The table must exist (create it in the AWS console first) with
    ``collection_key`` (string) as its partition key.
    """
    
    def __init__(self, table):
        self.table = table
    
    @classmethod
    def from_config(cls, table_name, region):
        dynamodb = boto3.resource('dynamodb', region_name=region)
        return cls(dynamodb.Table(table_name))
    
    def _read(self, key):
        try:
            response = self.table.get_item(Key={KEY_ATTRIBUTE: key})
        except (BotoCoreError, ClientError) as e:
            raise StorageError(str(e)) from e
        item = response.get('Item')
        return item.get(PAYLOAD_ATTRIBUTE) if item else None
    
    def _write(self, key, payload):
        try:
            self.table.put_item(Item={KEY_ATTRIBUTE: key, PAYLOAD_ATTRIBUTE: payload})
        except (BotoCoreError, ClientError) as e:
            logger.error('Failed to save collection %r: %s', key, e)
            raise StorageError(str(e)) from e
    
    def _delete(self, key):
        try:
            self.table.delete_item(Key={KEY_ATTRIBUTE: key})
        except (BotoCoreError, ClientError) as e:
            logger.error('Failed to remove collection %r: %s', key, e)
            raise StorageError(str(e)) from e
