"""Contact message inbox."""

import logging
import threading
from dataclasses import replace
from datetime import datetime, timezone
from novaeco.models import ContactMessage, MessageStatus
from novaeco.utils.ids import new_id, drop_duplicate_ids

logger = logging.getLogger(__name__)

ALL = 'all'


class InvalidMessageError(ValueError):
    """Contact message input failed validation."""


def parse_status(value):
    """Return the status value for ``value`` or raise InvalidMessageError."""
    try:
        return MessageStatus(value).value
    except ValueError:
        raise InvalidMessageError(f'Unknown status: {value!r}') from None


class ContactInbox:
    """Contact messages, newest first, written through to the store.
    
    Request threads share one inbox; every mutation holds ``_lock`` from
    id generation through the save.
    """
    
    def __init__(self, store, key='contactMessages'):
        self.store = store
        self.key = key
        self._lock = threading.Lock()
        self._messages = self._load()
    
    def _load(self):
        records = self.store.load(self.key, default=[])
        try:
            messages = [ContactMessage.from_dict(record) for record in records]
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.warning('Unreadable message data under %r, starting empty: %s', self.key, e)
            return []
        return drop_duplicate_ids(messages, self.key)
    
    def _save(self):
        self.store.save(self.key, [m.to_dict() for m in self._messages])
    
    def _find(self, message_id):
        for message in self._messages:
            if message.id == message_id:
                return message
        return None
    
    def list(self):
        """All messages, newest first."""
        with self._lock:
            return [replace(m) for m in self._messages]
    
    def get(self, message_id):
        with self._lock:
            message = self._find(message_id)
            return replace(message) if message else None
    
    def filter(self, status=None):
        """Messages with the given status, newest first; None or 'all' for every message."""
        if status is None or status == ALL:
            return self.list()
        status = parse_status(status)
        return [m for m in self.list() if m.status == status]
    
    def counts(self):
        """Number of messages per status, plus 'all'."""
        with self._lock:
            counts = {ALL: len(self._messages)}
            for status in MessageStatus:
                counts[status.value] = sum(1 for m in self._messages if m.status == status.value)
        return counts
    
    def add(self, name, email, message):
        """Record a new pending message and return it."""
        fields = {'name': name, 'email': email, 'message': message}
        missing = [k for k, v in fields.items() if not isinstance(v, str) or not v.strip()]
        if missing:
            raise InvalidMessageError(f'Missing required fields: {", ".join(missing)}')
        
        with self._lock:
            contact_message = ContactMessage(
                id=new_id({m.id for m in self._messages}),
                name=name.strip(),
                email=email.strip(),
                message=message.strip(),
                timestamp=datetime.now(timezone.utc).isoformat(),
                status=MessageStatus.PENDING.value,
            )
            self._messages.insert(0, contact_message)
            self._save()
        logger.info('Recorded contact message %s from %s', contact_message.id, contact_message.email)
        return replace(contact_message)
    
    def set_status(self, message_id, status):
        """Overwrite a message's status. Returns None if it does not exist.
        
        A missing id wins over an unknown ``status``.
        """
        with self._lock:
            message = self._find(message_id)
            if message is None:
                logger.info('Status change skipped, no message %s', message_id)
                return None
            
            message.status = parse_status(status)
            self._save()
            updated = replace(message)
        logger.info('Message %s marked as %s', message_id, updated.status)
        return updated
    
    def delete(self, message_id):
        """Remove a message. Returns False if it does not exist."""
        with self._lock:
            message = self._find(message_id)
            if message is None:
                logger.info('Delete skipped, no message %s', message_id)
                return False
            
            self._messages.remove(message)
            self._save()
        logger.info('Deleted message %s', message_id)
        return True
