"""Contact message model."""

from dataclasses import dataclass, asdict
from enum import Enum


class MessageStatus(str, Enum):
    PENDING = 'pending'
    APPROVED = 'approved'
    FULFILLED = 'fulfilled'


@dataclass
class ContactMessage:
    """Contact form message."""
    id: str
    name: str
    email: str
    message: str
    timestamp: str  # ISO-8601, set once on creation
    status: str = MessageStatus.PENDING.value
    
    def to_dict(self):
        return asdict(self)
    
    @classmethod
    def from_dict(cls, data):
        return cls(
            id=str(data['id']),
            name=data['name'],
            email=data['email'],
            message=data['message'],
            timestamp=data['timestamp'],
            status=MessageStatus(data.get('status', MessageStatus.PENDING.value)).value,
        )
    
    def __repr__(self):
        return f'<ContactMessage {self.id} {self.status}>'
