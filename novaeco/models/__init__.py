"""Models package."""

from .product import Product, ProductIcon, DEFAULT_PRODUCTS
from .contact import ContactMessage, MessageStatus
from .user import AdminUser, AdminCredential
from .collection import StoredCollection

__all__ = [
    'Product',
    'ProductIcon',
    'DEFAULT_PRODUCTS',
    'ContactMessage',
    'MessageStatus',
    'AdminUser',
    'AdminCredential',
    'StoredCollection',
]
