"""Application services and the per-app state that holds them."""

from flask import current_app, g, session
from novaeco.models import AdminCredential
from novaeco.storage import SessionCollectionStore, build_store
from .auth import AuthGate
from .catalog import ProductCatalog, InvalidProductError
from .contacts import ContactInbox, InvalidMessageError
from .email_relay import EmailRelay

STATE_KEY = 'novaeco'


class AppState:
    """Catalog, inbox and relay built once per application."""
    
    def __init__(self, catalog, inbox, relay):
        self.catalog = catalog
        self.inbox = inbox
        self.relay = relay
    
    @classmethod
    def from_app(cls, app):
        """Build the state from app config. Needs an application context."""
        store = build_store(app.config)
        return cls(
            catalog=ProductCatalog(store, key=app.config['PRODUCTS_KEY']),
            inbox=ContactInbox(store, key=app.config['MESSAGES_KEY']),
            relay=EmailRelay.from_config(app.config),
        )


def get_state():
    return current_app.extensions[STATE_KEY]


def current_gate():
    """Auth gate for the current request, backed by the session cookie."""
    if 'auth_gate' not in g:
        g.auth_gate = AuthGate(
            AdminCredential.from_config(current_app.config),
            SessionCollectionStore(session),
            key=current_app.config['AUTH_KEY'],
        )
    return g.auth_gate


__all__ = [
    'AppState',
    'AuthGate',
    'ContactInbox',
    'EmailRelay',
    'InvalidMessageError',
    'InvalidProductError',
    'ProductCatalog',
    'current_gate',
    'get_state',
]
