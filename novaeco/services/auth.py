"""Admin authentication gate."""

import logging
from novaeco.extensions import bcrypt
from novaeco.models import AdminUser

logger = logging.getLogger(__name__)


class AuthGate:
    """Anonymous / authenticated-admin state for one client.
    
    A successful login writes a snapshot of the session to ``store``; a new
    gate built over the same store restores it without asking for the
    password again. Logout removes the snapshot.
    """
    
    def __init__(self, credential, store, key='auth', hasher=None):
        self.credential = credential
        self.store = store
        self.key = key
        self.hasher = hasher or bcrypt
        self.user = None
        self._restore()
    
    @property
    def is_authenticated(self):
        return self.user is not None
    
    @property
    def is_admin(self):
        return self.user is not None and self.user.is_admin()
    
    def _restore(self):
        snapshot = self.store.load(self.key, default=None)
        if not isinstance(snapshot, dict):
            return
        if not (snapshot.get('isAuthenticated') and snapshot.get('isAdmin')):
            return
        
        user = snapshot.get('user')
        email = user.get('email') if isinstance(user, dict) else None
        if not self.credential.matches_email(email):
            logger.warning('Ignoring stored session for %s, not the configured admin', email)
            return
        self.user = AdminUser(self.credential.email, user_id=str(user.get('id', '1')))
    
    def login(self, email, password):
        """Check the credentials; True if the admin is now logged in."""
        if not self.credential.is_configured:
            logger.warning('Admin login attempted but no admin credential is configured')
            return False
        
        if not self.credential.matches_email(email) or not self._check_password(password):
            logger.warning('Failed admin login for %s', email)
            return False
        
        self.user = AdminUser(self.credential.email)
        self.store.save(self.key, self.snapshot())
        logger.info('Admin %s logged in', self.user.email)
        return True
    
    def _check_password(self, password):
        try:
            return self.hasher.check_password_hash(self.credential.password_hash, password or '')
        except ValueError as e:
            logger.error('Configured admin password hash is invalid: %s', e)
            return False
    
    def logout(self):
        if self.user is not None:
            logger.info('Admin %s logged out', self.user.email)
        self.user = None
        self.store.remove(self.key)
    
    def snapshot(self):
        return {
            'isAuthenticated': self.is_authenticated,
            'isAdmin': self.is_admin,
            'user': self.user.to_dict() if self.user else None,
        }
