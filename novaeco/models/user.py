"""Admin identity and credential."""

from flask_login import UserMixin


class AdminUser(UserMixin):
    """The single admin account."""
    
    def __init__(self, email, user_id='1', role='admin'):
        self.id = user_id
        self.email = email
        self.role = role
    
    def is_admin(self):
        """Check if user is admin."""
        return self.role == 'admin'
    
    def to_dict(self):
        return {'id': self.id, 'email': self.email, 'role': self.role}
    
    def __repr__(self):
        return f'<AdminUser {self.email}>'


class AdminCredential:
    """Configured admin email and bcrypt password hash."""
    
    def __init__(self, email, password_hash):
        self.email = normalize_email(email) if email else None
        self.password_hash = password_hash
    
    @classmethod
    def from_config(cls, config):
        return cls(config.get('ADMIN_EMAIL'), config.get('ADMIN_PASSWORD_HASH'))
    
    @property
    def is_configured(self):
        return bool(self.email and self.password_hash)
    
    def matches_email(self, email):
        return bool(self.email) and normalize_email(email or '') == self.email


def normalize_email(email):
    return email.strip().lower()
