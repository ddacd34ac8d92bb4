import os
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv()

DEFAULT_SECRET_KEY = 'dev-secret-key-change-in-production'


class Config:
    """Base configuration."""
    SECRET_KEY = os.environ.get('SECRET_KEY') or DEFAULT_SECRET_KEY
    
    # CSRF Configuration
    WTF_CSRF_ENABLED = True
    WTF_CSRF_TIME_LIMIT = 3600  # 1 hour
    
    # Session cookie doubles as the client's durable storage for the login snapshot
    PERMANENT_SESSION_LIFETIME = timedelta(days=30)
    
    # Database - Using SQLite for easy local development
    basedir = os.path.dirname(os.path.dirname(__file__))
    INSTANCE_DIR = os.path.join(basedir, 'instance')
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        f'sqlite:///{os.path.join(INSTANCE_DIR, "nova_eco.db")}'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    
    # Collection storage: sql, dynamodb or memory
    STORAGE_BACKEND = os.environ.get('STORAGE_BACKEND', 'sql')
    DYNAMODB_TABLE = os.environ.get('DYNAMODB_TABLE', 'NovaEco_Collections')
    AWS_REGION = os.environ.get('AWS_REGION', 'us-east-1')
    PRODUCTS_KEY = 'products'
    MESSAGES_KEY = 'contactMessages'
    AUTH_KEY = 'auth'
    
    # Admin credential (generate the hash with create_admin.py)
    ADMIN_EMAIL = os.environ.get('ADMIN_EMAIL')
    ADMIN_PASSWORD_HASH = os.environ.get('ADMIN_PASSWORD_HASH')
    
    # Email relay (EmailJS)
    EMAILJS_API_URL = os.environ.get('EMAILJS_API_URL', 'https://api.emailjs.com/api/v1.0/email/send')
    EMAILJS_SERVICE_ID = os.environ.get('EMAILJS_SERVICE_ID')
    EMAILJS_TEMPLATE_ID = os.environ.get('EMAILJS_TEMPLATE_ID')
    EMAILJS_PUBLIC_KEY = os.environ.get('EMAILJS_PUBLIC_KEY')
    EMAILJS_PRIVATE_KEY = os.environ.get('EMAILJS_PRIVATE_KEY')
    EMAIL_RECIPIENT_NAME = os.environ.get('EMAIL_RECIPIENT_NAME', 'Nova Eco-Packaging')
    EMAIL_RELAY_TIMEOUT = int(os.environ.get('EMAIL_RELAY_TIMEOUT', 10))
    
    COMPANY_NAME = 'Nova Eco-Packaging'
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    

class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    SQLALCHEMY_ECHO = False


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    SESSION_COOKIE_SECURE = True
    

class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    WTF_CSRF_ENABLED = False
    ADMIN_EMAIL = 'admin@novaecopackaging.com'
    ADMIN_PASSWORD_HASH = None
    EMAILJS_SERVICE_ID = 'service_test'
    EMAILJS_TEMPLATE_ID = 'template_test'
    EMAILJS_PUBLIC_KEY = 'public_test'


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
