import os
from datetime import timedelta


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Base configuration"""

    # Flask Settings
    SECRET_KEY = os.environ.get('SESSION_SECRET', 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION')
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)
    SESSION_COOKIE_SECURE = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Database Settings
    _database_url = os.environ.get('DATABASE_URL')
    if not _database_url:
        pg_user = os.environ.get('PGUSER')
        pg_pass = os.environ.get('PGPASSWORD')
        pg_host = os.environ.get('PGHOST')
        pg_port = os.environ.get('PGPORT')
        pg_db = os.environ.get('PGDATABASE')
        if all([pg_user, pg_pass, pg_host, pg_port, pg_db]):
            _database_url = f"postgresql://{pg_user}:{pg_pass}@{pg_host}:{pg_port}/{pg_db}"

    if _database_url and _database_url.startswith("postgres://"):
        _database_url = _database_url.replace("postgres://", "postgresql://", 1)

    SQLALCHEMY_DATABASE_URI = _database_url or 'sqlite:///portfolio.db'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_size': 10,
        'pool_recycle': 3600,
        'pool_pre_ping': True,
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Admin Settings
    ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME')
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD')
    ADMIN_PASSWORD_HASH = os.environ.get('ADMIN_PASSWORD_HASH')
    ADMIN_AUTH_REQUIRED = _env_flag('ADMIN_AUTH_REQUIRED', True)
    AUDIT_LOG_FILE = os.environ.get('AUDIT_LOG_FILE', 'security/audit_log.json')

    # Content behaviour toggles (see DESIGN.md, open questions)
    # False keeps the legacy 500 for missing experience/portfolio rows.
    STRICT_NOT_FOUND = _env_flag('STRICT_NOT_FOUND', False)
    # False reports projects as 0 and marks the count as pending.
    STATS_COUNT_PROJECTS = _env_flag('STATS_COUNT_PROJECTS', False)
    # Public timeline direction; the API always lists ascending.
    TIMELINE_ORDER = os.environ.get('TIMELINE_ORDER', 'desc')

    # Contact form delivery
    SMTP_HOST = os.environ.get('SMTP_HOST')
    SMTP_PORT = os.environ.get('SMTP_PORT', '587')
    SMTP_EMAIL = os.environ.get('SMTP_EMAIL')
    SMTP_PASSWORD = os.environ.get('SMTP_PASSWORD')
    CONTACT_RECIPIENT = os.environ.get('CONTACT_RECIPIENT')

    # Rate limiting for login and contact endpoints
    RATE_LIMIT_MAX_REQUESTS = 10
    RATE_LIMIT_WINDOW = 60  # seconds

    # Number of reverse proxies whose X-Forwarded-* headers are trusted (0 = none)
    TRUSTED_PROXY_COUNT = int(os.environ.get('TRUSTED_PROXY_COUNT', '0'))


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = True


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    # In-memory SQLite runs on a StaticPool which rejects pool_size.
    SQLALCHEMY_ENGINE_OPTIONS = {}
    ADMIN_USERNAME = 'admin'
    ADMIN_PASSWORD = 'admin-pass'
    ADMIN_PASSWORD_HASH = None
    TRUSTED_PROXY_COUNT = 0
    ADMIN_AUTH_REQUIRED = True
    AUDIT_LOG_FILE = None
    STRICT_NOT_FOUND = False
    STATS_COUNT_PROJECTS = False
    TIMELINE_ORDER = 'desc'
    SMTP_HOST = None
    SMTP_EMAIL = None
    SMTP_PASSWORD = None
    CONTACT_RECIPIENT = None


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(config_name=None):
    """Get configuration by name, falling back to FLASK_ENV"""
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
