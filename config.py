import os
from dotenv import load_dotenv

# Load .env file only in development environment
if os.environ.get('FLASK_ENV') != 'production':
    load_dotenv()

REQUIRED_SETTINGS = ('SUPABASE_URL', 'SUPABASE_ANON_KEY', 'MONGODB_URI')


class Config:
    SUPABASE_URL = os.environ.get('SUPABASE_URL')
    SUPABASE_ANON_KEY = os.environ.get('SUPABASE_ANON_KEY')
    SUPABASE_TABLE = os.environ.get('SUPABASE_TABLE', 'summaries')
    MONGODB_URI = os.environ.get('MONGODB_URI')
    MONGODB_DATABASE = os.environ.get('MONGODB_DATABASE', 'blog_scraper')
    MONGODB_COLLECTION = os.environ.get('MONGODB_COLLECTION', 'articles')
    MONGODB_TIMEOUT_MS = int(os.environ.get('MONGODB_TIMEOUT_MS', 5000))
    EXTRACTION_TIMEOUT_SECONDS = int(os.environ.get('EXTRACTION_TIMEOUT_SECONDS', 10))
    FLASK_ENV = os.environ.get('FLASK_ENV', 'development')
    FLASK_DEBUG = os.environ.get('FLASK_DEBUG', 'False').lower() == 'true'
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

    @classmethod
    def missing_settings(cls):
        """Names of required store settings that are absent or empty."""
        return [name for name in REQUIRED_SETTINGS if not getattr(cls, name, None)]


class DevelopmentConfig(Config):
    DEBUG = True


class ProductionConfig(Config):
    DEBUG = False
    FLASK_ENV = 'production'


def get_config():
    env = os.environ.get('FLASK_ENV', 'development')
    if env == 'development':
        return DevelopmentConfig
    return ProductionConfig
