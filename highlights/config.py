"""
Configuration management for the Highlights backend
"""
import os
from pathlib import Path


class Config:
    """Base configuration"""

    # Flask
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # CORS
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', 'http://localhost:3000,http://localhost:3001').split(',')

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Remote document storage (GitHub contents API); all three are needed for remote mode
    GITHUB_TOKEN = os.environ.get('GITHUB_TOKEN')
    REPO_OWNER = os.environ.get('REPO_OWNER')
    REPO_NAME = os.environ.get('REPO_NAME')
    REPO_BRANCH = os.environ.get('REPO_BRANCH')
    GITHUB_API_URL = os.environ.get('GITHUB_API_URL', 'https://api.github.com')
    REMOTE_TIMEOUT = float(os.environ.get('REMOTE_TIMEOUT', 10))

    # Document paths inside the repository
    POSTS_PATH = os.environ.get('POSTS_PATH', 'data/posts.json')
    PROJECTS_PATH = os.environ.get('PROJECTS_PATH', 'data/projects.json')

    # Local fallback storage
    LOCAL_STORE_DIR = Path(os.environ.get('LOCAL_STORE_DIR', './local_data')).resolve()


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    # Tests opt into remote storage explicitly
    GITHUB_TOKEN = None


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env=None):
    """Get configuration based on environment"""
    if env is None:
        env = os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
