# coding: utf8
import os


def _database_uri():
    if os.environ.get("DATABASE_URL"):
        return os.environ["DATABASE_URL"]
    return "{engine}://{user}:{password}@{host}:{port}/{db}".format(
        engine=os.environ.get("SQLALCHEMY_ENGINE") or "mysql+pymysql",
        user=os.environ.get("SQLALCHEMY_USER") or "root",
        password=os.environ.get("SQLALCHEMY_PASSWORD") or "",
        host=os.environ.get("SQLALCHEMY_HOST") or "127.0.0.1",
        port=int(os.environ.get("SQLALCHEMY_PORT", 3306)),
        db=os.environ.get("SQLALCHEMY_DATABASE") or "storefront",
    )


class Config(object):
    SECRET_KEY = os.environ.get("SECRET_KEY") or "<your secret key>"
    SITE_URL = (
        os.environ.get("SITE_URL")
        or os.environ.get("NEXT_PUBLIC_SITE_URL")
        or "http://localhost:3000"
    )
    COMPANY_ADDRESS = os.environ.get("COMPANY_ADDRESS") or ""
    COMPANY_PHONE = os.environ.get("COMPANY_PHONE") or ""

    ORDER_NUMBER_PREFIX = os.environ.get("ORDER_NUMBER_PREFIX") or "TSF"
    ADMIN_API_TOKEN = os.environ.get("ADMIN_API_TOKEN") or ""

    REDIS_URL = os.environ.get("REDIS_URL") or "redis://localhost:6379/0"

    SQLALCHEMY_DATABASE_URI = _database_uri()
    SQLALCHEMY_ENGINE_OPTIONS = {
        "pool_size": 20,
        "max_overflow": 50,
        "pool_timeout": 10,
        "pool_recycle": 900,
        "pool_pre_ping": True,
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    WHATSAPP_API_URL = (
        os.environ.get("WHATSAPP_API_URL") or "https://graph.facebook.com"
    )
    WHATSAPP_API_VERSION = os.environ.get("WHATSAPP_API_VERSION") or "v21.0"

    PROPAGATE_EXCEPTIONS = os.environ.get("FLASK_CONFIG") == "production"
    ERROR_INCLUDE_MESSAGE = False
    RESTX_ERROR_404_HELP = False


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SQLALCHEMY_ENGINE_OPTIONS = {}
    REDIS_URL = "redis://localhost:6379/15"
    ADMIN_API_TOKEN = "test-admin-token"
    SITE_URL = "https://shop.example.com"


class DevelopmentConfig(Config):
    DEBUG = True


class ProductionConfig(Config):
    DEBUG = False
    TESTING = False


configs = {
    "develop": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}
