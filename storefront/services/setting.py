import json
import os

from redis.exceptions import RedisError
from sqlalchemy.exc import SQLAlchemyError

from storefront import const
from storefront.extensions import db, redis_client
from storefront.lib.logger import log as logger
from storefront.lib.string import parse_list, serialize_list
from storefront.models.setting import Setting


def _default_general_settings():
    return {
        "site_title": "Astra",
        "tagline": "Three Star Foods website",
        "site_icon": "/images/favi-icon.svg",
        "admin_email": "",
        "whatsapp_contact_number": os.environ.get("WHATSAPP_CONTACT_NUMBER")
        or os.environ.get("NEXT_PUBLIC_WHATSAPP_NUMBER")
        or "",
    }


def _default_notification_settings():
    admin_email = os.environ.get("ADMIN_EMAIL")
    return {
        "order_emails": [admin_email or const.DEFAULT_ADMIN_EMAIL],
        "contact_emails": [
            os.environ.get("CONTACT_FORM_EMAIL")
            or admin_email
            or const.DEFAULT_CONTACT_EMAIL
        ],
        "order_whatsapp_numbers": [],
    }


def _default_smtp_settings():
    return {
        "host": os.environ.get("SMTP_HOST") or "",
        "port": _parse_port(os.environ.get("SMTP_PORT"), const.DEFAULT_SMTP_PORT),
        "user": os.environ.get("SMTP_USER") or "",
        "password": os.environ.get("SMTP_PASS") or "",
        "from_email": os.environ.get("MAIL_FROM_EMAIL")
        or os.environ.get("EMAIL_FROM")
        or const.DEFAULT_FROM_EMAIL,
        "from_name": os.environ.get("MAIL_FROM_NAME") or const.DEFAULT_FROM_NAME,
    }


def _default_whatsapp_settings():
    return {
        "access_token": os.environ.get("WHATSAPP_ACCESS_TOKEN") or "",
        "phone_number_id": os.environ.get("WHATSAPP_PHONE_NUMBER_ID") or "",
        "business_account_id": os.environ.get("WHATSAPP_BUSINESS_ACCOUNT_ID") or "",
    }


def _parse_port(value, default):
    try:
        port = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    return port if port > 0 else default


class SettingService:
    """Typed views over the ``setting`` key/value table.

    Every getter falls back to environment defaults, so a missing table, an
    empty row or an unreachable database never breaks the caller.
    """

    @staticmethod
    def get_settings():
        try:
            cache_data = redis_client.get(const.REDIS_KEY_ALL_SETTINGS)
            if cache_data:
                return json.loads(cache_data)
        except RedisError as e:
            logger.warning(f"[Settings] cache unavailable, reading database: {e}")

        settings = Setting.query.all()
        settings_dict = {
            setting.setting_name: setting.setting_value for setting in settings
        }

        try:
            redis_client.setex(
                const.REDIS_KEY_ALL_SETTINGS,
                const.SETTINGS_CACHE_TTL,
                json.dumps(settings_dict),
            )
        except RedisError as e:
            logger.warning(f"[Settings] could not refresh cache: {e}")
        return settings_dict

    @staticmethod
    def clear_settings_cache():
        try:
            redis_client.delete(const.REDIS_KEY_ALL_SETTINGS)
        except RedisError as e:
            logger.warning(f"[Settings] could not clear cache: {e}")

    @staticmethod
    def update_settings(values):
        for key, value in values.items():
            if isinstance(value, (list, tuple)):
                value = serialize_list(value)
            elif value is not None:
                value = str(value)

            setting = Setting.query.filter_by(setting_name=key).first()
            if setting:
                setting.setting_value = value
            else:
                db.session.add(Setting(setting_name=key, setting_value=value))
        db.session.commit()
        SettingService.clear_settings_cache()
        return SettingService.get_settings()

    @staticmethod
    def _load(keys):
        """Return the stored values for ``keys`` or ``None`` when the store is
        unreachable. Rows with a null value are dropped."""
        try:
            settings = SettingService.get_settings()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.warning(f"[Settings] Database not available, using defaults: {e}")
            return None
        return {
            key: settings[key]
            for key in keys
            if key in settings and settings[key] is not None
        }

    @staticmethod
    def get_general_settings():
        defaults = _default_general_settings()
        keys = const.GENERAL_SETTING_KEYS
        stored = SettingService._load(keys.values())
        if not stored:
            return defaults

        result = dict(defaults)
        for field, key in keys.items():
            if stored.get(key):
                result[field] = stored[key]
        return result

    @staticmethod
    def get_notification_settings():
        defaults = _default_notification_settings()
        keys = const.NOTIFICATION_SETTING_KEYS
        stored = SettingService._load(keys.values())
        if not stored:
            return defaults

        result = {}
        for field, key in keys.items():
            values = parse_list(stored.get(key))
            result[field] = values or defaults[field]
        return result

    @staticmethod
    def get_smtp_settings():
        defaults = _default_smtp_settings()
        keys = const.SMTP_SETTING_KEYS
        stored = SettingService._load(keys.values())
        if not stored:
            return defaults

        result = {
            field: stored.get(key, defaults[field])
            for field, key in keys.items()
            if field != "port"
        }
        result["port"] = _parse_port(stored.get(keys["port"]), defaults["port"])
        return result

    @staticmethod
    def get_whatsapp_settings():
        defaults = _default_whatsapp_settings()
        keys = const.WHATSAPP_SETTING_KEYS
        stored = SettingService._load(keys.values())
        if not stored:
            return defaults

        return {field: stored.get(key, defaults[field]) for field, key in keys.items()}

    @staticmethod
    def is_smtp_configured(smtp_settings):
        return bool(
            smtp_settings.get("host")
            and smtp_settings.get("user")
            and smtp_settings.get("password")
        )
