# Order lifecycle
ORDER_STATUS_PENDING = "PENDING"
PAYMENT_STATUS_PENDING = "PENDING"
PAYMENT_STATUS_PAID = "PAID"

PAYMENT_METHOD_COD = "Cash on Delivery"
PAYMENT_METHOD_PREPAID = "Prepaid"

PAYMENT_LABEL_COD = "Cash on Delivery / Pay Later"
PAYMENT_LABEL_SCREENSHOT = "Prepaid (Payment Screenshot Provided)"
PAYMENT_LABEL_PREPAID = "Prepaid"

ORDER_CREATED_NOTE = "Order created"

# Pagination Defaults
DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 10
MAX_PER_PAGE = 100

# Settings
REDIS_KEY_ALL_SETTINGS = "storefront:settings:all"
SETTINGS_CACHE_TTL = 60 * 60

GENERAL_SETTING_KEYS = {
    "site_title": "site_name",
    "tagline": "site_description",
    "admin_email": "admin_email",
    "whatsapp_contact_number": "whatsapp_contact_number",
}

NOTIFICATION_SETTING_KEYS = {
    "order_emails": "notifications_order_emails",
    "contact_emails": "notifications_contact_emails",
    "order_whatsapp_numbers": "notifications_order_whatsapp_numbers",
}

SMTP_SETTING_KEYS = {
    "host": "smtp_host",
    "port": "smtp_port",
    "user": "smtp_user",
    "password": "smtp_pass",
    "from_email": "smtp_from_email",
    "from_name": "smtp_from_name",
}

WHATSAPP_SETTING_KEYS = {
    "access_token": "whatsapp_access_token",
    "phone_number_id": "whatsapp_phone_number_id",
    "business_account_id": "whatsapp_business_account_id",
}

DEFAULT_SMTP_PORT = 587
DEFAULT_FROM_EMAIL = "noreply@3starfoods.com"
DEFAULT_ORDER_FROM_EMAIL = "orders@3starfoods.com"
DEFAULT_FROM_NAME = "Astra"
DEFAULT_ADMIN_EMAIL = "admin@3starfoods.com"
DEFAULT_CONTACT_EMAIL = "info@3starfoods.com"

# Contact form limits
CONTACT_NAME_LENGTH = (2, 100)
CONTACT_SUBJECT_LENGTH = (3, 200)
CONTACT_MESSAGE_LENGTH = (10, 5000)
