import requests

from storefront.lib.logger import log as logger
from storefront.lib.string import digits_only, format_price

DEFAULT_API_URL = "https://graph.facebook.com"
DEFAULT_API_VERSION = "v21.0"
REQUEST_TIMEOUT = 10


class WhatsAppSender:
    """Text messages through the WhatsApp Business Cloud API."""

    def __init__(
        self,
        access_token,
        phone_number_id,
        business_account_id=None,
        api_url=DEFAULT_API_URL,
        api_version=DEFAULT_API_VERSION,
    ):
        self.access_token = access_token
        self.phone_number_id = phone_number_id
        self.business_account_id = business_account_id
        self.api_url = api_url.rstrip("/")
        self.api_version = api_version

    @classmethod
    def from_settings(cls, whatsapp_settings, api_url=None, api_version=None):
        return cls(
            access_token=whatsapp_settings["access_token"],
            phone_number_id=whatsapp_settings["phone_number_id"],
            business_account_id=whatsapp_settings.get("business_account_id"),
            api_url=api_url or DEFAULT_API_URL,
            api_version=api_version or DEFAULT_API_VERSION,
        )

    @property
    def messages_url(self):
        return f"{self.api_url}/{self.api_version}/{self.phone_number_id}/messages"

    def send_message(self, to, message):
        """
        Send a plain text message.

        Args:
            to (str): Recipient number; anything but digits is stripped.
            message (str): Message body.

        Returns:
            dict: ``{"success": True, "message_id": ...}`` or
            ``{"success": False, "error": ...}``. Never raises for HTTP or
            network failures.
        """
        recipient = digits_only(to)
        if not recipient:
            return {"success": False, "error": f"Invalid phone number: {to!r}"}

        headers = {
            "Authorization": f"Bearer {self.access_token}",
            "Content-Type": "application/json",
        }
        payload = {
            "messaging_product": "whatsapp",
            "recipient_type": "individual",
            "to": recipient,
            "type": "text",
            "text": {"preview_url": False, "body": message},
        }

        try:
            response = requests.post(
                self.messages_url, headers=headers, json=payload, timeout=REQUEST_TIMEOUT
            )
        except requests.RequestException as e:
            logger.error(f"[WhatsApp] Request to {recipient} failed: {e}")
            return {"success": False, "error": str(e)}

        try:
            data = response.json()
        except ValueError:
            data = {}

        if response.status_code >= 400 or "error" in data:
            error = data.get("error")
            if isinstance(error, dict):
                error = error.get("message")
            return {"success": False, "error": error or response.text}

        messages = data.get("messages") or [{}]
        return {"success": True, "message_id": messages[0].get("id")}


def format_order_message(order, items, payment_method):
    lines = [
        f"*New Order #{order.order_number}*",
        "",
        f"Customer: {order.customer_name}",
        f"Phone: {order.customer_phone}",
        f"Email: {order.customer_email}",
        f"Address: {order.customer_address}, {order.customer_city}",
        "",
        "*Items:*",
    ]
    for item in items:
        lines.append(
            f"- {item['name']} x{item['qty']} @ {format_price(item['price'])}"
        )
    lines.append("")
    lines.append(f"Subtotal: {format_price(order.subtotal)}")
    if order.delivery_fee and order.delivery_fee > 0:
        lines.append(f"Delivery Fee: {format_price(order.delivery_fee)}")
    if order.discount_amount and order.discount_amount > 0:
        lines.append(f"Discount: -{format_price(order.discount_amount)}")
    lines.append(f"*Total: {format_price(order.total_amount)}*")
    lines.append("")
    lines.append(f"Payment: {payment_method}")
    if order.payment_screenshot:
        lines.append(f"Screenshot: {order.payment_screenshot}")
    return "\n".join(lines)
