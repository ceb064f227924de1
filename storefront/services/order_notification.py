from flask import current_app

from storefront import const
from storefront.lib.logger import order_logger
from storefront.lib.string import to_decimal
from storefront.services.order import OrderService
from storefront.services.setting import SettingService
from storefront.third_parties.email import Mailer, render_template
from storefront.third_parties.whatsapp import WhatsAppSender, format_order_message


class OrderNotificationService:
    """Announce a saved order by email and WhatsApp.

    Every send is attempted at most once. A failure is logged and the next
    send still runs; nothing here raises to the caller.
    """

    @staticmethod
    def notify(order, customer, items, payment_screenshot=None, cash_on_delivery=False):
        log = order_logger(order.order_number)
        payment_label = OrderService.payment_label(cash_on_delivery, payment_screenshot)
        notification_settings = SettingService.get_notification_settings()

        results = {"admin_email": None, "customer_email": None, "whatsapp": {}}
        try:
            results.update(
                OrderNotificationService.send_emails(
                    order, customer, items, payment_label, notification_settings, log
                )
            )
        except Exception as e:
            log.error(f"[ORDER EMAIL] Could not prepare emails: {e}")

        try:
            results["whatsapp"] = OrderNotificationService.send_whatsapp(
                order, items, payment_label, notification_settings, log
            )
        except Exception as e:
            log.error(f"[WhatsApp] Could not prepare messages: {e}")
        return results

    @staticmethod
    def email_context(order, customer, items, payment_label, is_admin, from_name, from_email):
        base_url = current_app.config.get("SITE_URL", "").rstrip("/")
        coords = customer.get("coords") or None
        coords_text = f"{coords['lat']}, {coords['lng']}" if coords else "N/A"
        map_link = (
            f"https://www.google.com/maps?q={coords['lat']},{coords['lng']}"
            if coords
            else None
        )

        lines = []
        for item in items:
            image = item.get("image")
            if image and not image.startswith("http"):
                image = f"{base_url}{image}"
            price = to_decimal(item["price"])
            lines.append(
                {
                    "name": item["name"],
                    "qty": item["qty"],
                    "price": price,
                    "line_total": price * int(item["qty"]),
                    "image_url": image,
                }
            )

        return {
            "title": "New Order Received" if is_admin else "Order Confirmation",
            "is_admin": is_admin,
            "order": order,
            "customer": customer,
            "items": lines,
            "payment_label": payment_label,
            "coords_text": coords_text,
            "map_link": map_link,
            "company": {
                "name": from_name,
                "email": from_email,
                "logo_url": f"{base_url}/images/logo.png",
                "address": current_app.config.get("COMPANY_ADDRESS", ""),
                "phone": current_app.config.get("COMPANY_PHONE", ""),
            },
        }

    @staticmethod
    def send_emails(order, customer, items, payment_label, notification_settings, log):
        smtp_settings = SettingService.get_smtp_settings()
        if not SettingService.is_smtp_configured(smtp_settings):
            log.warning("[ORDER EMAIL] SMTP settings incomplete. Skipping email dispatch.")
            return {}

        from_email = smtp_settings.get("from_email") or const.DEFAULT_ORDER_FROM_EMAIL
        from_name = smtp_settings.get("from_name") or const.DEFAULT_FROM_NAME
        mailer = Mailer.from_settings(smtp_settings, from_email=from_email, from_name=from_name)
        admin_emails = notification_settings["order_emails"] or [const.DEFAULT_ADMIN_EMAIL]

        results = {}
        for key, is_admin, recipients, subject in (
            (
                "admin_email",
                True,
                admin_emails,
                f"New Order #{order.order_number} - {customer['name']}",
            ),
            (
                "customer_email",
                False,
                customer["email"],
                f"Order Confirmation #{order.order_number} - {customer['name']}",
            ),
        ):
            try:
                context = OrderNotificationService.email_context(
                    order, customer, items, payment_label, is_admin, from_name, from_email
                )
                results[key] = mailer.send(
                    recipients,
                    subject,
                    render_template("order_email.txt", context),
                    render_template("order_email.html", context),
                )
            except Exception as e:
                log.error(f"[ORDER EMAIL] Failed to send {key}: {e}")
                results[key] = False
        return results

    @staticmethod
    def send_whatsapp(order, items, payment_label, notification_settings, log):
        numbers = notification_settings.get("order_whatsapp_numbers") or []
        whatsapp_settings = SettingService.get_whatsapp_settings()
        if not (
            whatsapp_settings.get("access_token")
            and whatsapp_settings.get("phone_number_id")
            and numbers
        ):
            if numbers:
                log.warning(
                    "[WhatsApp] WhatsApp settings incomplete. Skipping WhatsApp notifications."
                )
            return {}

        sender = WhatsAppSender.from_settings(
            whatsapp_settings,
            api_url=current_app.config.get("WHATSAPP_API_URL"),
            api_version=current_app.config.get("WHATSAPP_API_VERSION"),
        )
        message = format_order_message(order, items, payment_label)

        results = {}
        for phone_number in numbers:
            try:
                result = sender.send_message(phone_number, message)
            except Exception as e:
                log.error(f"[WhatsApp] Error sending to {phone_number}: {e}")
                results[phone_number] = False
                continue

            if result.get("success"):
                log.info(f"[WhatsApp] Message sent successfully to {phone_number}")
            else:
                log.error(f"[WhatsApp] Failed to send to {phone_number}: {result.get('error')}")
            results[phone_number] = bool(result.get("success"))
        return results
