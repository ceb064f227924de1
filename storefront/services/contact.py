from datetime import datetime

from flask import current_app

from storefront import const
from storefront.lib.logger import log as logger
from storefront.lib.string import is_valid_email
from storefront.services.setting import SettingService
from storefront.third_parties.email import Mailer, render_template


def _check_length(errors, label, value, bounds):
    minimum, maximum = bounds
    if len(value) < minimum:
        errors.append(f"{label} must be at least {minimum} characters long")
    elif len(value) > maximum:
        errors.append(f"{label} must be less than {maximum} characters")


class ContactService:

    @staticmethod
    def validate(data):
        """Return ``(cleaned, errors)``; ``errors`` lists every failing field."""
        if not isinstance(data, dict):
            return None, ["Invalid form data"]

        errors = []
        cleaned = {}
        for field in ("name", "email", "subject", "message"):
            value = data.get(field)
            cleaned[field] = value.strip() if isinstance(value, str) else ""

        if not cleaned["name"]:
            errors.append("Name is required")
        else:
            _check_length(errors, "Name", cleaned["name"], const.CONTACT_NAME_LENGTH)

        if not cleaned["email"]:
            errors.append("Email is required")
        elif not is_valid_email(cleaned["email"]):
            errors.append("Please enter a valid email address")

        if not cleaned["subject"]:
            errors.append("Subject is required")
        else:
            _check_length(
                errors, "Subject", cleaned["subject"], const.CONTACT_SUBJECT_LENGTH
            )

        if not cleaned["message"]:
            errors.append("Message is required")
        else:
            _check_length(
                errors, "Message", cleaned["message"], const.CONTACT_MESSAGE_LENGTH
            )

        cleaned["email"] = cleaned["email"].lower()
        return cleaned, errors

    @staticmethod
    def send_contact_message(form):
        """Email the contact recipients. Returns ``"not_configured"``,
        ``"failed"`` or ``"sent"``."""
        smtp_settings = SettingService.get_smtp_settings()
        if not SettingService.is_smtp_configured(smtp_settings):
            logger.warning("[CONTACT] SMTP settings incomplete. Unable to send email.")
            return "not_configured"

        from_email = smtp_settings.get("from_email") or const.DEFAULT_FROM_EMAIL
        from_name = smtp_settings.get("from_name") or const.DEFAULT_FROM_NAME
        recipients = SettingService.get_notification_settings()["contact_emails"] or [
            const.DEFAULT_ADMIN_EMAIL
        ]

        base_url = current_app.config.get("SITE_URL", "").rstrip("/")
        context = dict(form)
        context.update(
            {
                "title": "New Contact Form Submission",
                "submitted_on": datetime.now().strftime("%A, %B %d, %Y %I:%M %p"),
                "company": {
                    "name": from_name,
                    "email": from_email,
                    "logo_url": f"{base_url}/images/logo.png",
                    "address": current_app.config.get("COMPANY_ADDRESS", ""),
                    "phone": current_app.config.get("COMPANY_PHONE", ""),
                },
            }
        )

        mailer = Mailer.from_settings(smtp_settings, from_email=from_email, from_name=from_name)
        sent = mailer.send(
            recipients,
            f"Contact Form: {form['subject']}",
            render_template("contact_email.txt", context),
            render_template("contact_email.html", context),
            reply_to=form["email"],
        )
        return "sent" if sent else "failed"
