import os
import smtplib
import traceback
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr

from jinja2 import Environment, FileSystemLoader, select_autoescape

from storefront.lib.logger import log as logger
from storefront.lib.string import format_price

EMAIL_TEMPLATE_DIR = os.path.join(os.path.dirname(__file__), "templates")
jinja_env = Environment(
    loader=FileSystemLoader(EMAIL_TEMPLATE_DIR),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)
jinja_env.filters["price"] = format_price

SMTP_TIMEOUT = 30


def render_template(template_name, context=None):
    template = jinja_env.get_template(template_name)
    return template.render(**(context or {}))


class Mailer:
    """SMTP transport configured from the ``smtp`` settings view.

    Port 465 uses implicit SSL, port 587 requires STARTTLS, anything else is
    plain SMTP.
    """

    def __init__(self, host, port, user, password, from_email, from_name):
        self.host = host
        self.port = int(port)
        self.user = user
        self.password = password
        self.from_email = from_email
        self.from_name = from_name

    @classmethod
    def from_settings(cls, smtp_settings, from_email=None, from_name=None):
        return cls(
            host=smtp_settings["host"],
            port=smtp_settings["port"],
            user=smtp_settings["user"],
            password=smtp_settings["password"],
            from_email=from_email or smtp_settings.get("from_email"),
            from_name=from_name or smtp_settings.get("from_name"),
        )

    def _connect(self):
        if self.port == 465:
            return smtplib.SMTP_SSL(self.host, self.port, timeout=SMTP_TIMEOUT)

        server = smtplib.SMTP(self.host, self.port, timeout=SMTP_TIMEOUT)
        if self.port == 587:
            try:
                server.starttls()
            except Exception:
                server.close()
                raise
        return server

    def build_message(self, to, subject, text, html, reply_to=None):
        recipients = [to] if isinstance(to, str) else list(to)

        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = formataddr((self.from_name, self.from_email))
        msg["To"] = ", ".join(recipients)
        if reply_to:
            msg["Reply-To"] = reply_to
        msg.attach(MIMEText(text, "plain", "utf-8"))
        msg.attach(MIMEText(html, "html", "utf-8"))
        return msg, recipients

    def send(self, to, subject, text, html, reply_to=None):
        """Send one message. Returns ``True`` on success; failures are logged
        and reported as ``False``."""
        msg, recipients = self.build_message(to, subject, text, html, reply_to)
        try:
            server = self._connect()
            try:
                server.login(self.user, self.password)
                server.sendmail(self.from_email, recipients, msg.as_string())
            finally:
                server.quit()
        except Exception as ex:
            logger.error(
                f"[EMAIL] Failed to send '{subject}' to {recipients}: {ex}\n"
                f"{traceback.format_exc()}"
            )
            return False

        logger.info(f"[EMAIL] Sent '{subject}' to {recipients}")
        return True
