"""
Email senders

SmtpEmailSender delivers through a configured SMTP relay (aiosmtplib).
ConsoleEmailSender is used when no SMTP host is configured: it logs the
message and returns the verification link as the preview URL, so local
development works without a mail server.
"""

import logging
from datetime import datetime
from email.message import EmailMessage
from email.utils import make_msgid

import aiosmtplib

from src.app.services.email_sender import EmailDeliveryError, EmailSender, SentEmail
from src.domain.entities import User

logger = logging.getLogger(__name__)

VERIFICATION_SUBJECT = "Verify Your Email - EasyHR"

VERIFICATION_HTML = """\
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px;">
  <h1 style="color: #333; text-align: center;">Verify Your Email</h1>
  <p>Hi {full_name},</p>
  <p>Thank you for registering with EasyHR. Please verify your email by clicking the button below:</p>
  <p style="text-align: center; margin: 30px 0;">
    <a href="{url}" style="background-color: #8B5CF6; color: white; padding: 12px 24px; text-decoration: none; border-radius: 5px;">Verify Email</a>
  </p>
  <p>If the button doesn't work, copy this link into your browser:</p>
  <p style="word-break: break-all;"><a href="{url}">{url}</a></p>
  <p>This link will expire in <strong>{expiry_hours} hours</strong>.</p>
  <p>If you did not create an account, please ignore this email.</p>
  <p style="color: #777; font-size: 12px; text-align: center;">&copy; {year} EasyHR. All rights reserved.</p>
</div>
"""

VERIFICATION_TEXT = """\
Hi {full_name},

Thank you for registering with EasyHR. Verify your email by opening this link:

{url}

This link will expire in {expiry_hours} hours.
If you did not create an account, please ignore this email.
"""


def build_verification_url(frontend_url: str, token: str) -> str:
    return f"{frontend_url.rstrip('/')}/verify-email?token={token}"


def build_verification_message(
    user: User, url: str, sender: str, expiry_hours: int
) -> EmailMessage:
    context = {
        "full_name": user.full_name,
        "url": url,
        "expiry_hours": expiry_hours,
        "year": datetime.now().year,
    }
    message = EmailMessage()
    message["From"] = sender
    message["To"] = user.email
    message["Subject"] = VERIFICATION_SUBJECT
    message["Message-ID"] = make_msgid(domain="easyhr.com")
    message.set_content(VERIFICATION_TEXT.format(**context))
    message.add_alternative(VERIFICATION_HTML.format(**context), subtype="html")
    return message


class SmtpEmailSender(EmailSender):
    """Sends verification emails through an SMTP relay"""

    def __init__(
        self,
        host: str,
        port: int,
        sender: str,
        frontend_url: str,
        username: str = "",
        password: str = "",
        use_tls: bool = False,
        start_tls: bool = True,
        expiry_hours: int = 24,
    ):
        self.host = host
        self.port = port
        self.sender = sender
        self.frontend_url = frontend_url
        self.username = username or None
        self.password = password or None
        self.use_tls = use_tls
        # Implicit TLS and STARTTLS are mutually exclusive
        self.start_tls = start_tls and not use_tls
        self.expiry_hours = expiry_hours

    async def send_verification_email(self, user: User, token: str) -> SentEmail:
        url = build_verification_url(self.frontend_url, token)
        message = build_verification_message(user, url, self.sender, self.expiry_hours)

        try:
            await aiosmtplib.send(
                message,
                hostname=self.host,
                port=self.port,
                username=self.username,
                password=self.password,
                use_tls=self.use_tls,
                start_tls=self.start_tls,
            )
        except (aiosmtplib.SMTPException, OSError) as e:
            logger.error(f"Failed to send verification email to {user.email}: {e}")
            raise EmailDeliveryError(str(e)) from e

        logger.info(f"Verification email sent to {user.email}")
        return SentEmail(message_id=message["Message-ID"])


class ConsoleEmailSender(EmailSender):
    """Development sender: writes the message to the log instead of sending it"""

    def __init__(self, sender: str, frontend_url: str, expiry_hours: int = 24):
        self.sender = sender
        self.frontend_url = frontend_url
        self.expiry_hours = expiry_hours

    async def send_verification_email(self, user: User, token: str) -> SentEmail:
        url = build_verification_url(self.frontend_url, token)
        message = build_verification_message(user, url, self.sender, self.expiry_hours)
        logger.info(
            f"Verification email for {user.email} (not sent, no SMTP host configured): {url}"
        )
        return SentEmail(message_id=message["Message-ID"], preview_url=url)


def build_email_sender(config) -> EmailSender:
    """Pick the sender for this process from ApplicationConfig"""
    if config.SMTP_HOST:
        return SmtpEmailSender(
            host=config.SMTP_HOST,
            port=config.SMTP_PORT,
            sender=config.EMAIL_FROM,
            frontend_url=config.FRONTEND_URL,
            username=config.SMTP_USERNAME,
            password=config.SMTP_PASSWORD,
            use_tls=config.SMTP_USE_TLS,
            start_tls=config.SMTP_START_TLS,
            expiry_hours=config.VERIFICATION_TOKEN_EXPIRE_HOURS,
        )
    logger.warning("SMTP_HOST is not set, verification emails will only be logged")
    return ConsoleEmailSender(
        sender=config.EMAIL_FROM,
        frontend_url=config.FRONTEND_URL,
        expiry_hours=config.VERIFICATION_TOKEN_EXPIRE_HOURS,
    )
