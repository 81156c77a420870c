"""
Email service for delivering summaries over SMTP
"""

import asyncio
import smtplib
from email.message import EmailMessage
from typing import Optional

from loguru import logger

from ..config import Settings, settings as default_settings


class EmailDeliveryError(Exception):
    """Raised when a single message could not be delivered"""
    pass


class EmailService:
    """Sends one message to one recipient per call"""

    def __init__(
        self,
        host: str,
        port: int,
        user: str,
        password: str,
        sender: str,
        use_tls: bool = True
    ):
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.sender = sender
        self.use_tls = use_tls

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "EmailService":
        settings = settings or default_settings
        return cls(
            host=settings.smtp_host,
            port=settings.smtp_port,
            user=settings.smtp_user,
            password=settings.smtp_pass,
            sender=settings.smtp_sender,
            use_tls=settings.smtp_use_tls
        )

    def build_message(self, recipient: str, subject: str, text: str, html: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = recipient
        message["Subject"] = subject
        message.set_content(text)
        message.add_alternative(html, subtype="html")
        return message

    async def send(self, recipient: str, subject: str, text: str, html: str):
        """Deliver a plain-text + HTML message to a single recipient"""
        try:
            message = self.build_message(recipient, subject, text, html)
        except ValueError as e:
            logger.error(f"Could not build email for {recipient}: {e}")
            raise EmailDeliveryError(f"Failed to send email to {recipient}") from e

        def sync_send():
            with smtplib.SMTP(self.host, self.port) as smtp:
                if self.use_tls:
                    smtp.starttls()
                smtp.login(self.user, self.password)
                smtp.send_message(message)

        try:
            await asyncio.get_event_loop().run_in_executor(None, sync_send)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Failed to send email to {recipient}: {e}")
            raise EmailDeliveryError(f"Failed to send email to {recipient}") from e

        logger.info(f"Email sent to {recipient}")
