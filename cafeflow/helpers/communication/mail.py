from email.message import EmailMessage

import aiosmtplib

from cafeflow.core.base import BaseHelper
from cafeflow.core.configs import AppConfig, app_config


class EmailHelper(BaseHelper):
    """Sends email over SMTP (`SMTP_HOST`, `SMTP_PORT`, `SMTP_USERNAME`, `SMTP_PASSWORD`)."""

    service_name = 'email'

    def __init__(self, config: AppConfig | None = None) -> None:
        config = config or app_config
        self.host = config.SMTP_HOST
        self.port = config.SMTP_PORT
        self.username = config.SMTP_USERNAME
        self.password = config.SMTP_PASSWORD
        self.start_tls = config.SMTP_START_TLS
        self.from_address = config.SMTP_FROM or config.SMTP_USERNAME

    def _build_message(self, to: str, subject: str, body: str) -> EmailMessage:
        message = EmailMessage()
        if self.from_address:
            message['From'] = self.from_address
        message['To'] = to
        message['Subject'] = subject
        message.set_content(body)
        return message

    async def _send(self, message: EmailMessage) -> None:
        await aiosmtplib.send(
            message,
            hostname=self.host,
            port=self.port,
            username=self.username,
            password=self.password,
            start_tls=self.start_tls,
        )

    async def send_text_email(self, to: str, subject: str, body: str) -> None:
        message = self._build_message(to, subject, body)
        await self._aexecute('send_text_email', lambda: self._send(message))

    async def send_html_email(self, to: str, subject: str, html_body: str, text_body: str | None = None) -> None:
        """Send an HTML email with a plain-text alternative."""
        message = self._build_message(to, subject, text_body or 'This message requires an HTML-capable client.')
        message.add_alternative(html_body, subtype='html')
        await self._aexecute('send_html_email', lambda: self._send(message))
