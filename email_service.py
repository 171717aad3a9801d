import asyncio
import logging
import smtplib
from email.message import EmailMessage
from typing import List, Protocol

from errors import DeliveryError, ValidationError
from Models.DeliveryReceipt import DeliveryReceipt
from validation import SHARE_FIELDS_MESSAGE

logger = logging.getLogger("summary-service")

SUBJECT = "AI-Generated Meeting Summary"

EMAIL_TEMPLATE = """
        <h2>Meeting Summary from your AI Assistant</h2>
        <p>Hello,</p>
        <p>Here is the meeting summary you requested:</p>
        <div style="background-color: #f4f4f4; padding: 16px; border-radius: 8px;">
          {summary}
        </div>
        <p>Regards,<br>Your AI Assistant</p>
      """


def format_summary_html(summary: str) -> str:
    # Only line breaks are converted; the summary is embedded as-is otherwise.
    return summary.replace("\n", "<br>")


def render_email_body(summary: str) -> str:
    return EMAIL_TEMPLATE.format(summary=format_summary_html(summary))


def parse_recipients(emails_field: str) -> List[str]:
    """Splits a comma-separated field into trimmed addresses, keeping order and duplicates."""
    recipients = [email.strip() for email in emails_field.split(",")]
    return [email for email in recipients if email]


def build_message(summary: str, recipients: List[str], sender: str) -> EmailMessage:
    message = EmailMessage()
    message["From"] = sender
    message["To"] = ", ".join(recipients)
    message["Subject"] = SUBJECT
    message.set_content(summary)
    message.add_alternative(render_email_body(summary), subtype="html")
    return message


class MailTransport(Protocol):
    async def asend(self, message: EmailMessage) -> None: ...


class SmtpTransport:
    """
    Authenticated SMTP submission. Opens one connection per message, so a single
    instance can be shared by concurrent requests.
    """

    def __init__(self, host: str, port: int, username: str, password: str, use_ssl: bool = True):
        self.host = host
        self.port = port
        self.username = username
        self._password = password
        self.use_ssl = use_ssl

    def _connect(self) -> smtplib.SMTP:
        if self.use_ssl:
            return smtplib.SMTP_SSL(self.host, self.port)
        smtp = smtplib.SMTP(self.host, self.port)
        try:
            smtp.starttls()
        except (smtplib.SMTPException, OSError):
            smtp.close()
            raise
        return smtp

    def send(self, message: EmailMessage) -> None:
        try:
            with self._connect() as smtp:
                if self.username:
                    smtp.login(self.username, self._password)
                smtp.send_message(message)
        except (smtplib.SMTPException, OSError) as e:
            raise DeliveryError(f"SMTP submission to {self.host}:{self.port} failed: {e}") from e

    async def asend(self, message: EmailMessage) -> None:
        await asyncio.to_thread(self.send, message)


class EmailDispatcher:
    def __init__(self, transport: MailTransport, sender: str):
        self._transport = transport
        self._sender = sender

    async def share(self, summary: str, emails_field: str) -> DeliveryReceipt:
        recipients = parse_recipients(emails_field)
        if not recipients:
            raise ValidationError(SHARE_FIELDS_MESSAGE)

        try:
            # Header construction rejects recipients containing line breaks.
            message = build_message(summary, recipients, self._sender)
            await self._transport.asend(message)
        except DeliveryError:
            logger.error(f"Error sending email to: {', '.join(recipients)}", exc_info=True)
            raise
        except Exception as e:
            logger.error(f"Error sending email to: {', '.join(recipients)}", exc_info=True)
            raise DeliveryError(str(e)) from e

        logger.info(f"Email successfully sent to: {', '.join(recipients)}")
        return DeliveryReceipt(recipients=recipients)
