import logging
import mimetypes
import smtplib
import ssl
from dataclasses import dataclass
from email.message import EmailMessage
from pathlib import Path
from typing import Optional, Sequence

from ignitai.core.config import Settings, settings as default_settings
from ignitai.core.errors import MailDeliveryError

logger = logging.getLogger(__name__)


@dataclass
class MailAttachment:
    filename: str
    path: Path


class MailService:
    def __init__(self, config: Settings = default_settings):
        self.config = config

    def build_message(
        self,
        subject: str,
        body: str,
        attachments: Sequence[MailAttachment] = (),
        reply_to: Optional[str] = None,
    ) -> EmailMessage:
        msg = EmailMessage()
        msg["Subject"] = subject
        msg["From"] = self.config.mail_sender or ""
        msg["To"] = self.config.notify_email or ""
        if reply_to:
            msg["Reply-To"] = reply_to
        msg.set_content(body)

        for attachment in attachments:
            content_type, _ = mimetypes.guess_type(attachment.filename)
            maintype, subtype = (content_type or "application/octet-stream").split("/", 1)
            msg.add_attachment(
                attachment.path.read_bytes(),
                maintype=maintype,
                subtype=subtype,
                filename=attachment.filename,
            )
        return msg

    def send(
        self,
        subject: str,
        body: str,
        attachments: Sequence[MailAttachment] = (),
        reply_to: Optional[str] = None,
    ) -> None:
        if not self.config.smtp_host or not self.config.notify_email or not self.config.mail_sender:
            raise MailDeliveryError("SMTP host, sender or NOTIFY_EMAIL is not configured.")

        msg = self.build_message(subject, body, attachments=attachments, reply_to=reply_to)
        try:
            if self.config.smtp_secure:
                server = smtplib.SMTP_SSL(
                    self.config.smtp_host,
                    self.config.smtp_port,
                    timeout=15,
                    context=ssl.create_default_context(),
                )
            else:
                server = smtplib.SMTP(self.config.smtp_host, self.config.smtp_port, timeout=15)
            with server:
                server.ehlo()
                if not self.config.smtp_secure and server.has_extn("starttls"):
                    server.starttls(context=ssl.create_default_context())
                    server.ehlo()
                if self.config.smtp_user and self.config.smtp_pass:
                    server.login(self.config.smtp_user, self.config.smtp_pass)
                server.send_message(msg)
        except (smtplib.SMTPException, OSError) as exc:
            raise MailDeliveryError(f"Failed to send mail '{subject}': {exc}") from exc

        logger.info("[mail] sent '%s' to %s", subject, self.config.notify_email)
