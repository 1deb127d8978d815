"""SmtpNotifier — sends assignment emails with the PDF attached over SMTP."""

import asyncio
import smtplib
import ssl
from email.message import EmailMessage

from q_alloc.config.domain.smtp import SmtpConfig
from q_alloc.core.errors import UpstreamError

_SSL_PORT = 465


class SmtpNotifier:
    """Satisfies the Notifier protocol using smtplib in a worker thread.

    Port 465 uses implicit TLS; any other port uses STARTTLS when ``use_tls``
    is set. Transport failures are reported as retriable UpstreamErrors,
    rejected recipients as non-retriable ones.
    """

    def __init__(self, config: SmtpConfig) -> None:
        self._config = config

    @property
    def sender(self) -> str:
        return self._config.sender or self._config.username or f"no-reply@{self._config.host}"

    def build_message(
        self,
        recipient: str,
        subject: str,
        body: str,
        attachment_name: str,
        document: bytes,
    ) -> EmailMessage:
        msg = EmailMessage()
        msg["Subject"] = subject
        msg["From"] = self.sender
        msg["To"] = recipient
        msg.set_content(body)
        msg.add_attachment(
            document,
            maintype="application",
            subtype="pdf",
            filename=attachment_name,
        )
        return msg

    async def send(
        self,
        recipient: str,
        subject: str,
        body: str,
        attachment_name: str,
        document: bytes,
    ) -> None:
        msg = self.build_message(
            recipient=recipient,
            subject=subject,
            body=body,
            attachment_name=attachment_name,
            document=document,
        )
        await asyncio.to_thread(self._send_sync, msg)

    def _send_sync(self, msg: EmailMessage) -> None:
        cfg = self._config
        try:
            if cfg.port == _SSL_PORT:
                context = ssl.create_default_context()
                with smtplib.SMTP_SSL(
                    cfg.host, cfg.port, context=context, timeout=cfg.timeout_seconds
                ) as server:
                    self._deliver(server=server, msg=msg)
            else:
                with smtplib.SMTP(cfg.host, cfg.port, timeout=cfg.timeout_seconds) as server:
                    if cfg.use_tls:
                        server.ehlo()
                        server.starttls(context=ssl.create_default_context())
                        server.ehlo()
                    self._deliver(server=server, msg=msg)
        except smtplib.SMTPRecipientsRefused as exc:
            raise UpstreamError(
                operation="send email", reason=f"recipient refused: {exc}", retriable=False
            ) from exc
        except smtplib.SMTPAuthenticationError as exc:
            raise UpstreamError(
                operation="send email", reason=f"authentication failed: {exc}", retriable=False
            ) from exc
        except (smtplib.SMTPException, OSError) as exc:
            raise UpstreamError(operation="send email", reason=str(exc)) from exc

    def _deliver(self, server: smtplib.SMTP, msg: EmailMessage) -> None:
        if self._config.username and self._config.password:
            server.login(self._config.username, self._config.password)
        server.send_message(msg)
