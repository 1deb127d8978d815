"""SMTP transport configuration model."""

from pydantic import BaseModel, Field


class SmtpConfig(BaseModel, frozen=True):
    host: str = Field(min_length=1)
    port: int = Field(default=587, gt=0)
    username: str | None = None
    password: str | None = None
    use_tls: bool = True
    sender: str | None = None
    timeout_seconds: float = Field(default=30.0, gt=0)
