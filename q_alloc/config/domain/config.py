"""Top-level AllocatorConfig aggregate — the root configuration object."""

from pydantic import BaseModel, Field

from q_alloc.config.domain.execution import ExecutionConfig
from q_alloc.config.domain.smtp import SmtpConfig
from q_alloc.config.domain.storage import QuestionBankConfig, RosterConfig, StorageConfig


class AllocatorConfig(BaseModel, frozen=True):
    """Root configuration aggregate for a q-alloc deployment."""

    name: str = Field(min_length=1)
    version: str = Field(min_length=1)
    execution: ExecutionConfig = ExecutionConfig()
    storage: StorageConfig
    question_bank: QuestionBankConfig
    roster: RosterConfig
    smtp: SmtpConfig | None = None
