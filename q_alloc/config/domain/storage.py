"""Storage and data source configuration models."""

from pathlib import Path

from pydantic import BaseModel


class StorageConfig(BaseModel, frozen=True):
    """Directory holding one JSON document per assignment."""

    data_dir: Path


class QuestionBankConfig(BaseModel, frozen=True):
    path: Path


class RosterConfig(BaseModel, frozen=True):
    path: Path
