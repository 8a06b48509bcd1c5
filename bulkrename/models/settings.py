"""Run settings collected from the command line."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class RunSettings(BaseModel):
    """Global options shared by every subcommand."""

    model_config = ConfigDict(frozen=True)

    directory: Path = Field(description="Target directory whose entries are renamed", default=Path("."))
    verbose: bool = Field(description="Print extra progress details", default=False)
