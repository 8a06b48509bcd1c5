"""Rename operation data models."""

from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class DirectoryEntry:
    """A single file or subdirectory found directly inside the target directory.

    Names the OS could only decode with surrogate escapes are stored as-is.
    """

    name: str
    path: Path

    @property
    def is_decodable(self) -> bool:
        """Whether the name is valid text."""
        return _is_decodable(self.name)


def _is_decodable(text: str) -> bool:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


class RenameOp(BaseModel):
    """A single planned rename."""

    model_config = ConfigDict(frozen=True)

    original_name: str = Field(description="Original entry name (without directory path)")
    new_name: str = Field(description="Proposed entry name (without directory path)")
    source_path: Path = Field(description="Full path of the entry as found by the scan")

    @property
    def target_path(self) -> Path:
        """Destination path: the source's parent directory joined with the new name."""
        return self.source_path.parent / self.new_name


class RenamePlan(BaseModel):
    """Ordered, immutable list of renames built once from a directory scan."""

    model_config = ConfigDict(frozen=True)

    operations: tuple[RenameOp, ...] = Field(
        description="Planned renames in scan enumeration order",
        default_factory=tuple,
    )

    def __len__(self) -> int:
        return len(self.operations)


class RenameOutcome(BaseModel):
    """Result of one attempted rename."""

    operation: RenameOp
    error: str | None = Field(description="Error text if the rename failed", default=None)

    @property
    def succeeded(self) -> bool:
        return self.error is None


class RenameSummary(BaseModel):
    """Tally of successes and failures accumulated while applying a plan."""

    succeeded: int = 0
    failed: int = 0
    outcomes: list[RenameOutcome] = Field(default_factory=list)

    def record(self, outcome: RenameOutcome) -> None:
        """Add one outcome to the tally."""
        self.outcomes.append(outcome)
        if outcome.succeeded:
            self.succeeded += 1
        else:
            self.failed += 1

    @property
    def total(self) -> int:
        return self.succeeded + self.failed
