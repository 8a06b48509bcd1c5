"""Rename planning and application."""

from collections.abc import Callable, Iterable
from pathlib import Path

from bulkrename.models.rename import DirectoryEntry, RenameOp, RenameOutcome, RenamePlan, RenameSummary
from bulkrename.processors.transforms import NameTransform


AFFIRMATIVE_RESPONSES = frozenset({"y", "yes"})


def is_affirmative(response: str) -> bool:
    """Return True only for `y` or `yes`, ignoring case and surrounding whitespace."""
    return response.strip().lower() in AFFIRMATIVE_RESPONSES


class RenameProcessor:
    """Processor that plans and applies renames for one transform."""

    def __init__(self, transform: NameTransform) -> None:
        """Initialize the rename processor.

        Args:
            transform: Transform applied to every entry name.
        """
        self.transform = transform

    def build_plan(self, entries: Iterable[DirectoryEntry]) -> RenamePlan:
        """Apply the transform to every entry and keep the names that change.

        Entries whose names are not valid text are skipped.

        Args:
            entries: Entries from the directory scan, in enumeration order.

        Returns:
            RenamePlan with one operation per changed name, possibly empty.
        """
        operations: list[RenameOp] = []
        for entry in entries:
            if not entry.is_decodable:
                continue

            new_name = self.transform.apply(entry.name)
            if new_name == entry.name:
                continue

            operations.append(RenameOp(original_name=entry.name, new_name=new_name, source_path=entry.path))

        return RenamePlan(operations=tuple(operations))

    def apply_plan(
        self,
        plan: RenamePlan,
        report: Callable[[RenameOutcome], None] | None = None,
    ) -> RenameSummary:
        """Rename every planned entry, continuing past individual failures.

        Each rename is attempted exactly once. A target that is a different existing
        entry is treated as a failure rather than overwritten.

        Args:
            plan: The confirmed rename plan.
            report: Optional callback invoked with each outcome as it happens.

        Returns:
            RenameSummary with the success and failure counts.
        """
        summary = RenameSummary()

        for op in plan.operations:
            outcome = self._apply_one(op)
            summary.record(outcome)
            if report is not None:
                report(outcome)

        return summary

    def _apply_one(self, op: RenameOp) -> RenameOutcome:
        target = op.target_path
        try:
            if (target.exists() or target.is_symlink()) and not _is_same_file(op.source_path, target):
                raise FileExistsError(f"Target already exists: {target}")
            op.source_path.rename(target)
        except OSError as e:
            return RenameOutcome(operation=op, error=str(e))
        return RenameOutcome(operation=op)


def _is_same_file(source: Path, target: Path) -> bool:
    """Whether both paths name one filesystem object, as with case-only renames on case-insensitive filesystems."""
    return target.exists() and target.samefile(source)
