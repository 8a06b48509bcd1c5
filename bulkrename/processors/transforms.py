"""Name transforms, one per subcommand, and the command selector that builds them."""

import re
from abc import ABC, abstractmethod


class NameTransform(ABC):
    """Base class for name transforms.

    A transform maps an entry name to a new name. Transforms are pure: the result
    depends only on the name and the transform's parameters, and `apply` never raises.
    """

    @abstractmethod
    def apply(self, name: str) -> str:
        """Return the transformed name, possibly identical to the input.

        Args:
            name: Entry name (without directory path).

        Returns:
            The new name.
        """
        pass

    @abstractmethod
    def describe(self) -> str:
        """Human-readable summary of the transform and its parameters."""
        pass


class RemoveTransform(NameTransform):
    """Delete every non-overlapping occurrence of a literal substring."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern

    def apply(self, name: str) -> str:
        return name.replace(self.pattern, "")

    def describe(self) -> str:
        return f'Remove "{self.pattern}"'


class ReplaceTransform(NameTransform):
    """Replace every non-overlapping occurrence of a literal substring."""

    def __init__(self, old: str, new: str) -> None:
        self.old = old
        self.new = new

    def apply(self, name: str) -> str:
        return name.replace(self.old, self.new)

    def describe(self) -> str:
        return f'Replace "{self.old}" with "{self.new}"'


class AddPrefixTransform(NameTransform):
    """Prepend a prefix to the full name."""

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix

    def apply(self, name: str) -> str:
        return f"{self.prefix}{name}"

    def describe(self) -> str:
        return f'Add prefix "{self.prefix}"'


class AddSuffixTransform(NameTransform):
    """Insert a suffix before the extension.

    The extension starts at the last `.` in the name, so `archive.tar.gz` becomes
    `archive.tar<suffix>.gz` and a dotfile such as `.bashrc` becomes `<suffix>.bashrc`.
    Names without a `.` get the suffix appended.
    """

    def __init__(self, suffix: str) -> None:
        self.suffix = suffix

    def apply(self, name: str) -> str:
        dot_index = name.rfind(".")
        if dot_index == -1:
            return f"{name}{self.suffix}"
        return f"{name[:dot_index]}{self.suffix}{name[dot_index:]}"

    def describe(self) -> str:
        return f'Add suffix "{self.suffix}"'


class RegexReplaceTransform(NameTransform):
    """Replace every non-overlapping regular expression match.

    The replacement may reference capture groups with `re` syntax (`\\1`, `\\g<name>`).
    An invalid pattern or replacement template leaves every name unchanged.
    """

    def __init__(self, pattern: str, replacement: str) -> None:
        self.pattern = pattern
        self.replacement = replacement
        try:
            self._regex: re.Pattern[str] | None = re.compile(pattern)
        except re.error:
            self._regex = None

    def apply(self, name: str) -> str:
        if self._regex is None:
            return name
        try:
            return self._regex.sub(self.replacement, name)
        except (re.error, IndexError):
            return name

    def describe(self) -> str:
        return f'Regex replace "{self.pattern}" -> "{self.replacement}"'


# Subcommand name -> transform class
COMMANDS: dict[str, type[NameTransform]] = {
    "remove": RemoveTransform,
    "replace": ReplaceTransform,
    "add-prefix": AddPrefixTransform,
    "add-suffix": AddSuffixTransform,
    "regex-replace": RegexReplaceTransform,
}


def select_transform(command: str, *args: str) -> NameTransform:
    """Build the transform for a subcommand.

    Args:
        command: Subcommand name, one of the keys of `COMMANDS`.
        *args: The subcommand's positional arguments.

    Returns:
        The configured transform.

    Raises:
        ValueError: If the command is unknown.
    """
    try:
        transform_cls = COMMANDS[command]
    except KeyError as e:
        raise ValueError(f"Unknown command '{command}'. Expected one of: {', '.join(COMMANDS)}") from e
    return transform_cls(*args)
