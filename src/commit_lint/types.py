"""Type definitions for commit-lint."""
from dataclasses import dataclass


@dataclass(frozen=True)
class ParsedHeader:
    """Structural parts of a single commit header line.

    ``None`` marks a part as absent, which is distinct from an empty string:
    ``": subject"`` parses with ``type == ""``.
    """

    header: str | None
    type: str | None = None
    scope: str | None = None
    subject: str | None = None

    @property
    def matched(self) -> bool:
        """Whether the header matched the structural pattern."""
        return self.type is not None

    def to_dict(self) -> dict[str, str | None]:
        """Convert parsed header to dictionary."""
        return {
            "header": self.header,
            "type": self.type,
            "scope": self.scope,
            "subject": self.subject,
        }


@dataclass(frozen=True)
class LintError:
    """Single rule violation."""

    description: str
