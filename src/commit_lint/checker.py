"""Rule evaluation for parsed headers."""
from commit_lint.config import LintConfig
from commit_lint.parser import parse
from commit_lint.types import LintError, ParsedHeader


def check_header(parsed: ParsedHeader, config: LintConfig) -> LintError | None:
    """Check header presence and length."""
    if parsed.header is None:
        return LintError("header should be non-empty")

    length = len(parsed.header)
    if length > config.header_max_length:
        return LintError(
            f"header should be less than {config.header_max_length}, actual {length}"
        )
    return None


def check_type(parsed: ParsedHeader, config: LintConfig) -> LintError | None:
    """Check type presence and membership in the allowed types."""
    if parsed.type is None:
        return LintError("type should be non-empty")

    if parsed.type not in config.types:
        allowed = ", ".join(sorted(config.types))
        return LintError(f"type should be on of: {allowed}")
    return None


RULES = (check_header, check_type)


def check(parsed: ParsedHeader, config: LintConfig) -> list[LintError]:
    """Run every rule against a parsed header.

    Rules run in a fixed order (header, then type) and every violation is
    collected, so a header can fail several rules at once.

    Args:
        parsed: Parsed header
        config: Lint configuration

    Returns:
        Violations in rule order, empty if the header is valid
    """
    errors = []
    for rule in RULES:
        error = rule(parsed, config)
        if error is not None:
            errors.append(error)
    return errors


def lint(text: str, config: LintConfig) -> tuple[ParsedHeader, list[LintError]]:
    """Parse and check a header line.

    Args:
        text: Header line without trailing newline
        config: Lint configuration

    Returns:
        Tuple of (parsed header, violations)
    """
    parsed = parse(text)
    return parsed, check(parsed, config)
