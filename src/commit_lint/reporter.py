"""Report formatting and output."""
import json

import click

from commit_lint.types import LintError, ParsedHeader

INPUT_MARK = "⧗"
OK_MARK = "✔"
ERROR_MARK = "✖"


def _style(text: str, use_color: bool, **styles) -> str:
    return click.style(text, **styles) if use_color else text


def format_input_line(text: str, use_color: bool = False) -> str:
    """Format the echoed input line."""
    return f"{INPUT_MARK}\tinput: " + _style(text, use_color, bold=True)


def format_report(text: str, errors: list[LintError], use_color: bool = False) -> str:
    """Format lint result as human-readable report.

    Args:
        text: Header that was checked
        errors: Violations in rule order
        use_color: Whether to add ANSI colour codes

    Returns:
        Formatted report string
    """
    lines = [format_input_line(text, use_color)]

    if not errors:
        lines.append(
            _style(OK_MARK, use_color, fg="green", bold=True)
            + _style("\tAll ok!", use_color, bold=True)
        )
        return "\n".join(lines)

    for error in errors:
        lines.append(_style(f"{ERROR_MARK}\t{error.description}", use_color, fg="red"))
    lines.append(
        _style(f"{ERROR_MARK}\t", use_color, fg="red")
        + _style(f"Found {len(errors)} problems", use_color, bold=True)
    )
    return "\n".join(lines)


def format_json_report(parsed: ParsedHeader, errors: list[LintError]) -> str:
    """Format lint result as JSON.

    Args:
        parsed: Parsed header
        errors: Violations in rule order

    Returns:
        JSON string
    """
    report = {
        "input": parsed.header,
        "parsed": parsed.to_dict(),
        "errors": [error.description for error in errors],
        "summary": {
            "total_problems": len(errors),
            "valid": not errors,
        },
    }

    return json.dumps(report, indent=2, ensure_ascii=False)


def get_exit_code(errors: list[LintError]) -> int:
    """Get exit code based on violations.

    Args:
        errors: Violations found

    Returns:
        0 if no violations, 1 if violations found
    """
    return 1 if errors else 0
