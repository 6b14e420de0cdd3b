"""Turn env file text into a sanitized .env.example template.

Everything here is pure: callers own reading and writing files.
"""
from __future__ import annotations

from genv_ex.models.template_model import ParsedVariable, RenderConfig, RenderResult


def split_lines(source_text: str) -> list[str]:
    """Split on ``\\n``; a final newline does not start another line."""
    if not source_text:
        return []
    lines = source_text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def split_assignment(line: str) -> tuple[str, str] | None:
    key, sep, value = line.partition("=")
    key = key.strip()
    if not sep or not key:
        return None
    return key, value


def parse_variables(source_text: str) -> dict[str, ParsedVariable]:
    """Collect well-formed ``KEY=VALUE`` lines; the last occurrence of a key wins."""
    variables: dict[str, ParsedVariable] = {}
    for line_number, line in enumerate(split_lines(source_text), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        assignment = split_assignment(line)
        if assignment is None:
            continue
        key, value = assignment
        variables[key] = ParsedVariable(key=key, value=value, line_number=line_number)
    return variables


def render(source_text: str, config: RenderConfig | None = None) -> RenderResult:
    config = config or RenderConfig()
    ignore = set(config.ignore_keys)
    preserve = set(config.preserve_values) - ignore
    parsed = parse_variables(source_text)

    emitted: list[str] = []
    keys: list[str] = []
    skipped: list[str] = []
    for line in split_lines(source_text):
        stripped = line.strip()
        if not stripped:
            emitted.append("")
            continue
        if stripped.startswith("#"):
            if config.include_comments:
                emitted.append(line)
            continue

        assignment = split_assignment(line)
        if assignment is None:
            emitted.append(line)
            continue

        key, _value = assignment
        if key in ignore:
            if key not in skipped:
                skipped.append(key)
            continue
        value = parsed[key].value if key in preserve else config.placeholder
        emitted.append(f"{key}={value}")
        if key not in keys:
            keys.append(key)

    header = config.header or ""
    if header and not header.endswith("\n"):
        header += "\n"
    body = "\n".join(emitted) + "\n" if emitted else ""
    return RenderResult(output_text=header + body, keys=keys, skipped_keys=skipped)
