"""Markdown rendering for reference entries and site docs."""

from __future__ import annotations

from tskdocs.reference.models import Command, CommandOption, Example, SiteDoc, SyntaxElement
from tskdocs.sitedocs.search import search_lines

NOT_FETCHED_NOTICE = (
    "*Content not yet fetched. The documentation should be loaded when the server starts.*"
)


def _format_default(value: str | bool | int | float) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def format_option(option: CommandOption) -> str:
    flag = f"--{option.name}"
    if option.shorthand:
        flag += f", -{option.shorthand}"
    line = f"- `{flag}` ({option.type}): {option.description}"
    if option.default is not None:
        line += f" Default: `{_format_default(option.default)}`."
    if option.valid_values:
        line += f" Valid values: {', '.join(option.valid_values)}."
    return line


def format_command(command: Command) -> str:
    parts = [
        f"# tsk {command.name}",
        command.description,
        f"**Usage:** `{command.usage}`",
    ]
    if command.options:
        parts.append("## Options\n\n" + "\n".join(format_option(o) for o in command.options))
    if command.examples:
        parts.append("## Examples\n\n```bash\n" + "\n".join(command.examples) + "\n```")
    return "\n\n".join(parts)


def format_command_list(commands: list[Command]) -> str:
    lines = [f"- **{c.name}**: {c.description}" for c in commands]
    return "# tsk Commands\n\n" + "\n".join(lines)


def format_syntax(element: SyntaxElement) -> str:
    parts = [
        f"# `{element.key}`",
        f"**Type:** {element.type}\n**Required:** {'yes' if element.required else 'no'}",
        element.description,
    ]
    if element.valid_values:
        parts.append(f"**Valid values:** {', '.join(element.valid_values)}")
    if element.examples:
        snippets = "\n\n".join(f"```toml\n{snippet}\n```" for snippet in element.examples)
        parts.append(f"## Examples\n\n{snippets}")
    return "\n\n".join(parts)


def format_example(example: Example) -> str:
    return f"## {example.name}\n\n{example.description}\n\n```toml\n{example.content.rstrip()}\n```"


def format_site_doc(doc: SiteDoc, *, search: str | None, max_chars: int) -> str:
    """Render one doc: header, then content, search windows, or a not-fetched notice."""
    text = f"# {doc.title}\n\nURL: {doc.url}\n\n"

    if not doc.content:
        return text + NOT_FETCHED_NOTICE

    if search:
        windows = search_lines(doc.content, search)
        if windows:
            rendered = "\n\n".join(w.render() for w in windows)
            text += f'**Search results for "{search}":**\n\n{rendered}'
        else:
            text += f'No matches found for search term "{search}" in this document.'
    elif len(doc.content) > max_chars:
        text += (
            f"{doc.content[:max_chars]}\n\n"
            f"[Content truncated - {len(doc.content)} total characters]"
        )
    else:
        text += doc.content

    if doc.last_fetched is not None:
        text += f"\n\n*Last fetched: {doc.last_fetched.isoformat()}*"
    return text
