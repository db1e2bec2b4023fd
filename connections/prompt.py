from typing import Iterable, List

from .models import ReferenceRecord

DATA_HEADER = "Available users data:"
NO_USERS_LINE = "No users found in the database."

INSTRUCTIONS = (
    "Based on the available users and my query, identify any users that match my intent "
    "by name, university, or tags/interests. For each matched user, output their details "
    'in this exact format: "Name: [Name]|University: [University Name]|Interests: '
    '[Comma separated tags]|LinkedIn: [LinkedIn URL]". If no match is found, just say '
    '"No matches found."'
)


def _text(value) -> str:
    return "" if value is None else str(value)


def format_tags(tags) -> str:
    if not isinstance(tags, (list, tuple)):
        return ""
    return ",".join(_text(t) for t in tags)


def format_record(record: ReferenceRecord) -> str:
    return (
        f'- ID: {_text(record.id)}, Name: "{_text(record.name)}", '
        f'University: "{_text(record.affiliation)}", Tags: {format_tags(record.tags)}, '
        f'LinkedIn: "{_text(record.contact_link)}"'
    )


def build_prompt(records: Iterable[ReferenceRecord], user_prompt: str) -> str:
    lines: List[str] = [format_record(r) for r in records]
    if not lines:
        lines = [NO_USERS_LINE]
    data_block = "\n".join([DATA_HEADER] + lines)
    return f'{data_block}\n\nUser query: "{user_prompt}"\n\n{INSTRUCTIONS}'
