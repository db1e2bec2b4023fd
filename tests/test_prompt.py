from connections.models import ReferenceRecord
from connections.prompt import (
    INSTRUCTIONS,
    NO_USERS_LINE,
    build_prompt,
    format_record,
    format_tags,
)


def _record(**kw):
    row = {"id": 1, "name": "Ada", "university": "MIT", "tags": ["ml", "nlp"], "linkedin": "http://x"}
    row.update(kw)
    return ReferenceRecord.model_validate(row)


def test_format_record_exact_line():
    assert format_record(_record()) == (
        '- ID: 1, Name: "Ada", University: "MIT", Tags: ml,nlp, LinkedIn: "http://x"'
    )


def test_format_tags_non_sequence_is_empty():
    assert format_tags("ml") == ""
    assert format_tags(None) == ""
    assert format_tags({"a": 1}) == ""
    assert format_tags([]) == ""


def test_format_record_with_bad_tags_and_missing_fields():
    rec = ReferenceRecord.model_validate({"id": 7, "name": "Grace", "tags": "oops"})
    assert format_record(rec) == '- ID: 7, Name: "Grace", University: "", Tags: , LinkedIn: ""'


def test_build_prompt_one_line_per_record_in_order():
    records = [_record(id=2, name="Bob"), _record(id=1, name="Ada"), _record(id=3, name="Cy")]
    prompt = build_prompt(records, "find ML researchers")

    lines = prompt.splitlines()
    record_lines = [line for line in lines if line.startswith("- ID:")]
    assert [line.split(",")[0] for line in record_lines] == ["- ID: 2", "- ID: 1", "- ID: 3"]
    assert NO_USERS_LINE not in prompt

    data, rest = prompt.split('\n\nUser query: "find ML researchers"\n\n')
    assert data.endswith(record_lines[-1])
    assert rest == INSTRUCTIONS


def test_build_prompt_empty_records():
    prompt = build_prompt([], "anyone?")
    assert NO_USERS_LINE in prompt.splitlines()
    assert "- ID:" not in prompt
    assert 'User query: "anyone?"' in prompt
    assert prompt.endswith(INSTRUCTIONS)


def test_instructions_mention_format_and_fallback():
    assert (
        "Name: [Name]|University: [University Name]|Interests: [Comma separated tags]|LinkedIn: [LinkedIn URL]"
        in INSTRUCTIONS
    )
    assert "No matches found." in INSTRUCTIONS
    for word in ("name", "university", "tags/interests"):
        assert word in INSTRUCTIONS
