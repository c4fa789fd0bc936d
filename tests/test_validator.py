import pytest

from regexform import FieldResult, FormPattern, FormSubmission, ValidationResult, validate


def test_all_valid(strict):
    submission = FormSubmission(title="Alice", phone="123", mail="a@b.com", save=True)
    result = validate(submission, strict)
    assert result.is_valid
    assert result.errors == {}
    for field in ("title", "phone", "mail"):
        assert result[field] == FieldResult(is_valid=True, error=None)


def test_all_invalid(strict):
    submission = FormSubmission(title="", phone="abc", mail="not-an-email", save=True)
    result = validate(submission, strict)
    assert not result.is_valid
    assert result.errors == {
        "title": "invalid title",
        "phone": "invalid phone",
        "mail": "invalid mail",
    }


@pytest.mark.parametrize("field,bad", [("title", ""), ("phone", "12-34"), ("mail", "a@b")])
def test_fields_are_independent(strict, field, bad):
    values = {"title": "Alice", "phone": "123", "mail": "a@b.com"}
    values[field] = bad
    result = validate(FormSubmission(save=True, **values), strict)
    assert result.errors == {field: f"invalid {field}"}
    for other in set(values) - {field}:
        assert result[other].is_valid


def test_absent_fields_match_as_empty_string():
    patterns = FormPattern(title="^$", phone=r"\d", mail="")
    result = validate(FormSubmission(save=True), patterns)
    assert result.title.is_valid
    assert result.phone.error == "invalid phone"
    assert result.mail.is_valid


def test_permissive_accepts_everything():
    result = validate(FormSubmission(), FormPattern.permissive())
    assert result.is_valid


def test_empty_result():
    result = ValidationResult.empty()
    assert result.is_valid
    assert result.errors == {}
    assert dict(result) == {f: FieldResult() for f in ("title", "phone", "mail")}


def test_submission_from_form_keeps_values_exact():
    submission = FormSubmission.from_form({"title": "  spaced  ", "phone": "1", "save": ""})
    assert submission.title == "  spaced  "
    assert submission.mail is None
    assert submission.value("mail") == ""
    assert submission.save


def test_submission_without_save_marker():
    assert not FormSubmission.from_form({"title": "x"}).save


def test_submission_from_form_ignores_non_text_parts():
    submission = FormSubmission.from_form({"title": object(), "phone": "1", "save": ""})
    assert submission.title is None
    assert submission.phone == "1"
