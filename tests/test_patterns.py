import re

import pytest

from regexform import FormPattern, PatternConfigError


def test_permissive_matches_anything():
    patterns = FormPattern.permissive()
    for field in ("title", "phone", "mail"):
        assert patterns.match(field, "")
        assert patterns.match(field, "anything at all")


def test_strict_presets(strict):
    assert strict.match("title", "Alice")
    assert not strict.match("title", "")
    assert strict.match("title", "   ")
    assert strict.match("title", "\n")
    assert strict.match("phone", "123")
    assert not strict.match("phone", "12a3")
    assert strict.match("mail", "a@b.com")
    assert not strict.match("mail", "not-an-email")


def test_search_semantics_without_anchors():
    patterns = FormPattern(phone=r"\d")
    assert patterns.match("phone", "call 5 now")
    assert not patterns.match("phone", "no digits")


def test_mapping_access(strict):
    assert list(strict) == ["title", "phone", "mail"]
    assert len(strict) == 3
    assert isinstance(strict["phone"], re.Pattern)
    with pytest.raises(KeyError):
        strict["fax"]


def test_malformed_pattern_raises_at_construction():
    with pytest.raises(PatternConfigError) as exc_info:
        FormPattern(phone="[0-9")
    assert exc_info.value.field == "phone"
    assert isinstance(exc_info.value, ValueError)


def test_from_mapping_overrides_base(strict):
    patterns = FormPattern.from_mapping({"phone": r"^\+\d+$", "mail": None}, base=strict)
    assert patterns.sources["phone"] == r"^\+\d+$"
    assert patterns.sources["mail"] == strict.sources["mail"]
    assert patterns.sources["title"] == strict.sources["title"]


def test_from_mapping_defaults_to_permissive():
    patterns = FormPattern.from_mapping({"title": "^x"})
    assert patterns.sources == {"title": "^x", "phone": "", "mail": ""}


def test_from_mapping_rejects_unknown_field():
    with pytest.raises(PatternConfigError):
        FormPattern.from_mapping({"fax": ".*"})


def test_equality():
    assert FormPattern.strict() == FormPattern.strict()
    assert FormPattern.strict() != FormPattern.permissive()
