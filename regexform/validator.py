"""
Form Validator - Checks a submission against a pattern set
"""
from dataclasses import dataclass, field
from typing import Dict, Iterator, Mapping, Optional

from loguru import logger as log

from .patterns import FIELDS, FormPattern

ERROR_MESSAGES = {name: f"invalid {name}" for name in FIELDS}


@dataclass(frozen=True)
class FormSubmission:
    """Values posted by the client; None means the field was not sent"""
    title: Optional[str] = None
    phone: Optional[str] = None
    mail: Optional[str] = None
    save: bool = False

    @classmethod
    def from_form(cls, form: Mapping[str, str]) -> "FormSubmission":
        """Build from a request's form data; non-text parts count as absent"""
        values = {}
        for name in FIELDS:
            value = form.get(name)
            values[name] = value if isinstance(value, str) else None
        return cls(save="save" in form, **values)

    def value(self, name: str) -> str:
        """Submitted value, empty string when absent"""
        value = getattr(self, name)
        return "" if value is None else value


@dataclass(frozen=True)
class FieldResult:
    is_valid: bool = True
    error: Optional[str] = None


@dataclass(frozen=True)
class ValidationResult(Mapping):
    """Outcome of one validation pass, one FieldResult per field"""
    title: FieldResult = field(default_factory=FieldResult)
    phone: FieldResult = field(default_factory=FieldResult)
    mail: FieldResult = field(default_factory=FieldResult)

    def __getitem__(self, name: str) -> FieldResult:
        if name not in FIELDS:
            raise KeyError(name)
        return getattr(self, name)

    def __iter__(self) -> Iterator[str]:
        return iter(FIELDS)

    def __len__(self) -> int:
        return len(FIELDS)

    @classmethod
    def empty(cls) -> "ValidationResult":
        """Result shown before anything was validated"""
        return cls()

    @property
    def is_valid(self) -> bool:
        return all(r.is_valid for r in self.values())

    @property
    def errors(self) -> Dict[str, str]:
        """Error message by field, invalid fields only"""
        return {name: r.error for name, r in self.items() if not r.is_valid}


def validate(submission: FormSubmission, patterns: FormPattern, verbose: bool = False) -> ValidationResult:
    """Check every field independently against its pattern"""
    results = {}
    for name in FIELDS:
        value = submission.value(name)
        if patterns.match(name, value):
            results[name] = FieldResult()
        else:
            results[name] = FieldResult(is_valid=False, error=ERROR_MESSAGES[name])
            if verbose: log.debug(f"{name}={value!r} does not match {patterns.sources[name]!r}")
    return ValidationResult(**results)
