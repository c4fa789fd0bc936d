"""
Pattern Set - Compiled validation rule for each form field
"""
import re
from typing import Dict, Iterator, Mapping, Optional

FIELDS = ("title", "phone", "mail")


class PatternConfigError(ValueError):
    """Raised when a pattern set cannot be built"""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field}: {message}")


class FormPattern(Mapping):
    """
    One compiled regex per form field
    Matching uses search semantics: anchor with ^...$ for a full match
    """

    PERMISSIVE = {"title": "", "phone": "", "mail": ""}
    STRICT = {
        "title": r"(?s).",
        "phone": r"^\d+$",
        "mail": r"^[^@\s]+@[^@\s]+\.[^@\s]+$",
    }

    def __init__(self, title: str = "", phone: str = "", mail: str = ""):
        self._sources = {"title": title, "phone": phone, "mail": mail}
        self._compiled: Dict[str, re.Pattern] = {}
        for field, source in self._sources.items():
            try:
                self._compiled[field] = re.compile(source)
            except re.error as err:
                raise PatternConfigError(field, f"invalid pattern {source!r} ({err})") from err

    def __repr__(self):
        return f"FormPattern({', '.join(f'{k}={v!r}' for k, v in self._sources.items())})"

    def __getitem__(self, field: str) -> re.Pattern:
        return self._compiled[field]

    def __iter__(self) -> Iterator[str]:
        return iter(FIELDS)

    def __len__(self) -> int:
        return len(FIELDS)

    def __eq__(self, other):
        if isinstance(other, FormPattern):
            return self._sources == other._sources
        return NotImplemented

    def __hash__(self):
        return hash(tuple(self._sources.items()))

    @property
    def sources(self) -> Dict[str, str]:
        """Raw pattern strings by field"""
        return dict(self._sources)

    def match(self, field: str, value: str) -> bool:
        """True when the field's pattern is found in value"""
        return self[field].search(value) is not None

    @classmethod
    def permissive(cls) -> "FormPattern":
        """Empty pattern for every field, matches any input"""
        return cls(**cls.PERMISSIVE)

    @classmethod
    def strict(cls) -> "FormPattern":
        """Non-empty title, digits-only phone, simple email"""
        return cls(**cls.STRICT)

    @classmethod
    def from_mapping(cls, overrides: Mapping[str, Optional[str]], base: Optional["FormPattern"] = None) -> "FormPattern":
        """Override fields of base (permissive by default); None values are skipped"""
        sources = (base or cls.permissive()).sources
        for field, source in overrides.items():
            if field not in sources:
                raise PatternConfigError(field, "unknown field")
            if source is not None:
                sources[field] = source
        return cls(**sources)
