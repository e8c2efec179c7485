"""Locale values parsed from BCP 47 language tags.

Parsing is lenient: well-formed subtags are consumed left to right and
parsing stops silently at the first subtag that does not fit, so a
partially malformed tag still yields its usable prefix. A tag whose
primary language subtag is ill-formed yields the empty (undetermined)
locale rather than an error.
"""

from __future__ import annotations

from pydantic import Field

from httpcontract.models.base import HttpContractBaseModel

UNDETERMINED = "und"

_MAX_EXTLANGS = 3


def _is_alpha(value: str) -> bool:
    return value.isascii() and value.isalpha()


def _is_digit(value: str) -> bool:
    return value.isascii() and value.isdigit()


def _is_alnum(value: str) -> bool:
    return value.isascii() and value.isalnum()


def _is_language(subtag: str) -> bool:
    return 2 <= len(subtag) <= 8 and _is_alpha(subtag)


def _is_extlang(subtag: str) -> bool:
    return len(subtag) == 3 and _is_alpha(subtag)


def _is_script(subtag: str) -> bool:
    return len(subtag) == 4 and _is_alpha(subtag)


def _is_region(subtag: str) -> bool:
    return (len(subtag) == 2 and _is_alpha(subtag)) or (len(subtag) == 3 and _is_digit(subtag))


def _is_variant(subtag: str) -> bool:
    if 5 <= len(subtag) <= 8:
        return _is_alnum(subtag)
    return len(subtag) == 4 and _is_digit(subtag[0]) and _is_alnum(subtag)


class Locale(HttpContractBaseModel):
    """A structured locale such as ``en-US`` or ``zh-Hant-TW``.

    Attributes:
        language: Lowercase primary language, empty when undetermined
        script: Title-case script subtag, or empty
        region: Uppercase region subtag, or empty
        variants: Registered variant subtags in tag order

    Example:
        >>> Locale.for_language_tag("en-us").to_language_tag()
        'en-US'
        >>> Locale.for_language_tag("de-CH-1996").variants
        ('1996',)
        >>> Locale.for_language_tag("!!").is_undetermined()
        True
    """

    language: str = ""
    script: str = ""
    region: str = ""
    variants: tuple[str, ...] = Field(default_factory=tuple)

    @classmethod
    def for_language_tag(cls, tag: str) -> Locale:
        """Parse a language tag leniently.

        The first extended language subtag, when present, replaces the
        primary language (``zh-yue-HK`` parses as ``yue-HK``). Extension and
        private-use sections are ignored. Never raises for string input.
        """
        subtags = tag.strip().split("-")
        count = len(subtags)

        if not _is_language(subtags[0]):
            return cls()
        language = subtags[0].lower()
        index = 1

        if len(language) <= 3:
            extlangs: list[str] = []
            while index < count and len(extlangs) < _MAX_EXTLANGS and _is_extlang(subtags[index]):
                extlangs.append(subtags[index].lower())
                index += 1
            if extlangs:
                language = extlangs[0]

        script = ""
        if index < count and _is_script(subtags[index]):
            script = subtags[index].title()
            index += 1

        region = ""
        if index < count and _is_region(subtags[index]):
            region = subtags[index].upper()
            index += 1

        variants: list[str] = []
        while index < count and _is_variant(subtags[index]):
            variants.append(subtags[index])
            index += 1

        if language == UNDETERMINED:
            language = ""
        return cls(language=language, script=script, region=region, variants=tuple(variants))

    def is_undetermined(self) -> bool:
        return not (self.language or self.script or self.region or self.variants)

    def to_language_tag(self) -> str:
        """Render as a well-formed BCP 47 tag (``und`` for the empty locale)."""
        parts = [self.language or UNDETERMINED]
        if self.script:
            parts.append(self.script)
        if self.region:
            parts.append(self.region)
        parts.extend(self.variants)
        return "-".join(parts)

    def to_posix(self) -> str:
        """Render in ``ll_RR`` form for gettext-style catalogs."""
        if self.region:
            return f"{self.language}_{self.region}"
        return self.language

    def __str__(self) -> str:
        return self.to_language_tag()
