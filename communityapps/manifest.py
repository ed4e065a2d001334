"""App manifests: the metadata that describes a community app, with checks
and helpers that derive identifiers from an app's display name."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, field
from typing import Callable

# Longest app name and summary that display properly in the mobile app.
MAX_NAME_LENGTH = 17
MAX_SUMMARY_LENGTH = 27

_PUNCTUATION = (".", "!", "?")
_SMALL_WORDS = " a an on the to of "


class ManifestError(ValueError):
    """Raised when a manifest field does not meet the app standards."""


@dataclass
class Manifest:
    """Describes one app: its identity, display text and source code."""

    id: str = ""
    name: str = ""
    summary: str = ""
    desc: str = ""
    author: str = ""
    file_name: str = ""
    package_name: str = ""
    source: bytes = field(default=b"", repr=False)

    def validate(self) -> Manifest:
        """Check every field in turn, raising ManifestError on the first bad one."""
        checks: tuple[tuple[Callable[[str], str], str], ...] = (
            (validate_id, self.id),
            (validate_name, self.name),
            (validate_summary, self.summary),
            (validate_desc, self.desc),
            (validate_author, self.author),
            (validate_file_name, self.file_name),
            (validate_package_name, self.package_name),
        )
        for check, value in checks:
            check(value)
        return self

    def to_dict(self) -> dict[str, str]:
        """Return the serialisable fields; the source code is left out."""
        return {
            "id": self.id,
            "name": self.name,
            "summary": self.summary,
            "desc": self.desc,
            "author": self.author,
            "file_name": self.file_name,
            "package_name": self.package_name,
        }


def _is_separator(ch: str) -> bool:
    if ch <= "\x7f":
        return not (ch.isascii() and (ch.isalnum() or ch == "_"))
    category = unicodedata.category(ch)
    if category.startswith("L") or category == "Nd":
        return False
    return ch.isspace()


def _title_rune(ch: str) -> str:
    titled = ch.title()
    return titled if len(titled) == 1 else ch


def _upper_first_letters(text: str) -> str:
    """Uppercase the first letter of each word, leaving other letters alone."""
    result = []
    previous = " "
    for ch in text:
        result.append(_title_rune(ch) if _is_separator(previous) else ch)
        previous = ch
    return "".join(result)


def _title_case(text: str) -> str:
    words = []
    for word in text.split(" "):
        if f" {word} " in _SMALL_WORDS and len(word) > 1:
            words.append(word)
        else:
            words.append(_upper_first_letters(word))
    return " ".join(words)


def _is_letter_or_number(ch: str) -> bool:
    return unicodedata.category(ch)[0] in ("L", "N")


def _starts_uppercased(text: str) -> bool:
    first = text.split(" ")[0]
    return first == _upper_first_letters(first)


def validate_name(name: str) -> str:
    """Check an app name: non-empty, title case and short enough."""
    if not name:
        raise ManifestError("name cannot be empty")
    if name != _title_case(name):
        raise ManifestError(f"'{name}' should be title case, 'Fuzzy Clock' for example")
    if len(name.encode("utf-8")) > MAX_NAME_LENGTH:
        raise ManifestError(f"app names need to be less then {MAX_NAME_LENGTH} characters")
    return name


def validate_summary(summary: str) -> str:
    """Check a summary: non-empty, short, no end punctuation, capitalised."""
    if not summary:
        raise ManifestError("summary cannot be empty")
    if len(summary.encode("utf-8")) > MAX_SUMMARY_LENGTH:
        raise ManifestError(
            f"app summaries need to be less then {MAX_SUMMARY_LENGTH} characters"
        )
    if summary.endswith(_PUNCTUATION):
        raise ManifestError("app summaries should not end in punctuation")
    if not _starts_uppercased(summary):
        raise ManifestError("app summaries should start with an uppercased character")
    return summary


def validate_desc(desc: str) -> str:
    """Check a description: non-empty, ends in punctuation, capitalised."""
    if not desc:
        raise ManifestError("desc cannot be empty")
    if not desc.endswith(_PUNCTUATION):
        raise ManifestError("app descriptions should end in punctuation")
    if not _starts_uppercased(desc):
        raise ManifestError("app descriptions should start with an uppercased character")
    return desc


def validate_author(author: str) -> str:
    """Check that an author is given."""
    if not author:
        raise ManifestError("author cannot be empty")
    return author


def validate_package_name(package_name: str) -> str:
    """Check a package name: non-empty, lower case letters and numbers only."""
    if not package_name:
        raise ManifestError("package names cannot be empty")
    if package_name != package_name.lower():
        raise ManifestError("package names should be lower case")
    if not all(_is_letter_or_number(ch) for ch in package_name):
        raise ManifestError(
            "package names can only contain letters, numbers, or an underscore character"
        )
    return package_name


def validate_file_name(file_name: str) -> str:
    """Check a source file name: lower case, '.star' suffix, word characters."""
    if not file_name:
        raise ManifestError("fileName cannot be empty")
    if not file_name.endswith(".star"):
        raise ManifestError(f"file names should end in .star: '{file_name}'")
    stem = file_name[: -len(".star")]
    if stem != stem.lower():
        raise ManifestError("file names should be lower case")
    if not all(_is_letter_or_number(ch) or ch == "_" for ch in stem):
        raise ManifestError(
            "file names can only contain letters, numbers, or an underscore character"
        )
    return file_name


def validate_id(app_id: str) -> str:
    """Check an app id: non-empty, lower case letters, numbers and dashes."""
    if not app_id:
        raise ManifestError("id cannot be empty")
    lowered = app_id.lower()
    if app_id != lowered:
        raise ManifestError(f"ids should be lower case, {app_id} != {lowered}")
    if not all(_is_letter_or_number(ch) or ch == "-" for ch in app_id):
        raise ManifestError("ids can only contain letters, numbers, or a dash character")
    return app_id


def generate_package_name(name: str) -> str:
    """Derive a package name from an app name."""
    cleaned = name.replace("-", "").replace("_", "")
    return "".join(cleaned.split()).lower()


def generate_id(name: str) -> str:
    """Derive an app id from an app name."""
    return "-".join(name.replace("_", "-").split()).lower()


def generate_file_name(name: str) -> str:
    """Derive the source file name from an app name."""
    return "_".join(name.replace("-", "_").split()).lower() + ".star"