"""Document model for Refractor engine configuration files (.con).

A .con file is a list of ``key value`` lines. Repeated keys are folded into
one multi-value entry whose sub-values are joined with ``;``. Serialization
is deterministic: lines are sorted, joined with CRLF and followed by an
empty line, since Battlefield 2 resets the last line to its default otherwise.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Union

QUOTE_CHAR = '"'
MULTI_VALUE_SEPARATOR = ";"
LINE_SEPARATOR = "\r\n"

# Any byte sequence survives a decode/encode round trip
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class KeyNotFoundError(LookupError):
    """Raised when a key is not present in a .con document."""

    def __init__(self, path: Union[Path, str], key: str):
        super().__init__(f"no such key in {path}: {key!r}")
        self.path = path
        self.key = key


def is_quoted(value: str) -> bool:
    """Check whether a value is a single quoted string.

    A value counts as quoted if it starts and ends with a quote character
    and contains no other quote characters in between.
    """
    return (
        value.startswith(QUOTE_CHAR)
        and value.endswith(QUOTE_CHAR)
        and value.count(QUOTE_CHAR) == 2
    )


def quote(value: str) -> str:
    return f"{QUOTE_CHAR}{value}{QUOTE_CHAR}"


def unquote(value: str) -> str:
    """Strip the enclosing quote pair if the value is quoted."""
    if is_quoted(value):
        return value[1:-1]
    return value


@dataclass
class ConValue:
    """The textual payload of a single .con entry.

    ``content`` holds the value exactly as written after the key. Multiple
    lines with the same key are stored as one content string, joined by
    the multi-value separator.
    """
    content: str

    @classmethod
    def quoted(cls, content: str) -> "ConValue":
        return cls(quote(content))

    @classmethod
    def from_list(cls, items: Iterable[str]) -> "ConValue":
        return cls(MULTI_VALUE_SEPARATOR.join(items))

    @classmethod
    def quoted_from_list(cls, items: Iterable[str]) -> "ConValue":
        return cls.from_list(quote(item) for item in items)

    def as_string(self) -> str:
        """Get the value with an enclosing quote pair removed.

        Returns:
            The unquoted content, or the content unchanged if it is not a
            single quoted string (e.g. ``"a" b``)
        """
        return unquote(self.content)

    def as_raw_list(self) -> list[str]:
        """Split a multi-value into its sub-values as stored (quotes kept)."""
        return self.content.split(MULTI_VALUE_SEPARATOR)

    def as_list(self) -> list[str]:
        """Split a multi-value into its sub-values, unquoting each one.

        Returns:
            List of sub-values; a single element list for plain values
        """
        return [unquote(item) for item in self.as_raw_list()]


@dataclass
class ConDocument:
    """In-memory representation of one .con file.

    Attributes:
        path: Where the document was read from / will be written to. The
              model itself never interprets it.
        entries: Mapping of key to value. Order is not significant.
    """
    path: Union[Path, str]
    entries: dict[str, ConValue] = field(default_factory=dict)

    @classmethod
    def from_bytes(cls, path: Union[Path, str], data: bytes) -> "ConDocument":
        """Parse raw file content.

        Works with either LF or CRLF line breaks. Lines without a space
        separating key and value are ignored.

        Args:
            path: Path the data was read from
            data: Raw file content

        Returns:
            Parsed ConDocument
        """
        entries: dict[str, ConValue] = {}
        for line in data.decode(_ENCODING, _ERRORS).split("\n"):
            elements = line.rstrip("\r").split(" ", 1)
            if len(elements) != 2:
                continue

            key, content = elements
            current = entries.get(key)
            if current is not None:
                content = MULTI_VALUE_SEPARATOR.join([current.content, content])
            entries[key] = ConValue(content)

        return cls(path=path, entries=entries)

    def has_key(self, key: str) -> bool:
        return key in self.entries

    def get_value(self, key: str) -> ConValue:
        """Get the value stored under a key.

        Raises:
            KeyNotFoundError: If the key is not present
        """
        try:
            return self.entries[key]
        except KeyError:
            raise KeyNotFoundError(self.path, key) from None

    def set_value(self, key: str, value: ConValue) -> None:
        self.entries[key] = value

    def delete(self, key: str) -> None:
        self.entries.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self.entries)

    def to_bytes(self) -> bytes:
        """Serialize the document.

        Each sub-value becomes its own ``key value`` line. Lines are sorted
        by their encoded bytes so equal documents always serialize the same.
        """
        lines = [
            f"{key} {sub_value}"
            for key, value in self.entries.items()
            for sub_value in value.as_raw_list()
        ]
        lines.sort(key=lambda line: line.encode(_ENCODING, _ERRORS))

        # Without a trailing empty line, BF2 ignores the last entry
        lines.append("")

        return LINE_SEPARATOR.join(lines).encode(_ENCODING, _ERRORS)
