"""Parsing and printing bucket listings."""

from __future__ import annotations

import xml.etree.ElementTree as ElementTree
from dataclasses import dataclass, field

U64_MAX = 2**64 - 1


@dataclass
class BucketContents:
    """One object in a bucket listing."""

    key: str
    size: int


@dataclass
class ListBucketResult:
    """The objects returned by a bucket listing."""

    contents: list[BucketContents] = field(default_factory=list)

    def lines(self) -> list[str]:
        """Return one ``key size`` line per object."""
        return [f"{item.key} {item.size}" for item in self.contents]

    def show(self) -> None:
        """Print the listing."""
        for line in self.lines():
            print(line)


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _child_text(element: ElementTree.Element, name: str) -> str:
    for child in element:
        if _local_name(child.tag) == name:
            return child.text or ""
    raise ValueError(f"missing field {name}")


def _parse_size(text: str) -> int:
    text = text.strip()
    if not text or not text.isascii() or not text.isdigit():
        raise ValueError(f"invalid size: {text!r}")
    value = int(text)
    if value > U64_MAX:
        raise ValueError(f"size too large: {text!r}")
    return value


def parse_list_bucket_result(text: str) -> ListBucketResult:
    """Parse a ``ListBucketResult`` XML document."""
    try:
        root = ElementTree.fromstring(text)
    except ElementTree.ParseError as exc:
        raise ValueError(str(exc)) from exc
    contents = [
        BucketContents(
            key=_child_text(element, "Key"),
            size=_parse_size(_child_text(element, "Size")),
        )
        for element in root
        if _local_name(element.tag) == "Contents"
    ]
    return ListBucketResult(contents)