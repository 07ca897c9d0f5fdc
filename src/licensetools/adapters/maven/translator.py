"""Translate POM XML into domain license metadata."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import TYPE_CHECKING

from licensetools.domain.ports import LibraryMetadata, LicenseEntry

from .schema import PomDocument

if TYPE_CHECKING:
    from xml.etree.ElementTree import Element

_PROJECT_FIELDS = ("groupId", "artifactId", "version", "name", "url")
_LICENSE_FIELDS = ("name", "url", "distribution", "comments")


class PomParseError(ValueError):
    """Raised when a POM document is not readable XML."""


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _child(element: Element, name: str) -> Element | None:
    for child in element:
        if _local_name(child.tag) == name:
            return child
    return None


def _text(element: Element, name: str) -> str | None:
    child = _child(element, name)
    if child is None or child.text is None:
        return None
    value = child.text.strip()
    return value or None


def _fields(element: Element, names: tuple[str, ...]) -> dict[str, str]:
    payload: dict[str, str] = {}
    for name in names:
        value = _text(element, name)
        if value is not None:
            payload[name] = value
    return payload


def parse_pom(content: bytes) -> PomDocument:
    try:
        root = ET.fromstring(content)  # noqa: S314
    except ET.ParseError as exc:
        raise PomParseError(f"Invalid POM document: {exc}") from exc
    if _local_name(root.tag) != "project":
        raise PomParseError(f"Unexpected POM root element: {_local_name(root.tag)}")

    payload: dict[str, object] = dict(_fields(root, _PROJECT_FIELDS))
    licenses = _child(root, "licenses")
    if licenses is not None:
        payload["licenses"] = [
            _fields(entry, _LICENSE_FIELDS)
            for entry in licenses
            if _local_name(entry.tag) == "license"
        ]
    return PomDocument.model_validate(payload)


def translate_pom(document: PomDocument) -> LibraryMetadata:
    return LibraryMetadata(
        licenses=tuple(
            LicenseEntry(name=entry.name, url=entry.url) for entry in document.licenses
        ),
        name=document.name,
        url=document.url,
    )
