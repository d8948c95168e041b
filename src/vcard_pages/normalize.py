from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from .config import Defaults
from .io import RECORD_SUFFIXES
from .model import ContactInfo, ContactRecord, Name, Phone

_SCHEME = re.compile(r"^https?://")
_NON_DIGIT = re.compile(r"\D", re.ASCII)


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _mapping(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _rest(data: dict[str, Any], known: tuple[str, ...]) -> dict[str, Any]:
    return {k: v for k, v in data.items() if k not in known}


# ── Derived values ─────────────────────────────────────────────────────────────

def website_display(url: str | None) -> str:
    """'https://team-ensemble.ch/' -> 'team-ensemble.ch'."""
    if not url:
        return ""
    return _SCHEME.sub("", url).removesuffix("/")


def raw_phone_number(formatted: str | None) -> str:
    """Digits only; a leading '+' goes along with spaces and brackets."""
    if not formatted:
        return ""
    return _NON_DIGIT.sub("", str(formatted))


def vcard_filename(name: Name) -> str:
    return f"{name.first}-{name.last}.vcf"


def slug_from_filename(filename: str) -> str:
    for suffix in RECORD_SUFFIXES:
        if filename.endswith(suffix):
            return filename[: -len(suffix)]
    return filename


# ── Record normalisation ───────────────────────────────────────────────────────

def _normalize_name(raw: dict[str, Any]) -> Name:
    first = _text(raw.get("first"))
    last = _text(raw.get("last"))
    credentials = raw.get("credentials")
    return Name(
        first=first,
        last=last,
        # always rebuilt from first/last, a supplied `full` is ignored
        full=f"{first} {last}",
        credentials=None if credentials is None else str(credentials),
        extra=_rest(raw, ("first", "last", "full", "credentials")),
    )


def _normalize_contact(raw: dict[str, Any], defaults: Defaults) -> ContactInfo:
    phone = None
    if isinstance(raw.get("phone"), dict):
        raw_phone = raw["phone"]
        phone = Phone(
            mobile=raw_phone.get("mobile") or None,
            extra=_rest(raw_phone, ("mobile",)),
        )
    return ContactInfo(
        phone=phone,
        email=raw.get("email") or None,
        website=raw.get("website") or defaults.website,
        extra=_rest(raw, ("phone", "email", "website")),
    )


def normalize_record(
    raw: dict[str, Any],
    source: Path | str,
    defaults: Defaults | None = None,
) -> ContactRecord:
    """Build a ContactRecord from a parsed record file.

    Missing fields are not an error: an absent first or last name comes
    through as an empty string and renders blank.
    """
    defaults = defaults or Defaults()
    filename = Path(source).name
    slug = raw.get("slug")

    return ContactRecord(
        name=_normalize_name(_mapping(raw.get("name"))),
        slug=str(slug) if slug else slug_from_filename(filename),
        organization=raw.get("organization") or defaults.organization,
        title=raw.get("title") or None,
        contact=_normalize_contact(_mapping(raw.get("contact")), defaults),
        social=_mapping(raw.get("social")),
        extra=_rest(raw, ("name", "slug", "organization", "title", "contact", "social")),
        source=filename,
    )
