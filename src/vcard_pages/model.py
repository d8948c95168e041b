from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Name:
    first: str = ""
    last: str = ""
    full: str = ""
    credentials: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)  # remaining keys under name:


@dataclass
class Phone:
    mobile: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass
class ContactInfo:
    phone: Phone | None = None
    email: str | None = None
    website: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass
class ContactRecord:
    name: Name
    slug: str
    organization: str | None = None
    title: str | None = None
    contact: ContactInfo = field(default_factory=ContactInfo)
    social: dict[str, Any] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)  # remaining top-level keys
    source: str | None = None  # file name the record was read from

    def to_dict(self) -> dict[str, Any]:
        """Nested-mapping view of the record, extra keys merged back in place."""
        name = {
            **self.name.extra,
            "first": self.name.first,
            "last": self.name.last,
            "full": self.name.full,
        }
        if self.name.credentials is not None:
            name["credentials"] = self.name.credentials

        contact: dict[str, Any] = {**self.contact.extra}
        if self.contact.phone is not None:
            contact["phone"] = {**self.contact.phone.extra, "mobile": self.contact.phone.mobile}
        contact["email"] = self.contact.email
        contact["website"] = self.contact.website

        return {
            **self.extra,
            "name": name,
            "title": self.title,
            "organization": self.organization,
            "contact": contact,
            "social": self.social,
            "slug": self.slug,
        }
