from __future__ import annotations

from .model import ContactRecord
from .normalize import raw_phone_number

CRLF = "\r\n"


def card_lines(record: ContactRecord) -> list[str]:
    name = record.name
    contact = record.contact
    lines = [
        "BEGIN:VCARD",
        "VERSION:3.0",
        f"FN:{name.full}",
        f"N:{name.last};{name.first}",
    ]
    if record.title:
        lines.append(f"TITLE:{record.title}")
    if record.organization:
        lines.append(f"ORG:{record.organization}")
    if contact.phone is not None and contact.phone.mobile:
        lines.append(f"TEL;TYPE=CELL:{raw_phone_number(contact.phone.mobile)}")
    if contact.email:
        lines.append(f"EMAIL:{contact.email}")
    if contact.website:
        lines.append(f"URL;TYPE=WORK:{contact.website}")
    # one URL per social profile, in file order
    for url in record.social.values():
        if url:
            lines.append(f"URL;TYPE=WORK:{url}")
    lines.append("END:VCARD")
    return lines


def card_to_vcf_text(record: ContactRecord) -> str:
    return CRLF.join(card_lines(record))
