from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from jinja2 import ChainableUndefined, Environment, FileSystemLoader, Template, select_autoescape

from .errors import ConfigError
from .model import ContactRecord
from .normalize import vcard_filename, website_display

logger = logging.getLogger(__name__)


def _blank_none(value: Any) -> Any:
    return "" if value is None else value


def load_template(template_path: Path) -> Template:
    """Compile the page template once for the whole build."""
    if not template_path.is_file():
        raise ConfigError(f"Template not found: {template_path}", template_path)
    env = Environment(
        loader=FileSystemLoader(str(template_path.parent)),
        autoescape=select_autoescape(["html", "htm"]),
        keep_trailing_newline=True,
        # absent fields render blank instead of raising or printing "None"
        undefined=ChainableUndefined,
        finalize=_blank_none,
    )
    logger.debug("compiled template %s", template_path)
    return env.get_template(template_path.name)


def page_context(record: ContactRecord) -> dict[str, Any]:
    return {
        **record.to_dict(),
        "websiteDisplay": website_display(record.contact.website),
        "vcardFilename": vcard_filename(record.name),
    }


def render_page(template: Template, record: ContactRecord) -> str:
    return template.render(page_context(record))
