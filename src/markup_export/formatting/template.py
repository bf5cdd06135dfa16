"""Document skeleton filling and generation timestamps."""

import re
from datetime import datetime
from typing import Optional

FILENAME_PLACEHOLDER = "{export_filename}"
DATE_PLACEHOLDER = "{export_date}"
STYLES_PLACEHOLDER = "{export_styles}"
CONTENT_PLACEHOLDER = "{export_content}"

UNTITLED = "untitled"

# strftime formats for the generation date
DATE_FORMAT_DEFAULT = "%c"
DATE_FORMAT_HTML = "%Y-%m-%dT%H:%M:%S"

_PLACEHOLDER_PATTERN = re.compile(
    r"\{export_(?:filename|date|styles|content)\}"
)


def generation_date(date_format: str, now: Optional[datetime] = None) -> str:
    """Return a freshly formatted timestamp in local time."""
    if now is None:
        now = datetime.now()
    return now.strftime(date_format)


def compose_template(
    template: str,
    file_name: Optional[str],
    date: str,
    styles: str,
    content: str,
) -> str:
    """Fill the four placeholders of a document skeleton.

    Values are inserted verbatim in a single pass, so placeholder text
    that happens to appear inside the content is left alone.

    Args:
        template: Skeleton containing the export placeholders
        file_name: Document file name, or None for an unsaved document
        date: Generation timestamp
        styles: Rendered style definitions
        content: Rendered body

    Returns:
        The complete document text
    """
    values = {
        FILENAME_PLACEHOLDER: file_name if file_name is not None else UNTITLED,
        DATE_PLACEHOLDER: date,
        STYLES_PLACEHOLDER: styles,
        CONTENT_PLACEHOLDER: content,
    }
    return _PLACEHOLDER_PATTERN.sub(lambda match: values[match.group(0)], template)
