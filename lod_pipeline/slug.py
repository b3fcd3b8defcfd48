import re
from typing import Optional

_NON_ALNUM = re.compile(r"[\W_]+")


def slugify(text: Optional[str]) -> str:
    """
    Turn a display string into a URL slug.

    Lowercases the text and collapses every run of characters that are not
    letters or digits into a single hyphen, trimming hyphens at either end.
    "James Minahan" becomes "james-minahan".
    """
    if not text:
        return ""
    return _NON_ALNUM.sub("-", text).strip("-").lower()
