"""Map a document URL to the local filename it is stored under.

The mapping is lossy on purpose: URLs that share a basename land on the same
file, so a document linked from several product pages is fetched once.
"""

import re

PDF_EXTENSION = ".pdf"

_NON_ALNUM = re.compile(r"[^a-z0-9]")
_UNDERSCORE_RUN = re.compile(r"_+")

# Stripped anywhere in the stem, not only at the end
_INVALID_SUBSTRINGS = ["_pdf"]


def basename(url: str) -> str:
    return url.rstrip("/").rsplit("/", 1)[-1]


def url_to_filename(url: str) -> str:
    safe = basename(url.lower())
    safe = _NON_ALNUM.sub("_", safe)
    safe = _UNDERSCORE_RUN.sub("_", safe)
    safe = safe.strip("_")

    for invalid in _INVALID_SUBSTRINGS:
        safe = safe.replace(invalid, "")

    if not safe.endswith(PDF_EXTENSION):
        safe += PDF_EXTENSION
    return safe
