"""PDF link extraction from raw page text.

Plain regex matching, not an HTML parse: it copes with broken markup and only
understands double-quoted href attributes whose value ends in ``.pdf``.
"""

import re
from typing import List

PDF_HREF_PATTERN = re.compile(r'href="([^"]+\.pdf)"')


def extract_pdf_urls(text: str) -> List[str]:
    """Return every captured href value ending in .pdf, in document order."""
    if not text:
        return []
    return [match.group(1) for match in PDF_HREF_PATTERN.finditer(text)]
