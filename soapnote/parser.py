"""Extract SOAP sections from the free-text reply of the generation service.

Each label is matched at its first occurrence anywhere in the reply,
case-insensitively, with an optional colon. A section runs up to the next
label in the fixed order (which must carry its colon) or to the end of the
reply. Labels are not anchored to line starts, so a label word inside prose
(``"the plan"``) can open a section early.
"""

import logging
import re

from soapnote.schemas import SOAPNote

logger = logging.getLogger(__name__)

_SECTION_PATTERNS = {
    "subjective": re.compile(r"SUBJECTIVE:?\s*([\s\S]*?)(?=OBJECTIVE:|\Z)", re.IGNORECASE),
    "objective": re.compile(r"OBJECTIVE:?\s*([\s\S]*?)(?=ASSESSMENT:|\Z)", re.IGNORECASE),
    "assessment": re.compile(r"ASSESSMENT:?\s*([\s\S]*?)(?=PLAN:|\Z)", re.IGNORECASE),
    "plan": re.compile(r"PLAN:?\s*([\s\S]*?)\Z", re.IGNORECASE),
}


def extract_section(text: str, section: str) -> str:
    match = _SECTION_PATTERNS[section].search(text)
    if match is None:
        return ""
    return match.group(1).strip()


def parse_soap_note(text: str) -> SOAPNote:
    """Split ``text`` into the four SOAP fields.

    Never raises. When no section is found the whole reply, untrimmed, is
    kept in ``subjective`` so nothing the service wrote is lost.
    """

    sections = {name: extract_section(text, name) for name in _SECTION_PATTERNS}

    if not any(sections.values()):
        logger.warning("No SOAP section labels found in reply; keeping raw text (%d chars)", len(text))
        return SOAPNote(subjective=text)

    missing = [name for name, value in sections.items() if not value]
    if missing:
        logger.info("SOAP reply missing sections: %s", ", ".join(missing))
    return SOAPNote(**sections)
