"""
Header and contact extraction for the Extraction context.

The header region is everything above the first section label. Its first
line is the candidate's name; its second line is a "|"-delimited list of
contact tokens such as:

    Jane Doe
    jane@x.com | 555-123-4567 | linkedin.com/in/jane | github.com/jane | jane.dev

Tokens are classified by what they contain, not by where they sit on the
line, because résumés order these fields freely.
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional

from sifter.contexts.extraction.logger import _log_debug
from sifter.contexts.extraction.normalizer import content_lines
from sifter.contexts.extraction.patterns import ContactPatterns
from sifter.contexts.extraction.record_components import ContactBundle


@dataclass
class HeaderInfo:
    """Name and contact details recovered from the header region."""

    name: Optional[str] = None
    contact: Optional[ContactBundle] = None


def looks_like_email(token: str) -> bool:
    return ContactPatterns.EMAIL_MARKER in token


def looks_like_phone(token: str) -> bool:
    """Check for a digit run with at least MIN_PHONE_DIGITS digits."""
    for run in ContactPatterns.PHONE_RUN.findall(token):
        if len(re.sub(r"\D", "", run)) >= ContactPatterns.MIN_PHONE_DIGITS:
            return True
    return False


def looks_like_linkedin(token: str) -> bool:
    return bool(ContactPatterns.LINKEDIN.search(token))


def looks_like_github(token: str) -> bool:
    return bool(ContactPatterns.GITHUB.search(token))


def looks_like_website(token: str) -> bool:
    """
    Check for a bare domain or URL that belongs to no other contact field.

    Email, LinkedIn and GitHub tokens are excluded even though they are
    domain-like, so a token can never satisfy two fields at once.
    """
    if re.search(r"\s", token):
        return False
    if looks_like_email(token) or looks_like_linkedin(token) or looks_like_github(token):
        return False
    return bool(ContactPatterns.DOMAIN.search(token))


# Classification order: first matching unclaimed field wins
CONTACT_CLASSIFIERS: tuple[tuple[str, Callable[[str], bool]], ...] = (
    ("email", looks_like_email),
    ("phone", looks_like_phone),
    ("linkedin", looks_like_linkedin),
    ("github", looks_like_github),
    ("website", looks_like_website),
)


def classify_contact_token(token: str, claimed: set[str]) -> Optional[str]:
    """
    Classify a contact token into the first unclaimed matching field.

    Args:
        token: Trimmed contact token
        claimed: Field names already populated

    Returns:
        Field name, or None if the token matches no unclaimed field
    """
    for field_name, matches in CONTACT_CLASSIFIERS:
        if field_name in claimed:
            continue
        if matches(token):
            return field_name
    return None


def parse_contact_line(line: str) -> ContactBundle:
    """
    Parse a "|"-delimited contact line into a ContactBundle.

    Args:
        line: Contact line (second line of the header)

    Returns:
        ContactBundle with each recognized field populated once
    """
    contact = ContactBundle()
    claimed: set[str] = set()

    tokens = [token.strip() for token in line.split(ContactPatterns.CONTACT_DELIMITER)]

    for token in tokens:
        if not token:
            continue
        field_name = classify_contact_token(token, claimed)
        if field_name is None:
            _log_debug(f"Discarding unclassified contact token: '{token}'")
            continue
        setattr(contact, field_name, token)
        claimed.add(field_name)

    return contact


def extract_header(header_text: str) -> HeaderInfo:
    """
    Extract name and contact details from the header region.

    Args:
        header_text: Text before the first section label

    Returns:
        HeaderInfo; fields are None when the header has too few lines
    """
    lines = content_lines(header_text)
    info = HeaderInfo()

    if not lines:
        return info

    info.name = lines[0]

    if len(lines) > 1:
        info.contact = parse_contact_line(lines[1])

    return info
