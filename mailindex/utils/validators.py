import re
from typing import List
from mailindex.utils.config import UserProfile

# Loose shape check: something@domain.tld, no spaces, no consecutive dots
_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s.]+$")


def looks_like_email(value: str) -> bool:
    """Return True if value has the shape of an email address"""
    if not value or ".." in value:
        return False
    return bool(_EMAIL_PATTERN.match(value))


def check_profile(profile: UserProfile) -> List[str]:
    """
    Check the profile for addresses that do not look like email addresses.
    Returns a list of warning messages; the profile is never rejected.
    """
    warnings = []

    if profile.primary_email and not looks_like_email(profile.primary_email):
        warnings.append(f"Primary email does not look like an address: {profile.primary_email}")

    for email in profile.other_emails:
        if not looks_like_email(email):
            warnings.append(f"Additional email does not look like an address: {email}")

    return warnings
