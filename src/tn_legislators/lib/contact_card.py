"""Plain-text contact summary, QR image URL and contact URIs for matched legislators."""

import re

import httpx

from tn_legislators.lib.directory.base import LegislatorRecord
from tn_legislators.lib.matcher import MatchResult

QR_API_URL = "https://api.qrserver.com/v1/create-qr-code/"

_NON_DIGIT = re.compile(r"\D")


def tel_uri(phone: str | None) -> str | None:
    """Build a ``tel:`` URI from a display phone number (digits only)."""
    if not phone:
        return None
    digits = _NON_DIGIT.sub("", phone)
    return f"tel:{digits}" if digits else None


def mailto_uri(email: str | None) -> str | None:
    """Build a ``mailto:`` URI."""
    if not email or not email.strip():
        return None
    return f"mailto:{email.strip()}"


def _legislator_block(title: str, legislator: LegislatorRecord) -> list[str]:
    lines = [f"{title} - DISTRICT {legislator.district}", legislator.name]
    if legislator.contact_info.phone:
        lines.append(f"Phone: {legislator.contact_info.phone}")
    if legislator.contact_info.email:
        lines.append(f"Email: {legislator.contact_info.email}")
    return lines


def build_contact_summary(match: MatchResult, address: str) -> str:
    """Build the plain-text contact card encoded into the QR image.

    Args:
        match: Matched legislators.
        address: The address the user submitted.

    Returns:
        Multi-line contact summary.
    """
    lines = ["LEGISLATOR CONTACT INFO", ""]
    if match.senator is not None:
        lines.extend(_legislator_block("STATE SENATOR", match.senator))
        lines.append("")
    if match.representative is not None:
        lines.extend(_legislator_block("STATE REPRESENTATIVE", match.representative))
        lines.append("")
    lines.append(f"Address: {address}")
    return "\n".join(lines)


def build_qr_image_url(text: str, endpoint: str = QR_API_URL, size: int = 200, margin: int = 10) -> str:
    """Build the external QR-rendering URL for a text payload."""
    url = httpx.URL(endpoint, params={"data": text, "size": f"{size}x{size}", "margin": margin})
    return str(url)
