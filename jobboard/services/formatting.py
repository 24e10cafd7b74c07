"""Display helpers for job and company pages."""

from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Optional
from urllib.parse import quote, urlencode

COMPANY_DESCRIPTION_LIMIT = 150


def _round_half_up(value: float, digits: int) -> str:
    exponent = Decimal(1).scaleb(-digits)
    return str(Decimal(str(value)).quantize(exponent, rounding=ROUND_HALF_UP))


def format_salary(amount: int) -> str:
    """
    Compact salary label.

    Example:
        >>> format_salary(85000)
        '$85k'
        >>> format_salary(1500000)
        '$1.5M'
    """
    if amount >= 1_000_000:
        return f"${_round_half_up(amount / 1_000_000, 1)}M"
    if amount >= 1000:
        return f"${_round_half_up(amount / 1000, 0)}k"
    return f"${amount:,}"


def format_salary_range(salary_min: Optional[int], salary_max: Optional[int]) -> Optional[str]:
    # Zero is treated the same as unset
    if not salary_min and not salary_max:
        return None
    if salary_min and salary_max:
        return f"{format_salary(salary_min)} - {format_salary(salary_max)}"
    if salary_min:
        return f"{format_salary(salary_min)}+"
    return f"Up to {format_salary(salary_max)}"


def format_job_type(job_type: str) -> str:
    """'full-time' -> 'Full-Time'"""
    return "-".join(word[:1].upper() + word[1:] for word in job_type.split("-"))


def format_posted_date(value: datetime) -> str:
    return f"{value:%B} {value.day}, {value.year}"


def job_page_title(title: str, company_name: str, site_name: str) -> str:
    return f"{title} at {company_name} - {site_name}"


def job_meta_description(
    title: str,
    company_name: str,
    salary_min: Optional[int],
    salary_max: Optional[int],
    location: Optional[str],
    site_name: str,
) -> str:
    salary = format_salary_range(salary_min, salary_max)
    salary_part = f" - {salary}" if salary else ""
    return f"{title} at {company_name}{salary_part}. {location or 'Remote'}. Apply now on {site_name}."


def company_meta_description(name: str, description: Optional[str]) -> str:
    if description:
        suffix = "..." if len(description) > COMPANY_DESCRIPTION_LIMIT else ""
        return f"{description[:COMPANY_DESCRIPTION_LIMIT]}{suffix}"
    return f"View remote job opportunities at {name}. Browse open positions and apply today."


def share_links(title: str, company_name: str, job_url: str) -> Dict[str, str]:
    share_text = f"Check out this remote job: {title} at {company_name}"
    return {
        "twitter": "https://twitter.com/intent/tweet?" + urlencode({"text": share_text, "url": job_url}, quote_via=quote),
        "linkedin": "https://www.linkedin.com/sharing/share-offsite/?" + urlencode({"url": job_url}, quote_via=quote),
    }
