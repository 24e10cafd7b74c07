"""
Job Filter Predicates - backend-neutral filter descriptors

Listing and counting must agree on which jobs match, otherwise the
displayed totals drift away from the pages that can actually be
retrieved. Both paths therefore go through the same two steps:

    JobFilters → build_job_predicates() → [Predicate, ...]
                                              ↓
                                   compile_predicates(model)
                                              ↓
                              SQLAlchemy WHERE clause elements

Null salary policy:
    A missing opposite bound is open-ended. A job paying "80k+" satisfies
    any minimum up to infinity; a job paying "up to 60k" satisfies any
    maximum of at least its (unknown, lower) floor. A job without any
    salary information never matches a salary filter.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Tuple

from sqlalchemy import and_, or_, true

from jobboard.models.job import JobType

LIKE_ESCAPE_CHAR = "\\"

# Largest magnitude a SQLite/PostgreSQL BIGINT parameter can hold
MAX_STORED_INT = 2 ** 63 - 1

_LEADING_INT = re.compile(r"\s*[+-]?\d+")


class PredicateOp(str, Enum):
    EQ = "eq"
    IS_TRUE = "is_true"
    ILIKE = "ilike"
    ILIKE_ANY = "ilike_any"
    AT_LEAST = "at_least"
    AT_MOST = "at_most"


@dataclass(frozen=True)
class Predicate:
    """
    One filter condition over the jobs relation.

    For ILIKE_ANY the condition holds when any of ``fields`` matches.
    For AT_LEAST / AT_MOST, ``fields[0]`` is compared and ``fields[1]`` is
    the opposite bound that keeps a null ``fields[0]`` in range.
    """

    op: PredicateOp
    fields: Tuple[str, ...]
    value: Any = None


@dataclass
class JobFilters:
    """Optional conjunctive filters for job listings and counts."""

    search: Optional[str] = None
    category: Optional[str] = None
    job_type: Optional[JobType] = None
    location: Optional[str] = None
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    featured_only: bool = False
    company_id: Optional[str] = None

    def has_filters(self) -> bool:
        """True when any user-facing filter is set (featured/company scope excluded)."""
        return bool(
            self.search
            or self.category
            or self.job_type
            or self.location
            or self.salary_min
            or self.salary_max
        )

    @classmethod
    def from_query_params(
        cls,
        search: Optional[str] = None,
        category: Optional[str] = None,
        job_type: Optional[str] = None,
        location: Optional[str] = None,
        salary_min: Optional[str] = None,
        salary_max: Optional[str] = None,
    ) -> "JobFilters":
        """
        Build filters from raw query-string values.

        Malformed values are dropped rather than rejected: blank strings,
        non-numeric salaries and unknown job types all become "not set".
        """
        return cls(
            search=_clean_text(search),
            category=_clean_text(category),
            job_type=parse_job_type(job_type),
            location=_clean_text(location),
            salary_min=parse_optional_int(salary_min),
            salary_max=parse_optional_int(salary_max),
        )


def _clean_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_optional_int(value: Any, max_value: int = MAX_STORED_INT) -> Optional[int]:
    """
    Parse the leading integer of ``value``, returning None when there is none.

    Trailing text is ignored ("80000.50" -> 80000, "3abc" -> 3). Values
    whose magnitude exceeds ``max_value`` are treated as malformed, since
    the store cannot bind them.

    Example:
        >>> parse_optional_int(" 42k")
        42
        >>> parse_optional_int("k42") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        number = value
    else:
        match = _LEADING_INT.match(str(value))
        if not match:
            return None
        try:
            number = int(match.group(0))
        except ValueError:
            # digit strings past the interpreter's int conversion limit
            return None
    if abs(number) > max_value:
        return None
    return number


def parse_job_type(value: Optional[str]) -> Optional[JobType]:
    if not value:
        return None
    try:
        return JobType(value.strip().lower())
    except ValueError:
        return None


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so user input matches literally."""
    return (
        term.replace(LIKE_ESCAPE_CHAR, LIKE_ESCAPE_CHAR * 2)
        .replace("%", LIKE_ESCAPE_CHAR + "%")
        .replace("_", LIKE_ESCAPE_CHAR + "_")
    )


def build_job_predicates(filters: Optional[JobFilters] = None) -> List[Predicate]:
    """
    Translate a filter set into predicate descriptors.

    The active-job predicate is always first. Unset filters produce no
    predicate at all.
    """
    filters = filters or JobFilters()
    predicates = [Predicate(PredicateOp.IS_TRUE, ("is_active",))]

    if filters.category:
        predicates.append(Predicate(PredicateOp.EQ, ("category",), filters.category))

    if filters.job_type:
        predicates.append(Predicate(PredicateOp.EQ, ("job_type",), JobType(filters.job_type).value))

    if filters.location:
        predicates.append(Predicate(PredicateOp.ILIKE, ("location",), filters.location))

    if filters.search:
        predicates.append(Predicate(PredicateOp.ILIKE_ANY, ("title", "description"), filters.search))

    if filters.featured_only:
        predicates.append(Predicate(PredicateOp.IS_TRUE, ("is_featured",)))

    if filters.company_id:
        predicates.append(Predicate(PredicateOp.EQ, ("company_id",), filters.company_id))

    if filters.salary_min is not None:
        predicates.append(Predicate(PredicateOp.AT_LEAST, ("salary_max", "salary_min"), filters.salary_min))

    if filters.salary_max is not None:
        predicates.append(Predicate(PredicateOp.AT_MOST, ("salary_min", "salary_max"), filters.salary_max))

    return predicates


def _substring_pattern(term: str) -> str:
    return f"%{escape_like(term)}%"


def compile_predicate(predicate: Predicate, model) -> Any:
    """Compile a single descriptor into a SQLAlchemy expression for ``model``."""
    columns = [getattr(model, name) for name in predicate.fields]
    op = predicate.op

    if op == PredicateOp.EQ:
        return columns[0] == predicate.value

    if op == PredicateOp.IS_TRUE:
        return columns[0].is_(True)

    if op == PredicateOp.ILIKE:
        return columns[0].ilike(_substring_pattern(predicate.value), escape=LIKE_ESCAPE_CHAR)

    if op == PredicateOp.ILIKE_ANY:
        pattern = _substring_pattern(predicate.value)
        return or_(*[col.ilike(pattern, escape=LIKE_ESCAPE_CHAR) for col in columns])

    if op == PredicateOp.AT_LEAST:
        compared, opposite = columns
        return or_(compared >= predicate.value, and_(compared.is_(None), opposite.is_not(None)))

    if op == PredicateOp.AT_MOST:
        compared, opposite = columns
        return or_(compared <= predicate.value, and_(compared.is_(None), opposite.is_not(None)))

    raise ValueError(f"Unsupported predicate op: {op}")


def compile_predicates(predicates: List[Predicate], model) -> List[Any]:
    """Compile descriptors into a list of WHERE clause elements (ANDed by the caller)."""
    if not predicates:
        return [true()]
    return [compile_predicate(p, model) for p in predicates]
