#!/usr/bin/env python3
"""
Scoring Models - Data structures for match scoring inputs and results.
"""

from typing import List, Dict, Any, Optional
from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class CandidateProfile:
    """A job seeker's profile as seen by the scorer."""
    skills: List[str] = field(default_factory=list)
    location: str = ""
    title: str = ""
    experience_years: int = 0

    @classmethod
    def from_record(cls, record: Any) -> "CandidateProfile":
        """Build from an ORM row or any object exposing the profile attributes."""
        return cls(
            skills=list(getattr(record, 'skills', None) or []),
            location=getattr(record, 'location', None) or "",
            title=getattr(record, 'title', None) or "",
            experience_years=getattr(record, 'experience_years', None) or 0,
        )


@dataclass(frozen=True)
class Posting:
    """An open job posting as seen by the scorer.

    `source` keeps a reference to whatever the posting was built from
    (usually the ORM row) so callers can render the original fields.
    """
    created_at: datetime
    skills_required: List[str] = field(default_factory=list)
    location: str = ""
    title: str = ""
    experience_required: int = 0
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    source: Any = field(default=None, compare=False, repr=False)

    @classmethod
    def from_record(cls, record: Any) -> "Posting":
        return cls(
            created_at=record.created_at,
            skills_required=list(getattr(record, 'skills_required', None) or []),
            location=getattr(record, 'location', None) or "",
            title=getattr(record, 'title', None) or "",
            experience_required=getattr(record, 'experience_required', None) or 0,
            salary_min=getattr(record, 'salary_min', None),
            salary_max=getattr(record, 'salary_max', None),
            source=record,
        )


@dataclass
class ScoredPosting:
    """A posting with its rounded score and per-factor breakdown."""
    posting: Posting
    score: int
    raw_score: float = 0.0
    components: Dict[str, float] = field(default_factory=dict)
