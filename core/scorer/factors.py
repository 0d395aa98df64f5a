#!/usr/bin/env python3
"""
Scoring Factors - Individual contributions to a posting's match score.

Each factor is a pure function returning the points it adds (or, for
experience, may subtract). Weights are fixed tuning constants:

- Skills: up to 50 (40 exact, 10 partial)
- Experience: +20, +5 close-match bonus, or a penalty capped at 10
- Location: +12 substring, +8 remote, +5 same region
- Title: up to 10 for shared role keywords, +5 exact title
- Compensation: up to 3
- Recency: up to 3
"""

from typing import Iterable, List, Optional
from datetime import datetime, timezone

SKILL_EXACT_WEIGHT = 40.0
SKILL_PARTIAL_WEIGHT = 10.0

EXPERIENCE_MET_POINTS = 20.0
EXPERIENCE_CLOSE_BONUS = 5.0
EXPERIENCE_CLOSE_GAP_YEARS = 2
EXPERIENCE_PENALTY_PER_YEAR = 2.0
EXPERIENCE_PENALTY_CAP = 10.0

LOCATION_MATCH_POINTS = 12.0
LOCATION_REMOTE_POINTS = 8.0
LOCATION_REGION_POINTS = 5.0

TITLE_KEYWORDS = ["developer", "engineer", "manager", "analyst", "designer", "scientist", "specialist"]
TITLE_KEYWORD_WEIGHT = 10.0
TITLE_EXACT_BONUS = 5.0

# (average salary must exceed, points), checked in order
SALARY_TIERS = [(100000, 3.0), (75000, 2.0), (50000, 1.0)]

# (posting younger than N days, points), checked in order
RECENCY_TIERS = [(7, 3.0), (30, 1.0)]

SECONDS_PER_DAY = 60 * 60 * 24


def _lowered(values: Optional[Iterable[str]]) -> List[str]:
    return [v.lower() for v in (values or [])]


def skills_score(user_skills: Iterable[str], required_skills: Iterable[str]) -> float:
    """
    Exact matches earn a share of 40 points, substring-only matches a share of 10.

    The partial count is "required skills with any substring overlap" minus
    the exact count, so one required skill overlapping several profile
    skills still counts once.
    """
    user = _lowered(user_skills)
    required = _lowered(required_skills)
    if not user or not required:
        return 0.0

    user_set = set(user)
    exact_matches = sum(1 for skill in required if skill in user_set)
    overlapping = sum(
        1 for skill in required
        if any(u in skill or skill in u for u in user)
    )
    partial_matches = overlapping - exact_matches

    total = len(required)
    return (exact_matches / total) * SKILL_EXACT_WEIGHT + (partial_matches / total) * SKILL_PARTIAL_WEIGHT


def experience_score(user_years: Optional[int], required_years: Optional[int]) -> float:
    user_years = user_years or 0
    required_years = required_years or 0

    if user_years >= required_years:
        score = EXPERIENCE_MET_POINTS
        # Close match, not overqualified
        if abs(user_years - required_years) <= EXPERIENCE_CLOSE_GAP_YEARS:
            score += EXPERIENCE_CLOSE_BONUS
        return score

    gap = required_years - user_years
    return -min(gap * EXPERIENCE_PENALTY_PER_YEAR, EXPERIENCE_PENALTY_CAP)


def _region(location: str) -> str:
    parts = location.split(",")
    if len(parts) < 2:
        return ""
    return parts[1].strip()


def location_score(user_location: Optional[str], job_location: Optional[str]) -> float:
    if not user_location or not job_location:
        return 0.0

    user_loc = user_location.lower()
    job_loc = job_location.lower()
    score = 0.0

    if user_loc in job_loc or job_loc in user_loc:
        score += LOCATION_MATCH_POINTS
    if "remote" in job_loc:
        score += LOCATION_REMOTE_POINTS

    user_region = _region(user_loc)
    job_region = _region(job_loc)
    if user_region and job_region and user_region == job_region:
        score += LOCATION_REGION_POINTS

    return score


def title_keywords(title: str) -> List[str]:
    """Vocabulary keywords contained in an already lower-cased title."""
    return [keyword for keyword in TITLE_KEYWORDS if keyword in title]


def title_score(user_title: Optional[str], job_title: Optional[str]) -> float:
    if not user_title or not job_title:
        return 0.0

    user_t = user_title.lower()
    job_t = job_title.lower()

    user_keywords = title_keywords(user_t)
    job_keywords = title_keywords(job_t)
    common = [k for k in user_keywords if k in job_keywords]

    score = 0.0
    if common:
        score += (len(common) / max(len(user_keywords), 1)) * TITLE_KEYWORD_WEIGHT
    if user_t == job_t:
        score += TITLE_EXACT_BONUS
    return score


def compensation_score(salary_min: Optional[int], salary_max: Optional[int]) -> float:
    if not salary_min or not salary_max:
        return 0.0

    avg_salary = (salary_min + salary_max) / 2
    for threshold, points in SALARY_TIERS:
        if avg_salary > threshold:
            return points
    return 0.0


def posting_age_days(created_at: datetime, now: datetime) -> float:
    """Age in fractional days. Naive timestamps are taken as UTC."""
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return (now - created_at).total_seconds() / SECONDS_PER_DAY


def recency_score(created_at: Optional[datetime], now: datetime) -> float:
    if created_at is None:
        return 0.0

    days_old = posting_age_days(created_at, now)
    for max_days, points in RECENCY_TIERS:
        if days_old < max_days:
            return points
    return 0.0
