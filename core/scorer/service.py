#!/usr/bin/env python3
"""
Match Scorer - Rank open postings against a job seeker's profile.

Each posting gets a weighted heuristic score (skills, experience,
location, title, compensation, recency) plus a small diversity jitter.
The ResultPolicy step then drops postings at or below the score floor,
sorts descending (stable, so ties keep input order) and truncates.

The scorer holds no per-call state and never mutates its inputs.
"""

from typing import Callable, List, Optional, Sequence
from datetime import datetime, timezone
import logging
import math

from core.config_loader import ScorerConfig
from core.scorer.models import CandidateProfile, Posting, ScoredPosting
from core.scorer.jitter import JitterSource, RandomJitter
from core.scorer import factors

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going toward +infinity."""
    return int(math.floor(value + 0.5))


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class MatchScorer:
    """Heuristic relevance ranker for job postings."""

    # Reported alongside results so clients can label the ranking method
    ai_powered = True

    def __init__(
        self,
        config: Optional[ScorerConfig] = None,
        jitter: Optional[JitterSource] = None,
        clock: Optional[Callable[[], datetime]] = None
    ):
        self.config = config or ScorerConfig()
        self.jitter = jitter or RandomJitter()
        self.clock = clock or _utc_now

    def score_posting(
        self,
        profile: CandidateProfile,
        posting: Posting,
        now: datetime
    ) -> ScoredPosting:
        """Score a single posting. `now` is shared by every posting in a call."""
        components = {
            'skills': factors.skills_score(profile.skills, posting.skills_required),
            'experience': factors.experience_score(profile.experience_years, posting.experience_required),
            'location': factors.location_score(profile.location, posting.location),
            'title': factors.title_score(profile.title, posting.title),
            'compensation': factors.compensation_score(posting.salary_min, posting.salary_max),
            'recency': factors.recency_score(posting.created_at, now),
            'jitter': self.jitter() * self.config.jitter_max,
        }
        raw_score = sum(components.values())

        return ScoredPosting(
            posting=posting,
            score=round_half_up(raw_score),
            raw_score=raw_score,
            components=components
        )

    def score(
        self,
        profile: CandidateProfile,
        postings: Sequence[Posting]
    ) -> List[ScoredPosting]:
        """
        Score and rank postings for a profile.

        Args:
            profile: The seeker's profile.
            postings: Candidate postings, typically the newest open ones.

        Returns:
            At most `top_n` scored postings whose score exceeds the floor,
            highest first.
        """
        if not postings:
            return []

        candidates = list(postings)
        if len(candidates) > self.config.max_candidates:
            logger.warning(
                f"Candidate set of {len(candidates)} postings exceeds "
                f"{self.config.max_candidates}, truncating"
            )
            candidates = candidates[:self.config.max_candidates]

        now = self.clock()
        scored = [self.score_posting(profile, posting, now) for posting in candidates]
        ranked = self._apply_result_policy(scored)

        logger.debug(f"Scored {len(scored)} postings, {len(ranked)} above floor {self.config.score_floor}")
        return ranked

    def _apply_result_policy(self, scored: List[ScoredPosting]) -> List[ScoredPosting]:
        above_floor = [s for s in scored if s.score > self.config.score_floor]
        # sorted() is stable, equal scores keep input order
        above_floor = sorted(above_floor, key=lambda s: s.score, reverse=True)
        return above_floor[:self.config.top_n]
