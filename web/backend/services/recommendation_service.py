#!/usr/bin/env python3
"""
Recommendation service - ranks open postings for a job seeker.

Loads the seeker profile and the newest active postings, hands both to
the MatchScorer and maps the ranked result to response models.
"""

import logging
from typing import List
from sqlalchemy.orm import Session

from core.config_loader import RecommendationConfig
from core.scorer import MatchScorer, CandidateProfile, Posting, ScoredPosting
from database.repositories import JobPostRepository, JobSeekerRepository
from ..models.responses import Recommendation
from .job_service import to_job_summary

logger = logging.getLogger(__name__)


class RecommendationService:
    """Service producing ranked job recommendations."""

    def __init__(
        self,
        db: Session,
        scorer: MatchScorer,
        config: RecommendationConfig = None
    ):
        self.db = db
        self.scorer = scorer
        self.config = config or RecommendationConfig()
        self.jobs = JobPostRepository(db)
        self.job_seekers = JobSeekerRepository(db)

    def get_recommendations(self, user_id: int) -> List[Recommendation]:
        """
        Rank recent active postings for the seeker belonging to user_id.

        A user without a seeker profile gets an empty list and the scorer
        is not called.

        Returns:
            Recommendations, highest score first.
        """
        seeker = self.job_seekers.get_by_user_id(user_id)
        if not seeker:
            logger.info(f"No job seeker profile for user {user_id}, skipping recommendations")
            return []

        jobs = self.jobs.get_recent_active(limit=self.config.candidate_limit)
        if not jobs:
            return []

        profile = CandidateProfile.from_record(seeker)
        postings = [Posting.from_record(job) for job in jobs]
        ranked = self.scorer.score(profile, postings)

        logger.info(
            f"Ranked {len(postings)} postings for user {user_id}, "
            f"returning {len(ranked)} recommendations"
        )
        return [self._to_recommendation(s) for s in ranked]

    def _to_recommendation(self, scored: ScoredPosting) -> Recommendation:
        summary = to_job_summary(scored.posting.source)
        return Recommendation(
            **summary.model_dump(),
            score=scored.score,
            score_components={k: round(v, 2) for k, v in scored.components.items()}
        )
