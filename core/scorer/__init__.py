#!/usr/bin/env python3
"""
Scoring Module - Heuristic match scoring for job recommendations.

Public API:
- MatchScorer: Scores and ranks postings for a candidate profile
- CandidateProfile, Posting, ScoredPosting: Scorer inputs and outputs
- RandomJitter, FixedJitter: Diversity jitter sources

Modules:
- models.py: Data structures
- factors.py: Per-factor scoring functions and weights
- jitter.py: Injectable jitter sources
- service.py: MatchScorer orchestrator and result policy
"""

from core.scorer.models import CandidateProfile, Posting, ScoredPosting
from core.scorer.jitter import RandomJitter, FixedJitter
from core.scorer.service import MatchScorer

__all__ = [
    'MatchScorer',
    'CandidateProfile',
    'Posting',
    'ScoredPosting',
    'RandomJitter',
    'FixedJitter',
]
