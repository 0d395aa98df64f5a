#!/usr/bin/env python3
"""
Test suite for MatchScorer ranking and result policy.
"""

import unittest
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

from core.config_loader import ScorerConfig
from core.scorer import MatchScorer, CandidateProfile, Posting, FixedJitter, RandomJitter
from core.scorer.service import round_half_up

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def make_posting(**overrides) -> Posting:
    values = dict(
        created_at=NOW - timedelta(days=60),
        skills_required=[],
        location="",
        title="",
        experience_required=0,
        salary_min=None,
        salary_max=None,
    )
    values.update(overrides)
    return Posting(**values)


def make_scorer(jitter: float = 0.0, **config) -> MatchScorer:
    return MatchScorer(
        config=ScorerConfig(**config),
        jitter=FixedJitter(jitter),
        clock=lambda: NOW
    )


class TestMatchScorer(unittest.TestCase):
    """Test MatchScorer scoring and ranking."""

    def setUp(self):
        self.profile = CandidateProfile(
            skills=["python", "sql"],
            location="Seattle, WA",
            title="Data Analyst",
            experience_years=3
        )
        self.scorer = make_scorer()

    def test_well_matched_posting_breakdown(self):
        posting = make_posting(
            skills_required=["python", "sql"],
            experience_required=2,
            location="Seattle, WA",
            title="Data Analyst",
            salary_min=90000,
            salary_max=110000,
            created_at=NOW - timedelta(days=3)
        )

        results = self.scorer.score(self.profile, [posting])

        self.assertEqual(len(results), 1)
        scored = results[0]
        self.assertEqual(scored.score, 102)
        self.assertIs(scored.posting, posting)
        self.assertEqual(scored.components, {
            'skills': 40.0,
            'experience': 25.0,
            'location': 17.0,
            'title': 15.0,
            'compensation': 2.0,
            'recency': 3.0,
            'jitter': 0.0,
        })

    def test_empty_candidates_skip_jitter(self):
        jitter = MagicMock(return_value=0.0)
        scorer = MatchScorer(jitter=jitter, clock=lambda: NOW)

        self.assertEqual(scorer.score(self.profile, []), [])
        jitter.assert_not_called()

    def test_score_at_floor_is_excluded(self):
        profile = CandidateProfile(location="Denver", experience_years=0)
        # location +12, experience gap of 1 year -2
        posting = make_posting(location="Denver", experience_required=1)

        self.assertEqual(make_scorer().score(profile, [posting]), [])

    def test_half_point_rounds_up_past_floor(self):
        profile = CandidateProfile(location="Denver", experience_years=0)
        posting = make_posting(location="Denver", experience_required=1)

        # jitter 0.25 * 2 = 0.5 -> raw 10.5 -> 11
        results = make_scorer(jitter=0.25).score(profile, [posting])

        self.assertEqual(len(results), 1)
        self.assertEqual(results[0].raw_score, 10.5)
        self.assertEqual(results[0].score, 11)

    def test_results_are_capped(self):
        postings = [make_posting(title=f"Role {i}") for i in range(15)]

        results = self.scorer.score(self.profile, postings)

        self.assertEqual(len(results), 10)

    def test_results_sorted_descending(self):
        low = make_posting()
        high = make_posting(skills_required=["python"])
        mid = make_posting(location="Seattle, WA")

        results = self.scorer.score(self.profile, [low, high, mid])

        self.assertEqual([r.posting for r in results], [high, mid, low])
        scores = [r.score for r in results]
        self.assertEqual(scores, sorted(scores, reverse=True))

    def test_ties_keep_input_order(self):
        postings = [make_posting(title=f"Role {i}") for i in range(5)]

        results = self.scorer.score(self.profile, postings)

        self.assertEqual(len({r.score for r in results}), 1)
        self.assertEqual([r.posting for r in results], postings)

    def test_adding_exact_skill_never_lowers_score(self):
        one = make_posting(skills_required=["python", "go"])
        two = make_posting(skills_required=["python", "go", "sql"])

        score_one = self.scorer.score_posting(self.profile, one, NOW).score
        score_two = self.scorer.score_posting(self.profile, two, NOW).score

        self.assertGreater(score_two, score_one)

    def test_inputs_are_not_mutated(self):
        postings = [make_posting(title="b"), make_posting(skills_required=["python"])]
        snapshot = list(postings)

        self.scorer.score(self.profile, postings)

        self.assertEqual(postings, snapshot)
        self.assertEqual(self.profile.skills, ["python", "sql"])

    def test_clock_read_once_per_call(self):
        clock = MagicMock(return_value=NOW)
        scorer = MatchScorer(jitter=FixedJitter(), clock=clock)

        scorer.score(self.profile, [make_posting(), make_posting(), make_posting()])

        clock.assert_called_once()

    def test_oversized_candidate_set_is_truncated(self):
        postings = [make_posting(title=str(i)) for i in range(5)]
        scorer = make_scorer(max_candidates=3)

        with self.assertLogs('core.scorer.service', level='WARNING'):
            results = scorer.score(self.profile, postings)

        self.assertEqual([r.posting for r in results], postings[:3])

    def test_custom_floor_and_top_n(self):
        postings = [make_posting(title=str(i)) for i in range(4)]
        scorer = make_scorer(score_floor=0, top_n=2)

        self.assertEqual(len(scorer.score(self.profile, postings)), 2)


class TestRounding(unittest.TestCase):

    def test_halves_round_toward_positive_infinity(self):
        self.assertEqual(round_half_up(10.5), 11)
        self.assertEqual(round_half_up(11.5), 12)
        self.assertEqual(round_half_up(-2.5), -2)
        self.assertEqual(round_half_up(10.49), 10)


class TestJitterSources(unittest.TestCase):

    def test_random_jitter_is_unit_interval(self):
        jitter = RandomJitter(seed=42)
        for _ in range(100):
            value = jitter()
            self.assertGreaterEqual(value, 0.0)
            self.assertLess(value, 1.0)

    def test_seeded_jitter_is_reproducible(self):
        a = RandomJitter(seed=7)
        b = RandomJitter(seed=7)
        self.assertEqual([a() for _ in range(5)], [b() for _ in range(5)])

    def test_fixed_jitter_rejects_out_of_range(self):
        with self.assertRaises(ValueError):
            FixedJitter(1.0)
        with self.assertRaises(ValueError):
            FixedJitter(-0.1)

    def test_jitter_is_scaled_by_configured_max(self):
        scorer = make_scorer(jitter=0.5, jitter_max=4.0)
        profile = CandidateProfile()

        scored = scorer.score_posting(profile, make_posting(), NOW)

        self.assertEqual(scored.components['jitter'], 2.0)


if __name__ == '__main__':
    unittest.main()
