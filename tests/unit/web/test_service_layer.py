#!/usr/bin/env python3
"""
Unit tests for web services with mocked repositories and stores.
"""

import unittest
from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

from core.config_loader import RecommendationConfig, UploadConfig
from core.scorer import MatchScorer, FixedJitter
from core.storage import BlobStoreError
from web.backend.exceptions import ServiceException, ValidationException
from web.backend.services.recommendation_service import RecommendationService
from web.backend.services.upload_service import UploadService, safe_filename


def make_job(job_id, **overrides):
    job = MagicMock()
    job.id = job_id
    job.recruiter_id = 1
    job.recruiter.company_name = "Acme"
    job.title = "Data Analyst"
    job.description = "d"
    job.requirements = "r"
    job.location = "Seattle, WA"
    job.job_type = "full-time"
    job.salary_min = 90000
    job.salary_max = 110000
    job.experience_required = 2
    job.skills_required = ["python", "sql"]
    job.status = "active"
    job.applications_count = 0
    job.created_at = datetime.now(timezone.utc)
    for key, value in overrides.items():
        setattr(job, key, value)
    return job


class TestRecommendationService(unittest.TestCase):

    def setUp(self):
        self.db = MagicMock()
        self.scorer = MatchScorer(jitter=FixedJitter())
        self.service = RecommendationService(self.db, self.scorer, RecommendationConfig(candidate_limit=25))
        self.service.jobs = MagicMock()
        self.service.job_seekers = MagicMock()

        seeker = MagicMock()
        seeker.skills = ["python", "sql"]
        seeker.location = "Seattle, WA"
        seeker.title = "Data Analyst"
        seeker.experience_years = 3
        self.seeker = seeker

    def test_missing_profile_skips_scoring(self):
        self.service.job_seekers.get_by_user_id.return_value = None
        self.service.scorer = MagicMock()

        self.assertEqual(self.service.get_recommendations(5), [])
        self.service.scorer.score.assert_not_called()
        self.service.jobs.get_recent_active.assert_not_called()

    def test_uses_configured_candidate_limit(self):
        self.service.job_seekers.get_by_user_id.return_value = self.seeker
        self.service.jobs.get_recent_active.return_value = []

        self.assertEqual(self.service.get_recommendations(5), [])
        self.service.jobs.get_recent_active.assert_called_once_with(limit=25)

    def test_maps_scored_postings(self):
        self.service.job_seekers.get_by_user_id.return_value = self.seeker
        self.service.jobs.get_recent_active.return_value = [make_job(7)]

        recommendations = self.service.get_recommendations(5)

        self.assertEqual(len(recommendations), 1)
        rec = recommendations[0]
        self.assertEqual(rec.id, 7)
        self.assertEqual(rec.company_name, "Acme")
        self.assertEqual(rec.score, 102)
        self.assertEqual(rec.score_components['skills'], 40.0)


class TestUploadService(unittest.TestCase):

    def setUp(self):
        self.blob_store = MagicMock()
        self.blob_store.put.return_value = "http://files/resumes/x.pdf"
        self.config = UploadConfig(max_size_bytes=10)

    def test_key_layout(self):
        service = UploadService(self.blob_store, self.config)

        with patch("web.backend.services.upload_service.time.time", return_value=1700000000.5):
            url = service.upload_resume(3, "my cv.pdf", "application/pdf", b"%PDF")

        self.assertEqual(url, "http://files/resumes/x.pdf")
        self.blob_store.put.assert_called_once_with(
            "resumes/3-1700000000500-my_cv.pdf", b"%PDF", "application/pdf"
        )

    def test_rejects_wrong_type_before_storing(self):
        service = UploadService(self.blob_store, self.config)

        with self.assertRaises(ValidationException):
            service.upload_resume(3, "cv.docx", "application/msword", b"data")
        self.blob_store.put.assert_not_called()

    def test_rejects_oversized(self):
        service = UploadService(self.blob_store, self.config)

        with self.assertRaises(ValidationException):
            service.upload_resume(3, "cv.pdf", "application/pdf", b"x" * 11)

    def test_store_failure_becomes_service_error(self):
        self.blob_store.put.side_effect = BlobStoreError("disk full")
        service = UploadService(self.blob_store, self.config)

        with self.assertRaises(ServiceException) as ctx:
            service.upload_resume(3, "cv.pdf", "application/pdf", b"%PDF")
        self.assertNotIsInstance(ctx.exception, ValidationException)

    def test_without_session_profile_is_untouched(self):
        service = UploadService(self.blob_store, self.config, db=None)
        self.assertEqual(
            service.upload_resume(3, "cv.pdf", "application/pdf", b"%PDF"),
            "http://files/resumes/x.pdf"
        )

    def test_safe_filename_strips_directories(self):
        self.assertEqual(safe_filename("../../etc/passwd.pdf"), "etc_passwd.pdf")
        self.assertNotIn("/", safe_filename("/tmp/cv.pdf"))
        self.assertEqual(safe_filename(""), "resume.pdf")
        self.assertEqual(safe_filename("../"), "resume.pdf")

    def test_safe_filename_drops_url_unsafe_characters(self):
        self.assertEqual(safe_filename("cv#final?.pdf"), "cvfinal.pdf")
        self.assertEqual(safe_filename("my cv.pdf"), "my_cv.pdf")


if __name__ == '__main__':
    unittest.main()
