"""
Integration tests for the client, endpoints and services working together.
HTTP is mocked at the requests.Session boundary.
"""

import json
import unittest
from datetime import datetime, timedelta, timezone
from unittest.mock import Mock

from requests.structures import CaseInsensitiveDict

from wanikani_api.client import WKClient
from wanikani_api.filters import SubjectFilter
from wanikani_api.models import Kanji, Radical, ResourceType, SubjectType
from wanikani_api.rate_limit import RateLimiter
from wanikani_api.services import fetch_all

API = "https://api.wanikani.com/v2"
START = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class FakeClock:
    """Clock whose time only moves when sleep is called."""

    def __init__(self, now=START):
        self.now = now
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += timedelta(seconds=seconds)


def make_response(payload, remaining, reset=START + timedelta(seconds=60), status_code=200):
    response = Mock()
    response.status_code = status_code
    response.url = API
    response.content = json.dumps(payload).encode("utf-8")
    response.headers = CaseInsensitiveDict({
        "RateLimit-Limit": "60",
        "RateLimit-Remaining": str(remaining),
        "RateLimit-Reset": str(int(reset.timestamp())),
    })
    return response


def subject_common(id, level):
    return {
        "auxiliary_meanings": [],
        "created_at": "2012-02-27T18:08:16.000000Z",
        "document_url": f"https://www.wanikani.com/subjects/{id}",
        "hidden_at": None,
        "lesson_position": id,
        "level": level,
        "meaning_mnemonic": "mnemonic",
        "meanings": [{"meaning": f"Subject {id}", "primary": True, "accepted_answer": True}],
        "slug": f"s{id}",
        "spaced_repetition_system_id": 1,
    }


def radical(id, level=1):
    return {
        "id": id,
        "object": "radical",
        "url": f"{API}/subjects/{id}",
        "data_updated_at": "2018-03-29T23:13:14.064836Z",
        "data": {
            **subject_common(id, level),
            "amalgamation_subject_ids": [],
            "characters": "一",
            "character_images": [],
        },
    }


def kanji(id, level=1):
    return {
        "id": id,
        "object": "kanji",
        "url": f"{API}/subjects/{id}",
        "data_updated_at": "2018-03-29T23:13:14.064836Z",
        "data": {
            **subject_common(id, level),
            "amalgamation_subject_ids": [],
            "characters": "二",
            "component_subject_ids": [1],
            "meaning_hint": None,
            "reading_hint": None,
            "reading_mnemonic": "mnemonic",
            "readings": [{"type": "onyomi", "primary": True, "accepted_answer": True, "reading": "に"}],
            "visually_similar_subject_ids": [],
        },
    }


def subject_page(items, next_url, total_count):
    return {
        "object": "collection",
        "url": f"{API}/subjects?types=radical,kanji",
        "data_updated_at": "2018-04-11T21:08:22.997006Z",
        "pages": {"per_page": 2, "next_url": next_url, "previous_url": None},
        "total_count": total_count,
        "data": items,
    }


class TestPaginationIntegration(unittest.TestCase):
    """Integration tests for walking paginated collections."""

    def setUp(self):
        self.session = Mock()
        self.clock = FakeClock()
        self.limiter = RateLimiter(sleep=self.clock.sleep, clock=self.clock)
        self.client = WKClient(
            token="test_token",
            base_url=API,
            session=self.session,
            rate_limiter=self.limiter,
        )

    def test_fetch_all_subject_pages(self):
        """Test that every page of a filtered subject query is fetched and decoded."""
        self.session.request.side_effect = [
            make_response(subject_page([radical(1), radical(2)], f"{API}/subjects?page_after_id=2", 5), 59),
            make_response(subject_page([kanji(3), kanji(4)], f"{API}/subjects?page_after_id=4", 5), 58),
            make_response(subject_page([kanji(5, level=2)], None, 5), 57),
        ]

        first = self.client.get_subjects(
            SubjectFilter(types=[SubjectType.RADICAL, SubjectType.KANJI])
        )
        subjects = fetch_all(self.client, first)

        self.assertEqual(len(subjects), first.total_count)
        self.assertEqual([s.id for s in subjects], [1, 2, 3, 4, 5])
        self.assertEqual(
            [type(s.data) for s in subjects], [Radical, Radical, Kanji, Kanji, Kanji]
        )
        urls = [call.args[1] for call in self.session.request.call_args_list]
        self.assertEqual(urls, [
            f"{API}/subjects?types=radical,kanji",
            f"{API}/subjects?page_after_id=2",
            f"{API}/subjects?page_after_id=4",
        ])
        self.assertEqual(self.limiter.state.remaining, 57)

    def test_walk_waits_when_quota_runs_out(self):
        """Test that a page walk sleeps until the reset once nothing remains."""
        reset = START + timedelta(seconds=20)
        self.session.request.side_effect = [
            make_response(subject_page([radical(1)], f"{API}/subjects?page_after_id=1", 2), 0, reset),
            make_response(subject_page([radical(2)], None, 2), 59),
        ]

        with self.assertLogs("wanikani_api.rate_limit", level="WARNING"):
            subjects = fetch_all(self.client, self.client.get_subjects())

        self.assertEqual([s.id for s in subjects], [1, 2])
        self.assertEqual(self.clock.sleeps, [21.0])

    def test_refresh_resource_by_its_url(self):
        """Test that a resource can be re-fetched through its canonical url."""
        self.session.request.side_effect = [
            make_response(radical(1), 59),
            make_response(radical(1), 58),
        ]
        subject = self.client.get_specific_subject(1)

        refreshed = self.client.get_resource_by_url(subject.url, type(subject))

        self.assertEqual(refreshed, subject)
        self.assertEqual(refreshed.object, ResourceType.RADICAL)
        self.assertEqual(self.session.request.call_args.args[1], f"{API}/subjects/1")


if __name__ == "__main__":
    unittest.main()
