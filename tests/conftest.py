"""Shared test fixtures for codeown tests."""

import pytest

from codeown.history.models import CommitRecord, ProjectInfo
from codeown.session import CancellationToken


class FakeHistorySource:
    """In-memory stand-in for GitClient.

    ``histories`` maps a path to a list of emails, newest commit first.
    Every ``file_history`` call is recorded in ``queried``.
    """

    def __init__(self, histories=None, tracked=None, fail_on=()):
        self.histories = histories or {}
        self.tracked = list(tracked) if tracked is not None else list(self.histories)
        self.fail_on = set(fail_on)
        self.queried = []
        self.on_query = None

    def list_tracked_files(self):
        return list(self.tracked)

    def file_history(self, filepath, since):
        self.queried.append(filepath)
        if self.on_query is not None:
            self.on_query(filepath)
        if filepath in self.fail_on:
            return []
        return [
            CommitRecord(email=email, name=email.split("@")[0].title())
            for email in self.histories.get(filepath, [])
        ]

    def project_info(self):
        return ProjectInfo(name="demo", branch="main")


def make_emails(**counts):
    """Build a newest-first email list: make_emails(alice=2, bob=1)."""
    emails = []
    for user, count in counts.items():
        emails.extend([f"{user}@example.com"] * count)
    return emails


@pytest.fixture
def fake_source():
    return FakeHistorySource


@pytest.fixture
def emails():
    return make_emails


@pytest.fixture
def token():
    return CancellationToken()
