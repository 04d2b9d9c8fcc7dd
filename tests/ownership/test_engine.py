"""Tests for owner resolution."""

from codeown.config import config_from_mapping
from codeown.formatters.codeowners_formatter import with_marker
from codeown.history.identity import IdentityResolver
from codeown.history.models import FileTally
from codeown.ownership.engine import OwnerResolver


def make_tally(filepath, identities, **counts):
    """Tally with counts in first-seen order: make_tally(p, ids, alice=3)."""
    tally = FileTally(filepath)
    for user, count in counts.items():
        email = f"{user}@example.com"
        tally.counts[email] = count
        identities.resolve(email)
    return tally


def resolver_for(min_commits=1, **raw):
    identities = IdentityResolver()
    return OwnerResolver(config_from_mapping(raw), identities, min_commits), identities


class TestHistoryOwners:
    def test_ranked_by_commit_count(self):
        resolver, ids = resolver_for()
        entry = resolver.resolve_file("a.py", make_tally("a.py", ids, bob=2, alice=5, carol=1))
        assert entry.owners == ["alice", "bob", "carol"]
        assert entry.commits == 8

    def test_ties_keep_first_seen_order(self):
        resolver, ids = resolver_for()
        entry = resolver.resolve_file("a.py", make_tally("a.py", ids, bob=2, alice=2))
        assert entry.owners == ["bob", "alice"]

    def test_capped_at_max_owners(self):
        resolver, ids = resolver_for(maxOwners=2, minOwners=2)
        entry = resolver.resolve_file("a.py", make_tally("a.py", ids, alice=10, bob=3, carol=1))
        assert entry.owners == ["alice", "bob"]

    def test_min_commits_filters_contributors(self):
        resolver, ids = resolver_for(min_commits=2)
        entry = resolver.resolve_file("a.py", make_tally("a.py", ids, alice=3, bob=1))
        assert entry.owners == ["alice"]

    def test_nobody_above_min_commits_skips_file(self):
        resolver, ids = resolver_for(min_commits=5, projectOwners=["lead"], minOwners=2)
        assert resolver.resolve_file("a.py", make_tally("a.py", ids, alice=1)) is None

    def test_emails_sharing_a_username_appear_once(self):
        resolver, ids = resolver_for()
        tally = FileTally("a.py", {"alice@example.com": 5, "alice@corp.io": 3, "bob@example.com": 1})
        for email in tally.counts:
            ids.resolve(email)
        entry = resolver.resolve_file("a.py", tally)
        assert entry.owners == ["alice", "bob"]

    def test_shared_username_takes_one_slot(self):
        resolver, ids = resolver_for(maxOwners=2, minOwners=2)
        tally = FileTally("a.py", {"alice@x.com": 5, "alice@y.com": 4, "bob@x.com": 3})
        for email in tally.counts:
            ids.resolve(email)
        entry = resolver.resolve_file("a.py", tally)
        assert entry.owners == ["alice", "bob"]

    def test_shared_username_pools_commits(self):
        resolver, ids = resolver_for(min_commits=3)
        tally = FileTally("a.py", {"bob@x.com": 3, "alice@x.com": 2, "alice@y.com": 2})
        for email in tally.counts:
            ids.resolve(email)
        entry = resolver.resolve_file("a.py", tally)
        assert entry.owners == ["alice", "bob"]


class TestMembership:
    def test_non_members_dropped(self):
        resolver, ids = resolver_for(members=["bob"])
        entry = resolver.resolve_file("a.py", make_tally("a.py", ids, alice=9, bob=1))
        assert entry.owners == ["bob"]

    def test_member_by_email(self):
        resolver, ids = resolver_for(members=["alice@example.com"])
        entry = resolver.resolve_file("a.py", make_tally("a.py", ids, alice=1, bob=9))
        assert entry.owners == ["alice"]

    def test_no_members_left_skips_file(self):
        resolver, ids = resolver_for(members=["zed"], projectOwners=["lead"])
        assert resolver.resolve_file("a.py", make_tally("a.py", ids, alice=3)) is None


class TestSupplementation:
    def test_project_owners_fill_short_list(self):
        resolver, ids = resolver_for(minOwners=2, projectOwners=["lead"])
        entry = resolver.resolve_file("a.py", make_tally("a.py", ids, alice=4))
        assert entry.owners == ["alice", "lead"]

    def test_default_owners_before_project_owners(self):
        resolver, ids = resolver_for(
            minOwners=3,
            defaultOwners={"src/**": ["dave"]},
            projectOwners=["lead", "boss"],
        )
        entry = resolver.resolve_file("src/a.py", make_tally("src/a.py", ids, alice=4))
        assert entry.owners == ["alice", "dave", "lead"]

    def test_most_specific_default_rule_used(self):
        resolver, ids = resolver_for(
            minOwners=2,
            defaultOwners={"src/**": ["dave"], "src/api/*.py": ["erin"]},
        )
        entry = resolver.resolve_file("src/api/v1.py", make_tally("src/api/v1.py", ids, alice=4))
        assert entry.owners == ["alice", "erin"]

    def test_existing_owner_not_added_twice(self):
        resolver, ids = resolver_for(minOwners=3, projectOwners=["alice", "lead"])
        entry = resolver.resolve_file("a.py", make_tally("a.py", ids, alice=4))
        assert entry.owners == ["alice", "lead"]

    def test_marked_owner_matches_history_username(self):
        resolver, ids = resolver_for(minOwners=2, projectOwners=["@lead"])
        entry = resolver.resolve_file("a.py", make_tally("a.py", ids, lead=3))
        rendered = [with_marker(owner) for owner in entry.owners]
        assert rendered == ["@lead"]

    def test_marked_default_and_project_owner_added_once(self):
        resolver, ids = resolver_for(
            minOwners=3,
            defaultOwners={"*.py": ["dave"]},
            projectOwners=["@dave", "lead"],
        )
        entry = resolver.resolve_file("a.py", make_tally("a.py", ids, alice=1))
        assert entry.owners == ["alice", "dave", "lead"]

    def test_list_at_min_owners_untouched(self):
        resolver, ids = resolver_for(minOwners=1, projectOwners=["lead"])
        entry = resolver.resolve_file("a.py", make_tally("a.py", ids, alice=4))
        assert entry.owners == ["alice"]


class TestOverrides:
    def test_override_wins_over_history(self):
        resolver, ids = resolver_for(overrides={"src/**": ["@platform"]})
        entry = resolver.resolve_file("src/a.py", make_tally("src/a.py", ids, alice=10))
        assert entry.owners == ["@platform"]
        assert entry.commits is None

    def test_override_ignores_membership_and_caps(self):
        resolver, ids = resolver_for(
            members=["alice"],
            maxOwners=1,
            overrides={"*.md": ["x", "y", "z"]},
        )
        entry = resolver.resolve_file("README.md", make_tally("README.md", ids, bob=1))
        assert entry.owners == ["x", "y", "z"]

    def test_most_specific_override(self):
        resolver, ids = resolver_for(
            overrides={"src/**": ["@team"], "src/api/main.py": ["@api"]}
        )
        tally = make_tally("src/api/main.py", ids, alice=1)
        assert resolver.resolve_file("src/api/main.py", tally).owners == ["@api"]


class TestResolveAll:
    def test_sorted_by_path(self):
        resolver, ids = resolver_for()
        stats = {
            "src/b.py": make_tally("src/b.py", ids, alice=1),
            "README.md": make_tally("README.md", ids, bob=1),
            "src/a.py": make_tally("src/a.py", ids, carol=1),
        }
        entries = resolver.resolve_all(stats, list(stats))
        assert [e.filepath for e in entries] == ["README.md", "src/a.py", "src/b.py"]

    def test_unanalyzed_files_get_override_entries(self):
        resolver, ids = resolver_for(overrides={"docs/**": ["@writers"]})
        stats = {"src/a.py": make_tally("src/a.py", ids, alice=1)}
        entries = resolver.resolve_all(stats, ["src/a.py", "docs/guide.md", "misc/notes.txt"])
        assert [(e.filepath, e.owners) for e in entries] == [
            ("docs/guide.md", ["@writers"]),
            ("src/a.py", ["alice"]),
        ]

    def test_unanalyzed_files_ignored_without_overrides(self):
        resolver, ids = resolver_for(projectOwners=["lead"])
        entries = resolver.resolve_all({}, ["docs/guide.md"])
        assert entries == []

    def test_skipped_files_omitted(self):
        resolver, ids = resolver_for(members=["alice"])
        stats = {
            "a.py": make_tally("a.py", ids, alice=1),
            "b.py": make_tally("b.py", ids, bob=1),
        }
        assert [e.filepath for e in resolver.resolve_all(stats)] == ["a.py"]
