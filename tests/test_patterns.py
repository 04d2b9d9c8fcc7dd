"""Tests for glob matching and specificity ranking."""

import pytest

from codeown.patterns import (
    best_match,
    has_wildcard,
    matches,
    matches_filter,
    normalize_directory_pattern,
    rank,
    specificity,
)


class TestMatches:
    @pytest.mark.parametrize(
        "path,pattern,expected",
        [
            ("src/app/main.py", "src/**/*.py", True),
            ("src/main.py", "src/**/*.py", True),
            ("lib/main.py", "src/**/*.py", False),
            ("src/app/main.py", "src/*.py", False),
            ("src/main.py", "src/*.py", True),
            ("README.md", "*.md", True),
            ("docs/guide.md", "*.md", False),
            ("a/b/test_x.py", "**/test_*.py", True),
            ("test_x.py", "**/test_*.py", True),
            ("anything/at/all", "**", True),
            ("file1.txt", "file?.txt", True),
            ("file12.txt", "file?.txt", False),
            ("b.txt", "[!a]*", True),
            ("a.txt", "[!a]*", False),
        ],
    )
    def test_glob_semantics(self, path, pattern, expected):
        assert matches(path, pattern) is expected

    def test_literal_pattern_matches_exact_path_only(self):
        assert matches("src/secrets.yml", "src/secrets.yml")
        assert not matches("src/secrets.yml.bak", "src/secrets.yml")
        assert not matches("other/src/secrets.yml", "src/secrets.yml")

    def test_regex_metacharacters_are_literal(self):
        assert matches("pkg/a+b.py", "pkg/a+b.py")
        assert matches("pkg/a+b.py", "pkg/*+b.py")
        assert not matches("pkg/aab.py", "pkg/a+b.py")

    @pytest.mark.parametrize(
        "path,pattern",
        [
            (".env", "*"),
            (".env", "?env"),
            (".env", "[.]env"),
            ("docs/.x", "docs/**/*"),
            ("docs/.cache/page.md", "docs/**"),
            (".github/CODEOWNERS", "**/CODEOWNERS"),
        ],
    )
    def test_wildcards_skip_leading_dots(self, path, pattern):
        assert not matches(path, pattern)

    @pytest.mark.parametrize(
        "path,pattern",
        [
            (".env", ".*"),
            (".github/CODEOWNERS", ".github/*"),
            ("src/.github/CODEOWNERS", "**/.github/*"),
            ("docs/a.b.md", "docs/*"),
            ("pkg/x.py", "pkg/?.py"),
        ],
    )
    def test_explicit_dots_still_match(self, path, pattern):
        assert matches(path, pattern)

    def test_directory_filter_skips_hidden_entries(self):
        assert matches_filter("docs/guide.md", "docs/")
        assert not matches_filter("docs/.draft.md", "docs/")


class TestDirectoryNormalization:
    def test_trailing_slash_expands(self):
        assert normalize_directory_pattern("docs/") == "docs/**/*"

    def test_bare_directory_expands(self):
        assert normalize_directory_pattern("docs") == "docs/**/*"

    def test_wildcard_unchanged(self):
        assert normalize_directory_pattern("*.log") == "*.log"

    def test_filter_matches_directory_contents(self):
        assert matches_filter("docs/a/b.md", "docs")
        assert matches_filter("docs/x.md", "docs/")
        assert not matches_filter("docsite/x.md", "docs")

    def test_filter_still_matches_literal_file(self):
        assert matches_filter("Makefile", "Makefile")


class TestSpecificity:
    def test_scores(self):
        assert specificity("src/secrets.yml") == 1020
        assert specificity("src/*.yml") == 15
        assert specificity("**/*.yml") == -45
        assert specificity("*") == 5

    def test_question_mark_counts_as_wildcard(self):
        assert has_wildcard("file?.txt")
        assert specificity("file?.txt") < 1000

    def test_rank_orders_most_specific_first(self):
        ranked = rank(["**/*.yml", "src/*.yml", "src/secrets.yml"])
        assert ranked == ["src/secrets.yml", "src/*.yml", "**/*.yml"]

    def test_rank_is_stable_on_ties(self):
        assert rank(["b/*", "a/*"]) == ["b/*", "a/*"]
        assert rank(["a/*", "b/*"]) == ["a/*", "b/*"]

    def test_rank_is_idempotent(self):
        patterns = ["*", "src/**", "docs/", "src/app/*.py", "a/*", "b/*", "README.md"]
        once = rank(patterns)
        assert rank(once) == once

    def test_literal_outranks_any_wildcard(self):
        literal = "a/b/c/d/e/f.py"
        for wildcard in ["**", "a/*/c/d/e/f.py", "a/b/c/d/e/*.py", "**/f.py"]:
            assert matches(literal, wildcard)
            assert rank([wildcard, literal])[0] == literal


class TestBestMatch:
    def test_picks_most_specific(self):
        patterns = ["*", "src/*", "src/secrets.yml"]
        assert best_match("src/secrets.yml", patterns) == "src/secrets.yml"
        assert best_match("src/other.yml", patterns) == "src/*"

    def test_none_when_nothing_matches(self):
        assert best_match("lib/x.py", ["src/*"]) is None
