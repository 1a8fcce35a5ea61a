"""
Unit tests for parameter filtering and account injection.
"""

from contextio.core.params import (
    filter_params,
    with_account,
    merge_fixed_params,
)


class TestFilterParams:
    """Test cases for allow-list filtering."""

    def test_filters_and_canonicalizes(self):
        """Unknown keys are dropped and casing follows the allow-list."""
        result = filter_params(
            {"Since": "0", "limit": "5", "extra": "x"}, ["since", "limit"]
        )
        assert result == {"since": "0", "limit": "5"}

    def test_missing_keys_are_omitted(self):
        assert filter_params({"limit": "5"}, ["since", "limit"]) == {"limit": "5"}

    def test_canonical_casing_from_allow_list(self):
        result = filter_params({"FILEID1": "a", "fileid2": "b"}, ["fileId1", "fileId2"])
        assert result == {"fileId1": "a", "fileId2": "b"}

    def test_first_match_wins(self):
        """Keys differing only by case resolve to the first one given."""
        result = filter_params({"Since": "1", "SINCE": "2", "since": "3"}, ["since"])
        assert result == {"since": "1"}

    def test_empty_and_none_inputs(self):
        assert filter_params(None, ["since"]) == {}
        assert filter_params({}, ["since"]) == {}
        assert filter_params({"since": "0"}, []) == {}

    def test_output_order_follows_allow_list(self):
        result = filter_params({"limit": "5", "since": "0"}, ["since", "limit"])
        assert list(result) == ["since", "limit"]

    def test_idempotent(self):
        allowed = ["email", "to", "from", "cc", "bcc", "limit"]
        given = {"EMAIL": "a@b.c", "From": "x@y.z", "subject": "hi"}
        once = filter_params(given, allowed)
        assert filter_params(once, allowed) == once

    def test_does_not_mutate_input(self):
        given = {"Since": "0", "extra": "x"}
        filter_params(given, ["since"])
        assert given == {"Since": "0", "extra": "x"}


class TestWithAccount:
    """Test cases for account injection."""

    def test_adds_account(self):
        result = with_account({"since": "0"}, "me@example.com")
        assert result == {"since": "0", "account": "me@example.com"}

    def test_empty_account_is_ignored(self):
        assert with_account({"since": "0"}, "") == {"since": "0"}
        assert with_account({"since": "0"}, None) == {"since": "0"}

    def test_returns_copy(self):
        params = {"since": "0"}
        with_account(params, "me@example.com")
        assert params == {"since": "0"}


class TestMergeFixedParams:
    def test_fixed_values_override(self):
        result = merge_fixed_params({"generate": "0", "fileId1": "a"}, {"generate": "1"})
        assert result == {"generate": "1", "fileId1": "a"}

