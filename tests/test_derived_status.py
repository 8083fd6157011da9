#!/usr/bin/env python3
"""Tests for DerivedStatus dataclass."""

import pytest

from wof import DerivedStatus, ExpiryStatus, Severity


class TestDerivedStatus:
    """Tests for DerivedStatus properties."""

    def test_label_and_severity_follow_status(self):
        derived = DerivedStatus(status=ExpiryStatus.EXPIRED, days_remaining=-5)
        assert derived.label == "Expired"
        assert derived.severity == Severity.DESTRUCTIVE
        assert derived.days_remaining == -5

    def test_needs_attention(self):
        assert DerivedStatus(ExpiryStatus.EXPIRED, -1).needs_attention
        assert DerivedStatus(ExpiryStatus.EXPIRING_SOON, 10).needs_attention
        assert not DerivedStatus(ExpiryStatus.ROADWORTHY, 90).needs_attention

    def test_is_immutable(self):
        derived = DerivedStatus(ExpiryStatus.ROADWORTHY, 90)
        with pytest.raises(AttributeError):
            derived.days_remaining = 1

    def test_equality_by_value(self):
        assert DerivedStatus(ExpiryStatus.ROADWORTHY, 90) == DerivedStatus(
            ExpiryStatus.ROADWORTHY, 90
        )
