"""Tests for packaged documentation."""

import tempus


def test_docs_loaded():
    assert set(tempus.docs) == {"readme", "api"}
    assert "days_ago" in tempus.docs["readme"]
    assert "OffsetOverflowError" in tempus.docs["api"]
