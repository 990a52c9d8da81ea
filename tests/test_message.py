"""
Unit tests for size notification text.
"""

import pytest
from wsizer.message import format_size_message, ratio_numerator


@pytest.mark.unit
class TestSizeMessage:
    """Test message formatting."""

    def test_nominal_ratio_has_no_suffix(self):
        assert format_size_message(1600, 900) == "1600×900"

    def test_constrained_ratio_gets_suffix(self):
        # 9 * 1600 / 894 = 16.107...
        assert format_size_message(1600, 894) == "1600×894 (16.11:9)"

    def test_other_family_member_gets_suffix(self):
        assert format_size_message(1280, 900) == "1280×900 (12.80:9)"

    def test_reports_logical_pixels(self):
        assert format_size_message(3200, 1800, 2) == "1600×900"

    def test_logical_size_rounds_half_up(self):
        assert format_size_message(2561, 1440, 2).startswith("1281×720")
        assert format_size_message(1281, 721, 2).startswith("641×361")

    def test_logical_size_rounds_below_half_down(self):
        # 1001 / 1.5 = 667.33
        assert format_size_message(1001, 563, 1.5).startswith("667×375")

    def test_ratio_uses_device_pixels(self):
        assert format_size_message(2560, 1800, 2) == "1280×900 (12.80:9)"

    def test_within_tolerance_has_no_suffix(self):
        # 9 * 1921 / 1080 = 16.0083
        assert format_size_message(1921, 1080) == "1921×1080"

    def test_ratio_numerator(self):
        assert ratio_numerator(1920, 1080) == pytest.approx(16.0)
        assert ratio_numerator(1440, 900) == pytest.approx(14.4)
