"""Tests for screenshots.classifier module"""
import pytest
from screenshots.classifier import channel_name, is_screenshot


class TestIsScreenshot:
    """Test suite for is_screenshot function"""

    @pytest.mark.parametrize("filename", [
        "channel_Sat-Jan-18-2025_1_06_05-PM.png",
        "channel_Sat-Jan-18-2025_12_06_05-AM.png",
        "my_channel_name_Sat-Jan-18-2025_1_06_05-PM.png",
        "channel_Sat-Jan-18-2025_1_06_05-PM(1).png",
        "channel_Sat-Jan-18-2025_1_06_05-PM(12).png",
    ])
    def test_accepts_screenshot_names(self, filename):
        """Test that names in the capture format are accepted"""
        assert is_screenshot(filename)

    def test_accepts_full_path(self):
        """Test that only the final path component is inspected"""
        assert is_screenshot("/home/user/Pictures_2025/channel_Sat-Jan-18-2025_1_06_05-PM.png")

    @pytest.mark.parametrize("filename", [
        "channel_Sat-Jan-18-2025_1_06_05-PM",
        "channel_Sat-Jan-18-2025_1_06_05-PM.jpg",
        "channel_Sat-Jan-18-2025_1_06_05-PM.PNG",
        "channel_Sat-Jan-18-2025_1_06_05-PM.png.txt",
    ])
    def test_rejects_other_extensions(self, filename):
        """Test that anything not ending in .png is rejected"""
        assert not is_screenshot(filename)

    def test_rejects_too_few_segments(self):
        """Test that names with fewer than 5 segments are rejected"""
        assert not is_screenshot("Sat-Jan-18-2025_1_06_05-PM.png")
        assert not is_screenshot("screenshot.png")

    @pytest.mark.parametrize("filename", [
        "channel_Sat-Jan-8-2025_1_06_05-PM.png",
        "channel_Saturday-Jan-18-2025_1_06_05-PM.png",
        "channel_Sat-Jan-18x2025_1_06_05-PM.png",
        "channel_Sat-Jan-18-2-025_1_06_05-PM.png",
    ])
    def test_rejects_malformed_date(self, filename):
        """Test that a date token not 15 chars long or not in 4 parts is rejected"""
        assert not is_screenshot(filename)

    def test_rejects_malformed_time(self):
        """Test that a 10 or 11 char time without 3 parts is rejected"""
        # "1234567890(x_a_b" strips down to "1234567890", a single part
        assert not is_screenshot("channel_Sat-Jan-18-2025_1234567890(x_a_b.png")
        assert is_screenshot("channel_Sat-Jan-18-2025_1_06_05-PM.png")

    def test_time_check_skipped_for_other_lengths(self):
        """Test that time tokens of unexpected length bypass the format check"""
        assert is_screenshot("channel_Sat-Jan-18-2025_1_6_5.png")

    def test_never_raises_on_odd_input(self):
        """Test that junk input returns False rather than raising"""
        for name in ["", ".png", "_____.png", "a/b/", "((((.png"]:
            assert is_screenshot(name) is False


class TestChannelName:
    """Test suite for channel_name function"""

    def test_simple_channel(self):
        assert channel_name("channel_Sat-Jan-18-2025_1_06_05-PM.png") == "channel"

    def test_channel_with_underscores(self):
        """Test that a channel containing the delimiter is recovered whole"""
        assert channel_name("my_channel_name_Sat-Jan-18-2025_1_06_05-PM.png") == "my_channel_name"

    def test_duplicate_suffix(self):
        assert channel_name("channel_Sat-Jan-18-2025_1_06_05-PM(1).png") == "channel"

    def test_rejects_short_names(self):
        """Test that names without a channel part raise ValueError"""
        with pytest.raises(ValueError):
            channel_name("Sat-Jan-18-2025_1_06_05-PM.png")
