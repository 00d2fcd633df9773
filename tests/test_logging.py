"""Tests for logging helpers"""
from till.logging import get_logger, sanitize_string_for_logging


def test_get_logger_cached():
    """Test the same logger object is returned per name"""
    assert get_logger("till.test") is get_logger("till.test")


def test_sanitize_escapes_injection():
    """Test newlines in scanned ids cannot forge log lines"""
    assert sanitize_string_for_logging("apple\nERROR - fake") == "apple\\nERROR - fake"


def test_sanitize_truncates():
    """Test long values are cut"""
    assert sanitize_string_for_logging("x" * 60, max_length=10) == "x" * 10 + "..."


def test_sanitize_empty():
    """Test missing values"""
    assert sanitize_string_for_logging(None) == "N/A"
    assert sanitize_string_for_logging("") == "N/A"
