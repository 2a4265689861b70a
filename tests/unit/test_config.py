"""Unit tests for configuration settings."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from perf_meter.shared.config import MeasurementConfig, Settings
from ..test_const import TEST_BASE, TEST_PAGES


class TestSettings:
    """Test Settings configuration class."""

    def test_default_settings(self):
        """Test default configuration values."""
        settings = Settings()
        assert settings.request_timeout == 30.0
        assert settings.output_dir == Path("reports")
        assert settings.use_color is True
        assert settings.log_level == "INFO"

    @patch.dict(os.environ, {"PERF_METER_REQUEST_TIMEOUT": "5"})
    def test_env_override_timeout(self):
        """Test overriding request_timeout via environment variable."""
        settings = Settings()
        assert settings.request_timeout == 5.0

    @patch.dict(os.environ, {"PERF_METER_OUTPUT_DIR": "/tmp/perf"})
    def test_env_override_output_dir(self):
        """Test overriding output_dir via environment variable."""
        settings = Settings()
        assert settings.output_dir == Path("/tmp/perf")

    @patch.dict(os.environ, {"PERF_METER_USE_COLOR": "false"})
    def test_env_override_color(self):
        """Test disabling colors via environment variable."""
        assert Settings().use_color is False

    @patch.dict(os.environ, {"PERF_METER_REQUEST_TIMEOUT": "5"})
    def test_init_beats_env(self):
        """Test command line values win over the environment."""
        settings = Settings(request_timeout=2.5)
        assert settings.request_timeout == 2.5

    def test_rejects_non_positive_timeout(self):
        """Test the timeout must be positive."""
        with pytest.raises(ValidationError):
            Settings(request_timeout=0)


class TestMeasurementConfig:
    """Test MeasurementConfig validation."""

    def test_valid(self):
        """Test a complete configuration."""
        config = MeasurementConfig(base=TEST_BASE, pages=TEST_PAGES, requests=3)
        assert config.pages == TEST_PAGES
        assert config.requests == 3
        assert config.ttfb is False

    def test_ttfb_flag(self):
        """Test the optional ttfb flag."""
        assert MeasurementConfig(base=TEST_BASE, pages=["/"], requests=1, ttfb=True).ttfb is True

    @pytest.mark.parametrize("requests", [0, -2])
    def test_requests_must_be_positive(self, requests):
        """Test non-positive request counts are rejected."""
        with pytest.raises(ValidationError):
            MeasurementConfig(base=TEST_BASE, pages=TEST_PAGES, requests=requests)

    @pytest.mark.parametrize("base", ["example.com", "ftp://example.com", "http://", ""])
    def test_base_must_be_http_url(self, base):
        """Test the base must be an absolute http(s) URL."""
        with pytest.raises(ValidationError):
            MeasurementConfig(base=base, pages=TEST_PAGES, requests=1)

    def test_pages_required(self):
        """Test at least one page is required."""
        with pytest.raises(ValidationError):
            MeasurementConfig(base=TEST_BASE, pages=[], requests=1)

    def test_blank_page_rejected(self):
        """Test blank page entries are rejected."""
        with pytest.raises(ValidationError):
            MeasurementConfig(base=TEST_BASE, pages=["/a", "  "], requests=1)

    def test_missing_keys(self):
        """Test required keys."""
        with pytest.raises(ValidationError):
            MeasurementConfig(base=TEST_BASE)
