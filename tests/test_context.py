"""Tests for request context building."""

from dataclasses import FrozenInstanceError
from datetime import datetime

import pytest

from smart_routing.config import RoutingConfig
from smart_routing.context import build_request_context, detect_device


class TestDetectDevice:
    """Test user-agent classification."""

    @pytest.mark.parametrize(
        "ua_key, expected",
        [
            ("iphone_safari", ("mobile", "macOS", "Safari")),
            ("android_chrome", ("mobile", "Android", "Chrome")),
            ("ipad_safari", ("tablet", "macOS", "Safari")),
            ("windows_edge", ("desktop", "Windows", "Edge")),
            ("windows_chrome", ("desktop", "Windows", "Chrome")),
            ("mac_firefox", ("desktop", "macOS", "Firefox")),
            ("mac_safari", ("desktop", "macOS", "Safari")),
            ("linux_opera", ("desktop", "Linux", "Opera")),
        ],
    )
    def test_known_user_agents(self, user_agents, ua_key, expected):
        """Test classification of common browsers."""
        device = detect_device(user_agents[ua_key])

        assert (device.type, device.os, device.browser) == expected

    def test_ios_without_mac_token(self):
        """Test iOS detection when the UA does not say 'Mac OS X'."""
        device = detect_device("SomeApp/1.0 (iPhone; iOS 17.0)")

        assert device.os == "iOS"
        assert device.type == "mobile"

    def test_empty_user_agent(self):
        """Test empty UA falls back to desktop/Other."""
        device = detect_device("")

        assert device.type == "desktop"
        assert device.os == "Other"
        assert device.browser == "Other"

    def test_none_user_agent(self):
        """Test missing UA is treated as empty."""
        assert detect_device(None).type == "desktop"

    def test_opera_mini_is_mobile(self):
        """Test Opera Mini counts as mobile."""
        device = detect_device("Opera/9.80 (J2ME/MIDP; Opera Mini/9.80) Presto/2.5.25")

        assert device.type == "mobile"
        assert device.browser == "Opera"


class TestBuildRequestContext:
    """Test full context construction."""

    def test_geo_headers(self, config, user_agents):
        """Test geo fields come from provider headers, case-insensitively."""
        context = build_request_context(
            user_agents["windows_chrome"],
            headers={
                "X-Vercel-IP-Country": "ES",
                "X-Vercel-IP-Country-Region": "MD",
                "X-Vercel-IP-City": "San%20Sebasti%C3%A1n",
            },
            query={},
            config=config,
        )

        assert context.geo.country == "ES"
        assert context.geo.region == "MD"
        assert context.geo.city == "San Sebastián"

    def test_cloudflare_country_fallback(self, config):
        """Test Cloudflare country header is used when Vercel's is missing."""
        context = build_request_context("", headers={"cf-ipcountry": "US"}, config=config)

        assert context.geo.country == "US"

    def test_missing_geo(self, config):
        """Test geo fields are None without headers."""
        context = build_request_context("", headers={}, config=config)

        assert context.geo.country is None
        assert context.geo.region is None
        assert context.geo.city is None

    def test_language_parsing(self, config):
        """Test first Accept-Language tag, region stripped, lower-cased."""
        context = build_request_context(
            "", headers={"Accept-Language": "ES-es,es;q=0.9,en;q=0.8"}, config=config
        )

        assert context.http.language == "es"

    def test_language_default(self, config):
        """Test language defaults to en."""
        context = build_request_context("", headers={}, config=config)

        assert context.http.language == "en"

    def test_referrer(self, config):
        """Test referrer passthrough."""
        context = build_request_context(
            "", headers={"Referer": "https://news.example.com/post"}, config=config
        )

        assert context.http.referrer == "https://news.example.com/post"

    def test_query_copied(self, config):
        """Test query parameters are carried as strings."""
        context = build_request_context("", headers={}, query={"utm_source": "mail", "n": 3}, config=config)

        assert context.http.query == {"utm_source": "mail", "n": "3"}

    def test_time_fields(self, config):
        """Test hour/day/month from the evaluation instant."""
        # 2024-03-06 is a Wednesday
        context = build_request_context("", now=datetime(2024, 3, 6, 8, 30), config=config)

        assert context.time.hour == 8
        assert context.time.day == 3
        assert context.time.month == 3

    def test_sunday_is_seven(self, config):
        """Test Sunday maps to 7 and Monday to 1."""
        sunday = build_request_context("", now=datetime(2024, 3, 10, 12, 0), config=config)
        monday = build_request_context("", now=datetime(2024, 3, 11, 12, 0), config=config)

        assert sunday.time.day == 7
        assert monday.time.day == 1

    def test_random_percent_range(self, config):
        """Test sampled percent lies in [0, 100)."""
        for _ in range(200):
            percent = build_request_context("", config=config).random.percent
            assert 0 <= percent < 100

    def test_random_percent_injected(self, config):
        """Test a fixed sample is used as-is."""
        context = build_request_context("", random_percent=42.5, config=config)

        assert context.random.percent == 42.5

    def test_random_percent_clamped(self, config):
        """Test an injected sample is kept inside [0, 100)."""
        assert build_request_context("", random_percent=100, config=config).random.percent < 100
        assert build_request_context("", random_percent=-5, config=config).random.percent == 0

    def test_context_is_immutable(self, config):
        """Test built context cannot be modified."""
        context = build_request_context("", query={"a": "1"}, config=config)

        with pytest.raises(FrozenInstanceError):
            context.random.percent = 1.0

        with pytest.raises(TypeError):
            context.http.query["a"] = "2"

    def test_custom_geo_header(self):
        """Test configured country header names are honoured."""
        config = RoutingConfig(_env_file=None, geo_country_headers=["x-country"])
        context = build_request_context("", headers={"X-Country": "MX", "cf-ipcountry": "US"}, config=config)

        assert context.geo.country == "MX"


class TestDefaultConfig:
    """Test context building without an explicit config."""

    def test_ignores_malformed_environment(self, monkeypatch):
        """Test a bad env value cannot break per-request context building."""
        # List fields must be JSON in the environment, so this value is invalid
        monkeypatch.setenv("GEO_COUNTRY_HEADERS", "cf-ipcountry")

        context = build_request_context("Mozilla/5.0", {"cf-ipcountry": "US"}, {})

        assert context.geo.country == "US"
        assert context.http.language == "en"

    def test_does_not_read_env_file(self, monkeypatch, tmp_path):
        """Test the .env file is not consulted on each build."""
        monkeypatch.chdir(tmp_path)
        env_file = tmp_path / ".env"

        env_file.write_text("DEFAULT_LANGUAGE=fr\n")
        first = build_request_context("", {}, {})
        env_file.write_text("DEFAULT_LANGUAGE=de\n")
        second = build_request_context("", {}, {})

        assert first.http.language == "en"
        assert second.http.language == "en"

    def test_defaults_match_config_defaults(self):
        """Test built-in defaults agree with an unconfigured RoutingConfig."""
        headers = {
            "X-Vercel-IP-Country": "ES",
            "X-Vercel-IP-Country-Region": "MD",
            "X-Vercel-IP-City": "Madrid",
        }

        without = build_request_context("", headers, {}, random_percent=1)
        with_config = build_request_context(
            "", headers, {}, random_percent=1, config=RoutingConfig(_env_file=None)
        )

        assert without.geo == with_config.geo
        assert without.http.language == with_config.http.language
