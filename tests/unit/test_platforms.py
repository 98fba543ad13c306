"""Tests for the platform/product map."""

from fw_browser.service.platforms import (
    PLATFORM_PRODUCTS,
    platforms_for_product,
    products_for_platform,
)


class TestPlatforms:
    def test_products_for_platform(self):
        assert "G4 Pro" in products_for_platform("s5l")
        assert products_for_platform("S5L") == products_for_platform("s5l")

    def test_unknown_platform(self):
        assert products_for_platform("zzz") == []

    def test_returns_copy(self):
        products_for_platform("s5l").append("X")
        assert "X" not in PLATFORM_PRODUCTS["s5l"]

    def test_platforms_for_shared_product(self):
        assert platforms_for_product("g5 pro") == ["sav530q", "sav837gw"]
        assert platforms_for_product("Vision Go") == ["s2lb", "s2lm"]
