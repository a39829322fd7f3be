import os
import unittest
from unittest.mock import patch

from backend.seo import MetadataResolverConfig, SiteDefaults


class TestSiteDefaults(unittest.TestCase):
    def test_builtin_brand_copy(self) -> None:
        defaults = SiteDefaults()

        self.assertEqual(defaults.title, "Serendia Gems | Heart of Sri Lanka")
        self.assertEqual(defaults.og_image, "/hero/hero.jpeg")
        self.assertEqual(defaults.product_description_limit, 160)
        self.assertEqual(defaults.product_path("42"), "/product/42")

    def test_from_env_overrides_brand_copy(self) -> None:
        env = {"SEO_DEFAULT_TITLE": "Other Shop", "SEO_BRAND_NAME": "Other"}
        with patch.dict(os.environ, env, clear=True):
            defaults = SiteDefaults.from_env()

        self.assertEqual(defaults.title, "Other Shop")
        self.assertEqual(defaults.brand_name, "Other")
        self.assertEqual(defaults.og_image, "/hero/hero.jpeg")

    def test_blank_and_invalid_env_values_are_ignored(self) -> None:
        env = {"SEO_DEFAULT_TITLE": "   ", "SEO_PRODUCT_DESCRIPTION_LIMIT": "lots"}
        with patch.dict(os.environ, env, clear=True):
            defaults = SiteDefaults.from_env()

        self.assertEqual(defaults.title, "Serendia Gems | Heart of Sri Lanka")
        self.assertEqual(defaults.product_description_limit, 160)

    def test_non_positive_description_limit_falls_back_to_default(self) -> None:
        for raw in ("-3", "0"):
            with self.subTest(raw=raw):
                with patch.dict(os.environ, {"SEO_PRODUCT_DESCRIPTION_LIMIT": raw}, clear=True):
                    defaults = SiteDefaults.from_env()

                self.assertEqual(defaults.product_description_limit, 160)

    def test_positive_description_limit_from_env(self) -> None:
        with patch.dict(os.environ, {"SEO_PRODUCT_DESCRIPTION_LIMIT": "80"}, clear=True):
            defaults = SiteDefaults.from_env()

        self.assertEqual(defaults.product_description_limit, 80)


class TestResolverConfig(unittest.TestCase):
    def test_timeout_disabled_by_default(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            config = MetadataResolverConfig.from_env()

        self.assertIsNone(config.lookup_timeout_seconds)

    def test_timeout_from_env(self) -> None:
        with patch.dict(os.environ, {"SEO_LOOKUP_TIMEOUT_SECONDS": "1.5"}, clear=True):
            config = MetadataResolverConfig.from_env()

        self.assertEqual(config.lookup_timeout_seconds, 1.5)

    def test_non_positive_timeout_disables_it(self) -> None:
        with patch.dict(os.environ, {"SEO_LOOKUP_TIMEOUT_SECONDS": "0"}, clear=True):
            config = MetadataResolverConfig.from_env()

        self.assertIsNone(config.lookup_timeout_seconds)
