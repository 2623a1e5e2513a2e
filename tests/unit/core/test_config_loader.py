#!/usr/bin/env python3
"""
Unit tests for YAML configuration loading and environment overrides.
"""

import os
import unittest
from unittest.mock import mock_open, patch

from core.config_loader import AppConfig, load_config

SAMPLE_YAML = """
database:
  url: "postgresql://advisory:secret@db:5432/advisory"
matching:
  scoring:
    budget_decay_span: 0.5
    client_fit:
      style: 2.0
    tiers:
      top_match: 85
  result_policy:
    max_results: 10
allocation:
  circulation_mode: "balance_to_target"
  tier_10k_max_area: 11000
"""


class TestLoadConfig(unittest.TestCase):

    @patch.dict(os.environ, {}, clear=True)
    @patch("core.config_loader.os.path.exists", return_value=True)
    def test_values_from_yaml(self, _exists):
        with patch("builtins.open", mock_open(read_data=SAMPLE_YAML)):
            config = load_config("config.yaml")

        self.assertEqual(config.database.url, "postgresql://advisory:secret@db:5432/advisory")
        self.assertEqual(config.matching.scoring.budget_decay_span, 0.5)
        self.assertEqual(config.matching.scoring.client_fit.style, 2.0)
        # Unlisted multipliers fall back to 1.0, not to the client-fit defaults
        self.assertEqual(config.matching.scoring.client_fit.quality, 1.0)
        self.assertEqual(config.matching.scoring.tiers.top_match, 85)
        self.assertEqual(config.matching.scoring.tiers.good_fit, 60)
        self.assertEqual(config.matching.result_policy.max_results, 10)
        self.assertEqual(config.allocation.circulation_mode, "balance_to_target")
        self.assertEqual(config.allocation.tier_10k_max_area, 11000)

    @patch.dict(os.environ, {"DATABASE_URL": "sqlite:///override.db", "WEB_HOST": "127.0.0.1", "WEB_PORT": "9000"},
                clear=True)
    @patch("core.config_loader.os.path.exists", return_value=True)
    def test_env_overrides(self, _exists):
        with patch("builtins.open", mock_open(read_data=SAMPLE_YAML)):
            config = load_config("config.yaml")

        self.assertEqual(config.database.url, "sqlite:///override.db")
        self.assertEqual(config.web.host, "127.0.0.1")
        self.assertEqual(config.web.port, 9000)

    @patch.dict(os.environ, {}, clear=True)
    @patch("core.config_loader.os.path.exists", return_value=False)
    def test_missing_file_gives_defaults(self, _exists):
        config = load_config("missing.yaml")
        self.assertEqual(config, AppConfig())

    @patch.dict(os.environ, {}, clear=True)
    @patch("core.config_loader.os.path.exists", return_value=True)
    def test_empty_file_gives_defaults(self, _exists):
        with patch("builtins.open", mock_open(read_data="")):
            config = load_config("config.yaml")
        self.assertEqual(config.allocation.size_delta, 0.10)
        self.assertEqual(config.matching.scoring.client_fit.style, 1.5)
        self.assertEqual(config.matching.scoring.project_fit.budget, 1.5)


class TestDefaults(unittest.TestCase):

    def test_maxima_total(self):
        maxima = AppConfig().matching.scoring.maxima
        self.assertEqual(sum(maxima.model_dump().values()), 110)

    def test_result_policy(self):
        policy = AppConfig().matching.result_policy
        self.assertEqual(policy.min_combined_score, 40)
        self.assertFalse(policy.include_below_threshold)


if __name__ == '__main__':
    unittest.main()
