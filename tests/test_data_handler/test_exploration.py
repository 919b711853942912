"""Tests for exploratory summary statistics."""

from unittest.mock import patch

import pytest

from rookery.data_handler import describe_features, log_feature_profile, summarize_observations


@pytest.mark.unit
def test_summary_has_counts_and_means(penguin_table, dataset_cfg):
    summary = summarize_observations(penguin_table, "species", dataset_cfg.numeric_columns)

    assert list(summary.index) == ["Adelie", "Chinstrap", "Gentoo"]
    assert summary["n"].tolist() == [34, 33, 33]
    assert "mean_body_mass_g" in summary.columns
    assert summary.loc["Gentoo", "mean_body_mass_g"] > summary.loc["Adelie", "mean_body_mass_g"]


@pytest.mark.unit
def test_describe_features(penguin_table):
    profile = describe_features(penguin_table, ["bill_length_mm", "body_mass_g"])

    assert list(profile.columns) == ["bill_length_mm", "body_mass_g"]
    assert profile.loc["count", "bill_length_mm"] == 100


@pytest.mark.unit
def test_feature_profile_is_logged(penguin_table):
    profile = describe_features(penguin_table, ["bill_length_mm"])

    with patch("rookery.data_handler.exploration.logger") as logger:
        log_feature_profile(profile)

    text = "\n".join(str(c.args[0]) for c in logger.info.call_args_list)
    assert "feature profile" in text
    assert "bill_length_mm" in text
    assert "mean" in text
