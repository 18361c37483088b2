"""Tests for perf_config.py."""

import dataclasses

import pytest

from nested_perf.perf_config import PerfConfig


class TestPerfConfig:
    def test_defaults(self):
        config = PerfConfig()
        assert config.delimiter == ","
        assert config.data_delimiter == "|"
        assert config.ns_delimiter == "."
        assert config.fixed_columns is False
        assert all(
            getattr(config, f.name)
            for f in dataclasses.fields(config)
            if f.name.startswith("do_log_")
        )

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            PerfConfig().delimiter = ";"

    def test_replace_returns_new_instance(self):
        config = PerfConfig()
        changed = config.replace(fixed_columns=True)
        assert changed.fixed_columns is True
        assert config.fixed_columns is False

    def test_empty_delimiter_rejected(self):
        with pytest.raises(ValueError, match="delimiter"):
            PerfConfig(delimiter="")

    def test_non_string_delimiter_rejected(self):
        with pytest.raises(ValueError, match="ns_delimiter"):
            PerfConfig(ns_delimiter=1)

    def test_non_bool_toggle_rejected(self):
        with pytest.raises(ValueError, match="fixed_columns"):
            PerfConfig.from_dict({"fixed_columns": "false"})
        with pytest.raises(ValueError, match="do_log_data"):
            PerfConfig(do_log_data=1)

    def test_empty_namespace_delimiter_allowed(self):
        assert PerfConfig(ns_delimiter="").ns_delimiter == ""

    def test_dict_round_trip(self):
        config = PerfConfig(delimiter=";", do_log_data=False)
        assert PerfConfig.from_dict(config.to_dict()) == config

    def test_unknown_keys_rejected(self):
        with pytest.raises(ValueError, match="bogus"):
            PerfConfig.from_dict({"bogus": 1})

    def test_from_json_tolerates_trailing_commas(self, tmp_path):
        path = tmp_path / "perf.json"
        path.write_text('{\n  "delimiter": ";",\n  "fixed_columns": true,\n}\n')
        config = PerfConfig.from_json(path)
        assert config.delimiter == ";"
        assert config.fixed_columns is True
        assert config.data_delimiter == "|"
