import pytest
import yaml
from pydantic import ValidationError

from humanize_bytes.config import (
    FormatterConfig,
    generate_default_config,
    load_config,
    load_yaml_config,
)
from humanize_bytes.units import BINARY, DECIMAL, QUANTITY


def test_load_yaml_config_missing_file(tmp_path):
    assert load_yaml_config(str(tmp_path / "missing.yaml")) == {}


def test_load_yaml_config_empty_file(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("   \n")
    assert load_yaml_config(str(config_file)) == {}


class TestFormatterConfig:
    def test_defaults(self):
        config = FormatterConfig()
        assert config.profile == "binary"
        assert config.unit_profile is BINARY

    def test_normalizes_profile_name(self):
        """Whitespace and case in the profile name are ignored."""
        assert FormatterConfig(profile=" Quantity ").unit_profile is QUANTITY

    def test_rejects_unknown_profile(self):
        with pytest.raises(ValidationError) as exc_info:
            FormatterConfig(profile="metric")
        assert "profile must be one of" in str(exc_info.value)

    def test_rejects_non_string_profile(self):
        with pytest.raises(ValidationError):
            FormatterConfig(profile=3)

    def test_is_frozen(self):
        config = FormatterConfig()
        with pytest.raises(ValidationError):
            config.profile = "decimal"

    def test_humanize_uses_profile(self):
        assert FormatterConfig(profile="decimal").humanize(1000) == "1 kB"
        assert FormatterConfig(profile="quantity").humanize(1000) == "1 k"
        assert FormatterConfig().humanize(1024) == "1 KiB"


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(str(tmp_path / "missing.yaml"))
        assert config.unit_profile is BINARY

    def test_reads_profile(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("profile: decimal\n")
        assert load_config(str(config_file)).unit_profile is DECIMAL

    def test_unknown_keys_ignored(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("profile: quantity\nprecision: 3\n")
        assert load_config(str(config_file)).unit_profile is QUANTITY

    def test_invalid_profile_raises(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("profile: metric\n")
        with pytest.raises(ValidationError):
            load_config(str(config_file))

    def test_non_mapping_raises(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- binary\n- decimal\n")
        with pytest.raises(ValueError):
            load_config(str(config_file))


class TestDefaultConfigGeneration:
    def test_generate_default_config(self, tmp_path):
        config_path = tmp_path / "config" / "humanize.yaml"

        assert generate_default_config(str(config_path)) is True

        content = config_path.read_text()
        assert "#" in content
        assert yaml.safe_load(content) == {"profile": "binary"}
        assert load_config(str(config_path)).unit_profile is BINARY

    def test_generate_default_does_not_overwrite(self, tmp_path):
        config_path = tmp_path / "humanize.yaml"
        config_path.write_text("profile: decimal\n")

        assert generate_default_config(str(config_path)) is False
        assert config_path.read_text() == "profile: decimal\n"
