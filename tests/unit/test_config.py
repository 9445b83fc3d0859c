"""Unit tests for the YAML configuration loader."""

import os

import pytest

from handsfree.config import HandsFreeConfig

VALID_CONFIG = """
logging:
  level: DEBUG
  file_path: logs/handsfree.log
storage:
  data_directory: data
  persist: false
media:
  photo_timer_default_seconds: 5
contacts:
  seed:
    - name: JANE DOE
      status: offline
"""


@pytest.mark.unit
class TestHandsFreeConfig:
    """Test cases for HandsFreeConfig."""

    def test_missing_file(self, temp_data_dir):
        with pytest.raises(FileNotFoundError):
            HandsFreeConfig(os.path.join(temp_data_dir, "missing.yaml"))

    def test_dot_path_get(self, write_config):
        config = HandsFreeConfig(write_config(VALID_CONFIG))

        assert config.get("media.photo_timer_default_seconds") == 5
        assert config.get("storage.persist") is False
        assert config.get("recognition.language", "en-US") == "en-US"
        assert config.get("media.photo_timer_default_seconds.nested") is None

    def test_relative_paths_resolve_against_config_dir(self, write_config, temp_data_dir):
        config = HandsFreeConfig(write_config(VALID_CONFIG))

        assert config.get("logging.file_path") == os.path.join(temp_data_dir, "logs", "handsfree.log")
        assert config.get_data_directory() == os.path.abspath(os.path.join(temp_data_dir, "data"))

    def test_set_creates_nested_keys(self, write_config):
        config = HandsFreeConfig(write_config(VALID_CONFIG))

        config.set("ui.transcript_lines", 3)

        assert config.get("ui.transcript_lines") == 3

    def test_seed_contacts(self, write_config):
        config = HandsFreeConfig(write_config(VALID_CONFIG))

        assert config.get_seed_contacts() == [{"name": "JANE DOE", "status": "offline"}]

    def test_seed_contact_requires_name(self, write_config):
        config = HandsFreeConfig(write_config("contacts:\n  seed:\n    - phone: '555'\n"))

        with pytest.raises(ValueError):
            config.get_seed_contacts()

    @pytest.mark.parametrize("content", [
        "",
        "logging: [unclosed",
        "- just\n- a list\n",
    ])
    def test_invalid_files_raise_value_error(self, write_config, content):
        with pytest.raises(ValueError):
            HandsFreeConfig(write_config(content))
