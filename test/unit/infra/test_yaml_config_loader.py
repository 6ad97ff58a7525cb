"""YamlConfigLoader 유닛 테스트."""

import pytest
import yaml

from padbot_mapper.domain.exceptions import ConfigurationError
from padbot_mapper.infra.config.yaml_config_loader import YamlConfigLoader


def _write(tmp_path, data):
    path = tmp_path / "config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def config_yaml(tmp_path):
    """임시 config.yaml 파일을 생성한다."""
    return _write(tmp_path, {
        "padbot_mapper": {
            "device_name": "padbot-lobby",
            "log_level": "debug",
            "report_interval_sec": 2,
            "gateway": {
                "base_url": "http://192.168.1.20:5000/",
                "poll_interval_sec": 0.5,
                "request_timeout_sec": 3,
            },
        },
    })


class TestYamlConfigLoader:
    """YamlConfigLoader 테스트."""

    def test_load_valid_config(self, config_yaml):
        config = YamlConfigLoader(config_yaml).load()

        assert config.device_name == "padbot-lobby"
        assert config.log_level == "DEBUG"
        assert config.report_interval_sec == 2.0
        assert config.gateway.base_url == "http://192.168.1.20:5000"
        assert config.gateway.poll_interval_sec == 0.5
        assert config.gateway.request_timeout_sec == 3.0

    def test_load_without_wrapper(self, tmp_path):
        path = _write(tmp_path, {"gateway": {"base_url": "http://robot"}})
        config = YamlConfigLoader(path).load()
        assert config.gateway.base_url == "http://robot"
        assert config.gateway.poll_interval_sec == 1.0

    def test_load_nonexistent_file_uses_defaults(self, tmp_path):
        config = YamlConfigLoader(tmp_path / "nonexistent.yaml").load()
        assert config.gateway.base_url == ""
        assert config.gateway.is_configured is False
        assert config.device_name == "padbot"

    def test_load_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert YamlConfigLoader(path).load().log_level == "INFO"

    def test_default_path_loads(self):
        config = YamlConfigLoader().load()
        assert config.gateway.base_url == ""
        assert config.gateway.poll_interval_sec == 1.0

    def test_load_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("gateway: [unclosed")
        with pytest.raises(ConfigurationError):
            YamlConfigLoader(path).load()

    def test_non_mapping_root(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError):
            YamlConfigLoader(path).load()

    @pytest.mark.parametrize(
        "data",
        [
            {"gateway": "http://robot"},
            {"gateway": []},
            {"gateway": {"base_url": 42}},
            {"gateway": {"poll_interval_sec": "fast"}},
            {"gateway": {"poll_interval_sec": 0}},
            {"gateway": {"request_timeout_sec": -1}},
            {"gateway": {"request_timeout_sec": True}},
            {"log_level": "LOUD"},
            {"padbot_mapper": "oops"},
        ],
    )
    def test_invalid_values(self, tmp_path, data):
        with pytest.raises(ConfigurationError):
            YamlConfigLoader(_write(tmp_path, data)).load()
