"""PadbotMapperDriver 유닛 테스트."""

import json
from unittest.mock import MagicMock

import pytest

from padbot_mapper.domain.exceptions import (
    ConfigurationError,
    PropertyValueError,
)
from padbot_mapper.infra.http import PadbotHttpGateway
from padbot_mapper.presentation.mapper_driver import (
    PadbotMapperDriver,
    build_driver,
)
from padbot_mapper.usecase.padbot_driver import PadbotDriver
from padbot_mapper.usecase.property_adapter import (
    PropertyReadResult,
    WriteResult,
)

COMMON = json.dumps(
    {"customizedValues": {"padbotBaseURL": "http://padbot.local:5000"}}
).encode("utf-8")
PROTOCOL = b'{"protocolName": "padbot-protocol", "configData": {}}'


def _visitor(name):
    return json.dumps({"configData": {"propertyName": name}}).encode("utf-8")


@pytest.fixture
def core():
    return MagicMock(spec=PadbotDriver)


@pytest.fixture
def mapper(core):
    return PadbotMapperDriver(core, poll_interval_sec=0.5)


class TestInitDevice:
    def test_parses_base_url(self, mapper, core):
        mapper.init_device(COMMON)

        config = core.initialize.call_args[0][0]
        assert config.base_url == "http://padbot.local:5000"
        assert config.poll_interval_sec == 0.5

    def test_malformed_common_not_started(self, mapper, core):
        with pytest.raises(ConfigurationError):
            mapper.init_device(b"{oops")
        core.initialize.assert_not_called()


class TestReadDeviceData:
    def test_returns_value(self, mapper, core):
        core.read_property.return_value = PropertyReadResult(
            name="batteryPercentage", value="87",
        )

        value = mapper.read_device_data(
            COMMON, _visitor("batteryPercentage"), PROTOCOL,
        )

        assert value == "87"
        core.read_property.assert_called_once_with("batteryPercentage")

    def test_malformed_visitor(self, mapper, core):
        with pytest.raises(ConfigurationError):
            mapper.read_device_data(COMMON, b"nope", PROTOCOL)
        core.read_property.assert_not_called()

    def test_unknown_property_reads_unknown(self):
        mapper = PadbotMapperDriver(build_driver())
        assert mapper.read_device_data(COMMON, _visitor("bogus")) == (
            "UNKNOWN"
        )


class TestWriteDeviceData:
    def test_forwards_write(self, mapper, core):
        core.write_property.return_value = WriteResult.ACCEPTED

        mapper.write_device_data(
            "Room42", COMMON, _visitor("robotLocation"), PROTOCOL,
        )

        core.write_property.assert_called_once_with(
            "robotLocation", "Room42"
        )

    def test_invalid_data_raises(self, mapper, core):
        core.write_property.side_effect = PropertyValueError("bad")
        with pytest.raises(PropertyValueError):
            mapper.write_device_data(
                12, COMMON, _visitor("robotLocation"), PROTOCOL,
            )

    def test_malformed_config(self, mapper, core):
        with pytest.raises(ConfigurationError):
            mapper.write_device_data(
                "Room42", b"[]", _visitor("robotLocation"), PROTOCOL,
            )
        core.write_property.assert_not_called()


class TestStatusAndStop:
    def test_get_device_status(self, mapper, core):
        core.get_health.return_value = True
        assert mapper.get_device_status(COMMON, None, PROTOCOL) is True

    def test_stop_device(self, mapper, core):
        mapper.stop_device()
        core.shutdown.assert_called_once()


class TestBuildDriver:
    def test_default_gateway_is_http(self):
        driver = build_driver()
        assert driver._gateway_factory is PadbotHttpGateway

    def test_default_mapper_builds_driver(self):
        mapper = PadbotMapperDriver()
        assert isinstance(mapper.driver, PadbotDriver)
        assert mapper.get_device_status() is False
