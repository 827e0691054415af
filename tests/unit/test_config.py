# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
import pytest
import logging
from iotcentral_bridge.config import BridgeConfig, BridgeSettings, normalize_device_id
from iotcentral_bridge.exceptions import ConfigurationUpdateError

logging.basicConfig(level=logging.DEBUG)


@pytest.fixture
def config():
    return BridgeConfig()


@pytest.fixture
def configured(fake_uri, fake_device_id):
    return BridgeConfig(endpoint_uri=fake_uri, device_id=fake_device_id)


@pytest.mark.describe("BridgeConfig - Instantiation")
class TestBridgeConfigInstantiation(object):
    @pytest.mark.it("Starts with an empty endpoint URI and device id by default")
    def test_defaults(self, config):
        assert config.endpoint_uri == ""
        assert config.device_id == ""
        assert config.settings.complete is False

    @pytest.mark.it("Stores initial values, normalizing the device id")
    def test_initial_values(self, fake_uri):
        config = BridgeConfig(endpoint_uri=fake_uri, device_id=" MyDevice ")
        assert config.endpoint_uri == fake_uri
        assert config.device_id == "mydevice"
        assert config.settings.complete is True


@pytest.mark.describe("BridgeConfig - .apply_update() -- 'uri'")
class TestBridgeConfigApplyUpdateUri(object):
    @pytest.mark.it("Sets the endpoint URI and reports it when 'uri' has a value")
    def test_sets_uri(self, config, fake_uri):
        reported = config.apply_update({"uri": fake_uri})
        assert config.endpoint_uri == fake_uri
        assert reported == {"uri": fake_uri}

    @pytest.mark.it("Resets the endpoint URI to empty and reports it when 'uri' is None")
    def test_resets_uri(self, configured):
        reported = configured.apply_update({"uri": None})
        assert configured.endpoint_uri == ""
        assert reported == {"uri": ""}

    @pytest.mark.it("Leaves the endpoint URI unchanged when 'uri' is absent")
    def test_absent_uri(self, configured, fake_uri):
        reported = configured.apply_update({"deviceId": "other"})
        assert configured.endpoint_uri == fake_uri
        assert "uri" not in reported

    @pytest.mark.it("Does not alter the case or whitespace of the endpoint URI")
    def test_uri_not_normalized(self, config):
        uri = " https://Fake.Bridge/API "
        config.apply_update({"uri": uri})
        assert config.endpoint_uri == uri


@pytest.mark.describe("BridgeConfig - .apply_update() -- 'deviceId'")
class TestBridgeConfigApplyUpdateDeviceId(object):
    @pytest.mark.it("Stores and reports the lower-cased, trimmed device id")
    def test_normalizes_device_id(self, config):
        reported = config.apply_update({"deviceId": "  AbC123 "})
        assert config.device_id == "abc123"
        assert reported == {"deviceId": "abc123"}

    @pytest.mark.it("Logs the adjustment when normalization changes the device id")
    def test_logs_normalization(self, config, caplog):
        with caplog.at_level(logging.INFO, logger="iotcentral_bridge.config"):
            config.apply_update({"deviceId": "MyDevice"})
        assert "is changed into 'mydevice'" in caplog.text

    @pytest.mark.it("Does not log an adjustment when the device id is already normalized")
    def test_no_normalization_log(self, config, caplog):
        with caplog.at_level(logging.INFO, logger="iotcentral_bridge.config"):
            config.apply_update({"deviceId": "mydevice"})
        assert "is changed into" not in caplog.text

    @pytest.mark.it("Resets the device id to empty and reports it when 'deviceId' is None")
    def test_resets_device_id(self, configured):
        reported = configured.apply_update({"deviceId": None})
        assert configured.device_id == ""
        assert reported == {"deviceId": ""}

    @pytest.mark.it("Leaves the device id unchanged when 'deviceId' is absent")
    def test_absent_device_id(self, configured, fake_device_id):
        reported = configured.apply_update({"uri": "https://other"})
        assert configured.device_id == fake_device_id
        assert "deviceId" not in reported


@pytest.mark.describe("BridgeConfig - .apply_update() -- General")
class TestBridgeConfigApplyUpdateGeneral(object):
    @pytest.mark.it("Reports both keys when both are updated")
    def test_both_keys(self, config, fake_uri):
        reported = config.apply_update({"uri": fake_uri, "deviceId": "Dev1"})
        assert reported == {"uri": fake_uri, "deviceId": "dev1"}
        assert config.settings == BridgeSettings(endpoint_uri=fake_uri, device_id="dev1")

    @pytest.mark.it("Ignores unrecognized keys, returning an empty delta")
    def test_ignores_other_keys(self, configured):
        before = configured.settings
        reported = configured.apply_update({"$version": 4, "interval": 10})
        assert reported == {}
        assert configured.settings == before

    @pytest.mark.it("Returns an empty delta for an empty update")
    def test_empty_update(self, config):
        assert config.apply_update({}) == {}

    @pytest.mark.it("Raises ConfigurationUpdateError if the update is not a mapping")
    @pytest.mark.parametrize("update", [["uri"], "uri", 5])
    def test_not_mapping(self, config, update):
        with pytest.raises(ConfigurationUpdateError):
            config.apply_update(update)

    @pytest.mark.it(
        "Raises ConfigurationUpdateError without applying anything if a value is not a string"
    )
    def test_bad_value(self, configured):
        before = configured.settings
        with pytest.raises(ConfigurationUpdateError):
            configured.apply_update({"uri": "https://other", "deviceId": {"nested": True}})
        assert configured.settings == before

    @pytest.mark.it("Replaces the settings snapshot rather than mutating it")
    def test_snapshot_immutable(self, configured):
        snapshot = configured.settings
        configured.apply_update({"deviceId": "other"})
        assert snapshot.device_id != configured.device_id


@pytest.mark.describe("normalize_device_id()")
class TestNormalizeDeviceId(object):
    @pytest.mark.it("Lower-cases and strips surrounding whitespace")
    @pytest.mark.parametrize(
        "value, expected",
        [("ABC", "abc"), ("  abc  ", "abc"), ("\tMixed-Case_1\n", "mixed-case_1"), ("", "")],
    )
    def test_normalize(self, value, expected):
        assert normalize_device_id(value) == expected
