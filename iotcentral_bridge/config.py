# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module contains the settings store driven by the module twin's desired properties.
"""
import logging
import threading
from collections.abc import Mapping
from typing import NamedTuple
from . import constant
from .exceptions import ConfigurationUpdateError
from .custom_typing import DesiredSettings, ReportedSettings

logger = logging.getLogger(__name__)


class BridgeSettings(NamedTuple):
    """Immutable snapshot of the bridge settings"""

    endpoint_uri: str = constant.DEFAULT_URI
    device_id: str = constant.DEFAULT_DEVICE_ID

    @property
    def complete(self) -> bool:
        return bool(self.endpoint_uri) and bool(self.device_id)


def normalize_device_id(device_id: str) -> str:
    """IoT Central device ids are lower case, without surrounding whitespace"""
    return device_id.lower().strip()


class BridgeConfig(object):
    """Holds the device bridge endpoint and device id for the module.

    Settings are replaced as a whole under a lock, so readers always see a consistent
    endpoint/device id pair. A reader may still see the pair as it was before an update
    that is being applied concurrently.
    """

    def __init__(self, endpoint_uri=constant.DEFAULT_URI, device_id=constant.DEFAULT_DEVICE_ID):
        """Initializer for BridgeConfig

        :param str endpoint_uri: The device bridge URI to POST to. Defaults to empty (unset).
        :param str device_id: The IoT Central device id. Defaults to empty (unset).
        """
        self._lock = threading.Lock()
        self._settings = BridgeSettings(
            endpoint_uri=endpoint_uri, device_id=normalize_device_id(device_id)
        )

    @property
    def settings(self) -> BridgeSettings:
        with self._lock:
            return self._settings

    @property
    def endpoint_uri(self) -> str:
        return self.settings.endpoint_uri

    @property
    def device_id(self) -> str:
        return self.settings.device_id

    def apply_update(self, update: DesiredSettings) -> ReportedSettings:
        """Apply a desired properties patch to the settings.

        A key that is absent leaves the setting unchanged. A key that is present with a
        value of None resets the setting to its empty default. Keys other than "uri" and
        "deviceId" are ignored.

        :param update: The desired properties patch (or full desired properties).
        :type update: dict

        :returns: The reported properties delta, holding each touched key set to its
            stored value. Empty if no recognized keys were present.
        :rtype: dict

        :raises: :class:`iotcentral_bridge.exceptions.ConfigurationUpdateError` if the
            update is not a mapping or holds a value that is not a string. Nothing is
            applied in that case.
        """
        if not isinstance(update, Mapping):
            raise ConfigurationUpdateError(
                "Desired properties must be a mapping, got {}".format(type(update).__name__)
            )

        reported = {}
        with self._lock:
            endpoint_uri, device_id = self._settings

            if constant.PROPERTY_URI in update:
                value = _validate_value(update, constant.PROPERTY_URI)
                endpoint_uri = value if value is not None else constant.DEFAULT_URI
                reported[constant.PROPERTY_URI] = endpoint_uri

            if constant.PROPERTY_DEVICE_ID in update:
                value = _validate_value(update, constant.PROPERTY_DEVICE_ID)
                if value is not None:
                    device_id = normalize_device_id(value)
                    if device_id != value:
                        logger.info(
                            "DeviceId '{}' is changed into '{}' to match IoT Central Bridge requirements.".format(
                                value, device_id
                            )
                        )
                else:
                    device_id = constant.DEFAULT_DEVICE_ID
                reported[constant.PROPERTY_DEVICE_ID] = device_id

            self._settings = BridgeSettings(endpoint_uri=endpoint_uri, device_id=device_id)

        if not reported:
            logger.debug("No bridge settings in desired properties")
        if constant.PROPERTY_URI in reported:
            logger.info("Uri changed to '{}'".format(reported[constant.PROPERTY_URI]))
        if constant.PROPERTY_DEVICE_ID in reported:
            logger.info("DeviceId changed to '{}'".format(reported[constant.PROPERTY_DEVICE_ID]))
        return reported


def _validate_value(update, key):
    value = update[key]
    if value is not None and not isinstance(value, str):
        raise ConfigurationUpdateError(
            "Desired property '{}' must be a string, got {}".format(key, type(value).__name__)
        )
    return value
