# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module contains the request body sent to the IoT Central device bridge.
"""
import json
from iotcentral_bridge.exceptions import MalformedPayloadError
from iotcentral_bridge.custom_typing import JSONSerializable


class BridgeEnvelope(object):
    """Represents a device bridge request pairing a device identity with measurements

    :ivar str device_id: The IoT Central device id the measurements belong to.
    :ivar measurements: The parsed JSON payload, passed through unmodified.
    """

    def __init__(self, device_id: str, measurements: JSONSerializable) -> None:
        """Initializer for BridgeEnvelope

        :param str device_id: The IoT Central device id the measurements belong to.
        :param measurements: Any JSON value (object, array, string, number, bool or null).
        """
        self.device_id = device_id
        self.measurements = measurements

    def to_dict(self) -> dict:
        return {"device": {"deviceId": self.device_id}, "measurements": self.measurements}

    def to_json(self) -> str:
        """Serialize the envelope into the JSON body expected by the device bridge"""
        return json.dumps(self.to_dict())


def build_envelope(device_id: str, raw_json: str) -> BridgeEnvelope:
    """Parse a raw JSON message and wrap it for the device bridge.

    No schema is imposed on the payload; any valid JSON value is accepted.

    :param str device_id: The IoT Central device id to associate with the payload.
    :param str raw_json: The message text received from the Edge hub.

    :raises: :class:`iotcentral_bridge.exceptions.MalformedPayloadError` if the message
        is not valid JSON.
    """
    try:
        measurements = json.loads(raw_json)
    except (TypeError, ValueError) as e:
        raise MalformedPayloadError("Message is not valid JSON: {}".format(e)) from e
    return BridgeEnvelope(device_id=device_id, measurements=measurements)
