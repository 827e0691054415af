# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""Define exceptions raised while relaying messages to the IoT Central device bridge"""


class BridgeError(Exception):
    """Represents a failure in the IoT Central bridge module"""

    pass


class ConfigurationIncompleteError(BridgeError):
    """Represents an attempt to forward a message before the endpoint and device id are set"""

    pass


class MalformedPayloadError(BridgeError, ValueError):
    """Represents an inbound payload that is not valid JSON"""

    pass


class ProtocolClientError(BridgeError):
    """Represents an error from the HTTP client used to reach the device bridge"""

    pass


class RemoteRejectionError(BridgeError):
    """Represents a response from the device bridge indicating the device could not be registered"""

    pass


class ConfigurationUpdateError(BridgeError):
    """Represents a failure applying a desired properties patch"""

    pass
