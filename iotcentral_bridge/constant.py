# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module defines constants for use across the iotcentral-bridge package
"""

VERSION = "1.0.0"
USER_AGENT = "iotcentral-bridge-module-py/" + VERSION

# Edge hub routing
INPUT_NAME = "input1"
OUTPUT_EXCEPTION = "Exception"
METHOD_INPUT_MESSAGE = "inputMessage"

# Module twin desired/reported property keys
PROPERTY_URI = "uri"
PROPERTY_DEVICE_ID = "deviceId"

DEFAULT_URI = ""
DEFAULT_DEVICE_ID = ""

# Status values carried by error records sent on the exception output
STATUS_CONFIGURATION_INCOMPLETE = "-2"
STATUS_FORWARD_FAILED = "-1"

# Phrase returned by the IoT Central device bridge when it cannot register a device
REGISTRATION_FAILURE_PHRASE = "Unable to register device"

METHOD_STATUS_OK = 200
METHOD_STATUS_NOT_FOUND = 404
