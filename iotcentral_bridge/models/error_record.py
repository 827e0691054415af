# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module contains a class representing a failure reported on the exception output.
"""
import json


class ErrorRecord(object):
    """Represents a message that could not be delivered to the device bridge

    :ivar str status: The HTTP status code as a string, or a negative code for local failures.
    :ivar str result: A description of the failure, or the response body of the device bridge.
    """

    def __init__(self, status: str, result: str) -> None:
        self.status = status
        self.result = result

    def to_json(self) -> str:
        return json.dumps({"status": self.status, "result": self.result})

    def __eq__(self, other):
        if not isinstance(other, ErrorRecord):
            return NotImplemented
        return self.status == other.status and self.result == other.result

    def __repr__(self):
        return "ErrorRecord(status={!r}, result={!r})".format(self.status, self.result)
