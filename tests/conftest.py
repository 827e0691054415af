# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

import pytest

"""
NOTE: Tests needing an arbitrary exception should use one of the following fixtures.

The exception classes are not defined anywhere else, so they can only be handled by broad
all-encompassing handling, and a test checking that one of them is raised cannot spuriously
pass due to a different exception being raised.
"""


@pytest.fixture
def unexpected_exception():
    class UnexpectedException(Exception):
        pass

    e = UnexpectedException()
    return e


@pytest.fixture
def unexpected_base_exception():
    class UnexpectedBaseException(BaseException):
        pass

    return UnexpectedBaseException()


@pytest.fixture
def fake_uri():
    return "https://fake-bridge.azurewebsites.net/api/IoTCFunction?code=fakecode"


@pytest.fixture
def fake_device_id():
    return "fakedevice"
