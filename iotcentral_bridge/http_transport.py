# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

import logging
from urllib.parse import urlsplit, urlunsplit
import requests  # type: ignore
from . import constant
from .exceptions import ProtocolClientError
from .custom_typing import HTTPResponse

logger = logging.getLogger(__name__)


class HTTPTransport(object):
    """
    A wrapper class that provides an implementation-agnostic HTTP interface.
    """

    def __init__(self, session=None):
        """
        Constructor to instantiate an HTTP protocol wrapper.

        :param session: A requests Session to send requests with (optional). A new Session
            is created if not provided.
        """
        self._session = session if session is not None else requests.Session()
        self._session.headers["User-Agent"] = constant.USER_AGENT

    def post(self, url, body, headers=None) -> HTTPResponse:
        """
        This method sends a single POST request to a remote host and then waits for and reads the response.

        No timeout is applied beyond the defaults of the underlying connection, and the
        request is never retried.

        :param str url: The full URL to send the request to.
        :param str body: The body of the HTTP request.
        :param dict headers: A dictionary that provides extra HTTP headers to be sent with the request.

        :returns: A dictionary containing the status code, the reason and the response text.
        :raises: :class:`iotcentral_bridge.exceptions.ProtocolClientError` if the request
            could not be completed.
        """
        logger.info("sending http POST request to {} .".format(redact_url(url)))

        try:
            response = self._session.post(url, data=body.encode("utf-8"), headers=headers)
        except Exception as e:
            raise ProtocolClientError(str(e)) from e

        return {
            "status_code": response.status_code,
            "reason": response.reason,
            "resp": response.text,
        }

    def shutdown(self):
        logger.debug("closing http session")
        self._session.close()


def redact_url(url):
    """
    Remove the query string (which carries the function key of the device bridge) from a URL for logging
    """
    try:
        parts = urlsplit(url)
    except ValueError:
        return "<invalid url>"
    return urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))
