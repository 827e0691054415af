# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module contains the logic relaying Edge hub messages to the IoT Central device bridge.
"""
import logging
from typing import Optional
from . import constant
from .config import BridgeConfig, BridgeSettings
from .error_reporter import ErrorReporter
from .exceptions import ConfigurationIncompleteError, RemoteRejectionError
from .http_transport import HTTPTransport, redact_url
from .models import ErrorRecord, build_envelope
from .custom_typing import HTTPResponse

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


class Forwarder(object):
    """Delivers messages to the device bridge, reporting failures as error records.

    Delivery is at-most-once: every message gets a single POST attempt, and a message
    that fails is reported on the exception output and then dropped.

    The Forwarder keeps no mutable state of its own, so it can be used from several
    handler threads at once.
    """

    def __init__(self, config: BridgeConfig, http_transport: HTTPTransport, reporter: ErrorReporter):
        self._config = config
        self._http_transport = http_transport
        self._reporter = reporter

    def forward(self, raw_message: Optional[str]) -> Optional[ErrorRecord]:
        """Forward a raw JSON message to the device bridge.

        :param str raw_message: The message text received from the Edge hub.

        :returns: The error record sent to the exception output, or None if no error was
            reported (delivered, or an empty message with complete settings).
        :rtype: :class:`iotcentral_bridge.models.ErrorRecord` or None

        :raises: Any exception raised while sending the error record itself.
        """
        settings = self._config.settings

        try:
            _check_settings(settings, raw_message)
        except ConfigurationIncompleteError as e:
            return self._report(constant.STATUS_CONFIGURATION_INCOMPLETE, str(e))

        if not raw_message:
            logger.debug("Empty message ignored")
            return None

        try:
            envelope = build_envelope(settings.device_id, raw_message)
            body = envelope.to_json()
            logger.debug("Output: '{}'".format(body))
            response = self._http_transport.post(
                settings.endpoint_uri, body=body, headers=JSON_HEADERS
            )
        except Exception as e:
            logger.warning(
                "Message could not be forwarded to {} ({})".format(
                    redact_url(settings.endpoint_uri), type(e).__name__
                )
            )
            return self._report(constant.STATUS_FORWARD_FAILED, str(e))

        logger.info(
            "IoT Central Response status: '{}'; result= '{}'".format(
                response["status_code"], response["resp"]
            )
        )

        try:
            _check_response(response)
        except RemoteRejectionError:
            return self._report(str(response["status_code"]), response["resp"])

        return None

    def _report(self, status, result):
        record = ErrorRecord(status=status, result=result)
        self._reporter.report(record)
        return record


def _check_settings(settings: BridgeSettings, raw_message):
    if not settings.complete:
        raise ConfigurationIncompleteError(
            "DeviceId and/or Uri is empty. Message '{}' ignored.".format(raw_message or "")
        )


def _check_response(response: HTTPResponse):
    body = response["resp"]
    if body and constant.REGISTRATION_FAILURE_PHRASE in body:
        raise RemoteRejectionError(body)
