# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
import logging
from azure.iot.device import Message
from . import constant
from .models import ErrorRecord

logger = logging.getLogger(__name__)


class ErrorReporter(object):
    """Sends error records to the module's exception output"""

    def __init__(self, client, output_name=constant.OUTPUT_EXCEPTION):
        """
        :param client: The module client used to send output messages.
        :type client: :class:`azure.iot.device.IoTHubModuleClient`
        :param str output_name: Name of the module output to route error records to.
        """
        self._client = client
        self._output_name = output_name

    def report(self, record: ErrorRecord) -> None:
        """Send an error record to the exception output.

        Failures to send are raised to the caller unchanged.
        """
        message = Message(
            record.to_json(), content_encoding="utf-8", content_type="application/json"
        )
        self._client.send_message_to_output(message, self._output_name)
        logger.info(
            "Error record '{}','{}' sent to output '{}'".format(
                record.status, record.result, self._output_name
            )
        )
