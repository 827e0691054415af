# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module contains the Edge module that wires Edge hub events to the bridge forwarder.
"""
import json
import logging
from typing import Optional
from azure.iot.device import MethodResponse
from . import constant
from .config import BridgeConfig
from .error_reporter import ErrorReporter
from .forwarder import Forwarder
from .http_transport import HTTPTransport
from .custom_typing import ReportedSettings, TwinPatch

logger = logging.getLogger(__name__)


class IoTCentralBridgeModule(object):
    """An Azure IoT Edge module relaying messages to the IoT Central device bridge.

    Messages arriving on input "input1" and invocations of the "inputMessage" direct
    method are forwarded. The bridge URI and device id are taken from the module
    twin's desired properties and reported back once applied.
    """

    def __init__(
        self,
        client,
        config: Optional[BridgeConfig] = None,
        http_transport: Optional[HTTPTransport] = None,
    ):
        """Initializer for IoTCentralBridgeModule

        :param client: The module client connected to the Edge hub.
        :type client: :class:`azure.iot.device.IoTHubModuleClient`
        :param config: The settings store. A new, empty one is created if not provided.
        :type config: :class:`iotcentral_bridge.config.BridgeConfig`
        :param http_transport: The transport used to reach the device bridge (optional).
        :type http_transport: :class:`iotcentral_bridge.http_transport.HTTPTransport`
        """
        self._client = client
        self.config = config if config is not None else BridgeConfig()
        self._http_transport = http_transport if http_transport is not None else HTTPTransport()
        self.reporter = ErrorReporter(client)
        self.forwarder = Forwarder(self.config, self._http_transport, self.reporter)

    def attach_handlers(self) -> None:
        self._client.on_message_received = self.handle_message
        self._client.on_method_request_received = self.handle_method_request
        self._client.on_twin_desired_properties_patch_received = self.handle_twin_patch
        logger.info("Input '{}' attached.".format(constant.INPUT_NAME))
        logger.info("Output '{}' attached.".format(constant.OUTPUT_EXCEPTION))
        logger.info("Method '{}' attached.".format(constant.METHOD_INPUT_MESSAGE))

    def start(self) -> None:
        """Attach the handlers, connect to the Edge hub and apply the current desired properties"""
        self.attach_handlers()
        self._client.connect()

        twin = self._client.get_twin()
        self.handle_twin_patch(twin.get("desired", {}))

        logger.info("IoT Central Bridge module client initialized.")

    def shutdown(self) -> None:
        logger.info("Shutting down IoT Central Bridge module...")
        try:
            self._client.shutdown()
        finally:
            self._http_transport.shutdown()

    def handle_message(self, message) -> None:
        """Forward a message received from the Edge hub.

        Only messages on input "input1" are forwarded. There is no way to reject a
        message, so every message is considered handled once this returns.
        """
        if message.input_name != constant.INPUT_NAME:
            logger.warning(
                "Message received on unknown input '{}' ignored".format(message.input_name)
            )
            return

        message_string = _decode(message.data)
        logger.info("Received message:[{}]".format(message_string))
        self.forwarder.forward(message_string)

    def handle_method_request(self, method_request) -> None:
        """Forward the payload of an "inputMessage" direct method invocation.

        The method is always answered with status 200, regardless of the forwarding
        outcome. Other methods are answered with status 404.
        """
        if method_request.name != constant.METHOD_INPUT_MESSAGE:
            logger.warning("Unknown method request received: {}".format(method_request.name))
            method_response = MethodResponse.create_from_method_request(
                method_request,
                constant.METHOD_STATUS_NOT_FOUND,
                {"result": "Method '{}' is not supported".format(method_request.name)},
            )
            self._client.send_method_response(method_response)
            return

        # The method payload arrives JSON-decoded; forward it as JSON text again
        payload = method_request.payload
        message_string = json.dumps(payload) if payload is not None else ""
        logger.info("Received method {}:[{}]".format(method_request.name, message_string))

        try:
            self.forwarder.forward(message_string)
        finally:
            method_response = MethodResponse.create_from_method_request(
                method_request, constant.METHOD_STATUS_OK, None
            )
            self._client.send_method_response(method_response)

    def handle_twin_patch(self, patch: TwinPatch) -> Optional[ReportedSettings]:
        """Apply a desired properties patch and report the applied settings back.

        Failures are logged and never raised, so a bad patch cannot stop the module.

        :returns: The reported properties delta that was published, or None if nothing
            was published.
        """
        if not patch:
            return None

        logger.info("Desired property change:")
        logger.info(_dumps_for_log(patch))

        try:
            reported = self.config.apply_update(patch)
            if reported:
                self._client.patch_twin_reported_properties(reported)
                return reported
        except Exception as e:
            for inner in _inner_exceptions(e):
                logger.error(
                    "Error when receiving desired property: {}".format(inner),
                    exc_info=(type(inner), inner, inner.__traceback__),
                )
        return None


def _decode(data) -> str:
    if data is None:
        return ""
    if isinstance(data, (bytes, bytearray)):
        return data.decode("utf-8", errors="replace")
    return str(data)


def _dumps_for_log(patch):
    try:
        return json.dumps(patch)
    except (TypeError, ValueError):
        return repr(patch)


def _inner_exceptions(e):
    # ExceptionGroup and similar aggregates carry their members in .exceptions
    inner = getattr(e, "exceptions", None)
    if isinstance(inner, (list, tuple)) and inner:
        return [x for x in inner if isinstance(x, BaseException)] or [e]
    return [e]
