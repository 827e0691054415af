""" Azure IoT Central Bridge Module

This library provides an Azure IoT Edge module relaying messages from the Edge hub
to the Azure IoT Central device bridge.
"""

from .bridge_module import IoTCentralBridgeModule  # noqa: F401
from .config import BridgeConfig, BridgeSettings  # noqa: F401
from .error_reporter import ErrorReporter  # noqa: F401
from .forwarder import Forwarder  # noqa: F401
from .http_transport import HTTPTransport  # noqa: F401
from .models import BridgeEnvelope, ErrorRecord, build_envelope  # noqa: F401
from . import exceptions  # noqa: F401
from . import models  # noqa: F401
