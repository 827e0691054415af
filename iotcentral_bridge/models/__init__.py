"""Azure IoT Central Bridge Models

This package provides the payloads exchanged with the IoT Central device bridge
and the records sent on the module's exception output.
"""

from .envelope import BridgeEnvelope, build_envelope  # noqa: F401
from .error_record import ErrorRecord  # noqa: F401
