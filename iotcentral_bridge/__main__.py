# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
import logging
import signal
import threading
from azure.iot.device import IoTHubModuleClient
from iotcentral_bridge import IoTCentralBridgeModule
from iotcentral_bridge import constant

logger = logging.getLogger("iotcentral_bridge")

# Event indicating module stop
stop_event = threading.Event()


def configure_logging(level=logging.INFO):
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-5s (%(threadName)s) %(filename)s:%(funcName)s():%(message)s",
    )
    # The device SDK is chatty at INFO level
    logging.getLogger("azure.iot.device").setLevel(logging.WARNING)


def create_module():
    # Inputs/Outputs are only supported in the context of Azure IoT Edge and module client
    client = IoTHubModuleClient.create_from_edge_environment()
    return IoTCentralBridgeModule(client)


def main():
    configure_logging()
    module = create_module()

    def module_termination_handler(signal, frame):
        logger.info("IoT Central Bridge module stopped by Edge")
        stop_event.set()

    # Attach a handler to do cleanup when module is terminated by Edge
    signal.signal(signal.SIGTERM, module_termination_handler)

    try:
        module.start()
        logger.info("IoT Central Bridge module {} running".format(constant.VERSION))
        while not stop_event.is_set():
            stop_event.wait(100)
    except KeyboardInterrupt:
        logger.info("IoT Central Bridge module stopped by user")
    except Exception as e:
        logger.error("Unexpected error %s " % e)
        raise
    finally:
        module.shutdown()


if __name__ == "__main__":
    main()
