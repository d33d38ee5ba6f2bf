# --- Imports ---
import logging
import signal
import sys
import threading
import time

from .errors import FatalError
from .generator import OrderGenerator
from .settings import GeneratorSettings

logger = logging.getLogger("orders_generator")


def configure_logging(level="INFO"):
    """All diagnostics go to one stream."""
    logging.basicConfig(
        level=level,
        stream=sys.stdout,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def install_signal_handlers(stop_event):
    """SIGINT and SIGTERM stop the insert loop instead of killing the process."""
    def handle_signal(signum, frame):
        logger.info("received %s", signal.Signals(signum).name)
        stop_event.set()

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)


def main():
    """Entry point. Returns the process exit status."""
    try:
        settings = GeneratorSettings.from_env()
    except FatalError as e:
        configure_logging()
        logger.critical("%s", e)
        return 1

    configure_logging(settings.log_level)

    stop_event = threading.Event()
    install_signal_handlers(stop_event)

    # Give the database container time to start.
    time.sleep(settings.startup_delay)

    generator = OrderGenerator(settings, stop_event=stop_event)
    try:
        generator.run()
    except FatalError as e:
        logger.critical("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
