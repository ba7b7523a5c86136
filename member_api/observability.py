import logging

import logfire

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

logger = logging.getLogger("member_api")


def configure_observability(level: int = logging.INFO) -> None:
    """
    Set up logging and Logfire tracing for outbound member API calls.

    Only sends to Logfire when a token/credentials are available; otherwise
    spans are kept local so instrumentation still works.
    """
    logging.basicConfig(level=level, format=LOG_FORMAT)

    try:
        logfire.configure()
        logger.info("Logfire configured successfully")
    except Exception as e:
        logger.warning("Logfire not configured (running without observability): %s", e)
        logfire.configure(send_to_logfire=False)

    # Needs the logfire[httpx] extra
    logfire.instrument_httpx()
