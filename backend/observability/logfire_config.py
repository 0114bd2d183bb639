"""Logfire observability initialization and instrumentation."""

import logging

import logfire

logger = logging.getLogger(__name__)


class LogfireConfig:
    """Configures Logfire once per process."""

    _initialized = False

    @classmethod
    def initialize(
        cls,
        token: str,
        environment: str = "development",
        log_level: str = "INFO",
    ) -> bool:
        """
        Initialize Logfire and bridge application logging into it.

        Instruments:
        - HTTPX clients (bet catalog calls)
        - Python logging (root logger handler)

        Args:
            token: Logfire write token; empty disables cloud tracking
            environment: Deployment environment tag
            log_level: Root logging level

        Returns:
            True when Logfire was configured, False otherwise.
        """
        logging.basicConfig(level=log_level.upper())

        if cls._initialized:
            return True

        if not token:
            logger.warning("Logfire token not set - observability disabled")
            logfire.configure(send_to_logfire=False, console=False)
            return False

        logfire.configure(
            token=token,
            service_name="plays-service",
            environment=environment,
        )
        logfire.instrument_httpx()

        root_logger = logging.getLogger()
        root_logger.addHandler(logfire.LogfireLoggingHandler())

        cls._initialized = True
        logger.info("Logfire tracking initialized")
        return True
