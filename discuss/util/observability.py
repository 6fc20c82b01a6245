"""Observability configuration using Logfire.

Domain services emit spans and structured events directly:

    import logfire

    with logfire.span("thread_store.add_reply", parent_id=parent_id):
        logfire.info("Comment created", comment_id=node.id, depth=node.depth)

Without ``configure_logfire`` those calls are no-ops apart from a one-time
warning, which is how unit tests run.
"""

import logfire

from discuss.config import Settings
from discuss.util.error import ConfigurationError


def resolve_send_to_logfire(settings: Settings) -> bool:
    """Decide whether telemetry leaves the process.

    Priority: explicit setting > token presence > default (False).

    Raises:
        ConfigurationError: If sending is forced on without a token
    """
    observability = settings.observability
    if observability.send_to_logfire is not None:
        if observability.send_to_logfire and not observability.logfire_token:
            raise ConfigurationError(
                "OBSERVABILITY__SEND_TO_LOGFIRE is set but no Logfire token is configured"
            )
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    - Development: console output only unless a token is provided
    - Production: cloud sending when a token is provided

    Args:
        settings: Application settings
    """
    send_to_logfire = resolve_send_to_logfire(settings)

    config_kwargs = {
        "service_name": "discuss",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        has_token=bool(settings.observability.logfire_token),
    )
