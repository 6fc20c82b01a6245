"""Base service class for domain services."""


class Service:
    """Base class for domain services.

    Services here own in-memory state for a single session and are driven
    synchronously by discrete user actions.
    """

    pass
