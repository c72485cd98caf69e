"""Base service class for domain services."""


class Service:
    """Base class for domain services.

    Services hold the rules that span more than one entity; entities
    themselves only validate their own fields.
    """

    pass
