"""Dependency injection module."""

from typing import Type

from brew.util.di.application import ProdApplicationProvider
from brew.util.di.base import Component, ProviderBase
from brew.util.di.core import ProdConfigProvider
from brew.util.di.domain import ProdDomainProvider
from brew.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider
from brew.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get the provider class to instantiate for a base.

    A base without subclasses is concrete and used as-is. A base with
    subclasses is a mockable component; the subclass is chosen by its
    ``__is_mock__`` flag.

    Args:
        base: Provider base class
        use_mock: Whether to use the mock implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        DependencyInjectionError: If the requested implementation is missing
    """
    subclasses = base.__subclasses__()

    if not subclasses:
        return base

    impl = next(
        (c for c in subclasses if getattr(c, "__is_mock__", False) == use_mock),
        None,
    )

    if not impl:
        kind = "mock" if use_mock else "production"
        component_name = getattr(base, "__mock_component__", base.__name__)
        raise DependencyInjectionError(
            f"No {kind} implementation for {component_name}"
        )

    return impl


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
