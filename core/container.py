"""
Dependency Injection Container.
"""

from typing import Any, Callable, Dict, Optional, Type, TypeVar

from motor.motor_asyncio import AsyncIOMotorDatabase

from core.identity import FirebaseIdentityProvider, IIdentityProvider
from core.logger import logger

T = TypeVar("T")


class Container:
    """
    Simple Dependency Injection Container.
    """

    _instances: Dict[Type, Any] = {}
    _providers: Dict[Type, Callable[[], Any]] = {}

    @classmethod
    def register(cls, interface: Type[T], instance: Any) -> None:
        """Register a singleton instance for an interface."""
        cls._instances[interface] = instance

    @classmethod
    def register_factory(cls, interface: Type[T], factory: Callable[[], T]) -> None:
        """Register a factory for an interface."""
        cls._providers[interface] = factory

    @classmethod
    def resolve(cls, interface: Type[T]) -> T:
        """Resolve an interface to its implementation."""
        if interface in cls._instances:
            return cls._instances[interface]
        if interface in cls._providers:
            return cls._providers[interface]()
        raise KeyError(f"No provider registered for {interface.__name__}")

    @classmethod
    def clear(cls):
        """Clear all registrations (useful for testing)."""
        cls._instances.clear()
        cls._providers.clear()


def bootstrap_container(
    database: Optional[AsyncIOMotorDatabase] = None,
    identity_provider: Optional[IIdentityProvider] = None,
) -> None:
    """
    Initialize the dependency injection container.
    Register all dependencies here.

    Args:
        database: Database for every repository; None uses the global MongoDB connection
        identity_provider: Identity provider; None uses Firebase with settings credentials
    """
    from repositories import (
        ActivityRepository,
        CommentRepository,
        LabelRepository,
        ProfileRepository,
        ProjectRepository,
        TaskRepository,
    )
    from services import (
        ActivityService,
        AuthService,
        CommentService,
        LabelService,
        ProjectService,
        TaskService,
    )
    from services.interfaces import IAuthService

    Container.clear()

    provider = identity_provider or FirebaseIdentityProvider()
    Container.register(IIdentityProvider, provider)

    Container.register(TaskService, TaskService(TaskRepository(database)))
    Container.register(ProjectService, ProjectService(ProjectRepository(database)))
    Container.register(CommentService, CommentService(CommentRepository(database)))
    Container.register(LabelService, LabelService(LabelRepository(database)))
    Container.register(ActivityService, ActivityService(ActivityRepository(database)))
    Container.register(IAuthService, AuthService(provider, ProfileRepository(database)))

    logger.debug("Dependency container bootstrapped")
