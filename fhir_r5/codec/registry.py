"""
Resource type registry for ``resourceType`` dispatch.

Maps the JSON ``resourceType`` discriminator to the resource class. All
classes of the ``fhir_r5.resources`` package are registered on first use;
applications may register further ``Resource`` subclasses themselves.
"""

import importlib
import pkgutil
import threading
from collections.abc import Callable
from typing import Any

from fhir_r5.config.logging import get_logger
from fhir_r5.models.resource import Resource, is_concrete
from fhir_r5.validation import validate_resource_type

logger = get_logger(__name__)

RESOURCES_PACKAGE = "fhir_r5.resources"


class ResourceRegistry:
    """
    Registry of concrete resource classes keyed by ``resourceType``.

    The built-in catalogue is loaded lazily, the first time a lookup
    happens, so importing the models never imports every resource module.
    The first load is serialized; lookups from several threads never see a
    half-loaded catalogue.
    """

    _resources: dict[str, type[Resource]] = {}
    _loaded: bool = False
    _load_lock = threading.Lock()

    @classmethod
    def register(cls, resource_cls: type[Resource]) -> type[Resource]:
        """
        Register a resource class under its ``resource_type``.

        Usable as a class decorator.

        Raises:
            TypeError: If the class is not a concrete Resource subclass
            ValueError: If its resource_type is not a valid resource type name
        """
        if not is_concrete(resource_cls):
            raise TypeError(f"{resource_cls!r} is not a concrete Resource subclass")
        validate_resource_type(resource_cls.resource_type)
        cls._resources[resource_cls.resource_type] = resource_cls
        logger.debug("Registered resource type", resource_type=resource_cls.resource_type)
        return resource_cls

    @classmethod
    def auto_register(cls, package: str = RESOURCES_PACKAGE) -> int:
        """
        Register every concrete resource class found in a package.

        Args:
            package: Dotted name of the package whose modules are scanned

        Returns:
            Number of resource classes registered
        """
        module = importlib.import_module(package)
        count = 0
        for info in pkgutil.iter_modules(module.__path__):
            submodule = importlib.import_module(f"{package}.{info.name}")
            for value in vars(submodule).values():
                if is_concrete(value) and value.__module__ == submodule.__name__:
                    cls.register(value)
                    count += 1

        logger.debug("Auto-registered resource types", count=count, package=package)
        return count

    @classmethod
    def _ensure_loaded(cls) -> None:
        if cls._loaded:
            return
        with cls._load_lock:
            if not cls._loaded:
                cls.auto_register()
                cls._loaded = True

    @classmethod
    def get(cls, name: str) -> type[Resource] | None:
        """Get the class registered for a ``resourceType``, or None."""
        cls._ensure_loaded()
        return cls._resources.get(name)

    @classmethod
    def has(cls, name: str) -> bool:
        """Check if a ``resourceType`` is registered."""
        return cls.get(name) is not None

    @classmethod
    def parser_for(cls, name: str) -> Callable[..., Resource] | None:
        """
        Get a parser for one resource type.

        The returned callable takes an already-decoded JSON object (and an
        optional ``strict`` keyword) and returns an instance of that type.
        """
        resource_cls = cls.get(name)
        if resource_cls is None:
            return None

        def parse(obj: dict[str, Any], *, strict: bool | None = None) -> Resource:
            from fhir_r5.codec.api import resource_from_dict_of

            return resource_from_dict_of(resource_cls, obj, strict=strict)

        return parse

    @classmethod
    def list_registered(cls) -> list[str]:
        """List all registered resource types."""
        cls._ensure_loaded()
        return sorted(cls._resources)

    @classmethod
    def clear(cls) -> None:
        """Clear all registered types (useful for testing); the catalogue reloads on next lookup."""
        with cls._load_lock:
            cls._resources.clear()
            cls._loaded = False

    @classmethod
    def get_resource_count(cls) -> int:
        """Get the number of registered resource types."""
        cls._ensure_loaded()
        return len(cls._resources)
