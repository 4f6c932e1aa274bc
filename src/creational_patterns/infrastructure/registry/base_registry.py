"""Base registry - name to concrete class lookup for pattern variants.

Each registry subclass is a thread-safe singleton. Variants are registered
under a primary name plus optional aliases; lookups resolve aliases first.
"""
import threading
from typing import Dict, List, Optional, Type

from creational_patterns.domain.core.exceptions import ConfigurationError, UnknownVariantError
from creational_patterns.infrastructure.exceptions import RegistrationError
from creational_patterns.infrastructure.logging.logger import get_logger


class VariantRegistration:
    """Container for variant registration information."""

    def __init__(self, name: str, variant_class: Type, aliases: Optional[List[str]] = None):
        self.name = name
        self.variant_class = variant_class
        self.aliases = list(aliases or [])

    def __repr__(self) -> str:
        return f"VariantRegistration(name='{self.name}', class={self.variant_class.__name__})"


class BaseVariantRegistry:
    """
    Registry of concrete variants for one pattern role.

    Subclasses set ``kind`` (used in error messages) and ``base_class``
    (every registered class must derive from it).
    """

    kind: str = "variant"
    base_class: Type = object

    _instances: Dict[type, "BaseVariantRegistry"] = {}
    _lock = threading.Lock()

    def __new__(cls) -> "BaseVariantRegistry":
        """Ensure one instance per registry class."""
        if cls not in cls._instances:
            with cls._lock:
                if cls not in cls._instances:
                    cls._instances[cls] = super().__new__(cls)
        return cls._instances[cls]

    def __init__(self):
        if hasattr(self, "_initialized"):
            return

        self._registrations: Dict[str, VariantRegistration] = {}
        self._aliases: Dict[str, str] = {}
        self._registry_lock = threading.Lock()
        self.logger = get_logger(__name__)
        self._initialized = True

    def register(self, name: str, variant_class: Type, aliases: Optional[List[str]] = None) -> None:
        """
        Register a concrete variant.

        Args:
            name: Primary variant name (e.g., '1')
            variant_class: Concrete class implementing ``base_class``
            aliases: Optional alternative names (e.g., ['first'])

        Raises:
            ConfigurationError: If the name or an alias is taken, or the class
                does not implement the registry's base class
        """
        if not (isinstance(variant_class, type) and issubclass(variant_class, self.base_class)):
            raise ConfigurationError(
                f"{variant_class!r} is not a {self.base_class.__name__} and cannot be registered as a {self.kind}"
            )

        aliases = list(aliases or [])
        with self._registry_lock:
            for candidate in [name] + aliases:
                if candidate in self._registrations or candidate in self._aliases:
                    raise ConfigurationError(f"{self.kind.capitalize()} variant '{candidate}' is already registered")

            self._registrations[name] = VariantRegistration(name, variant_class, aliases)
            for alias in aliases:
                self._aliases[alias] = name

        self.logger.debug("Registered variant", kind=self.kind, name=name, variant=variant_class.__name__)

    def unregister(self, name: str) -> bool:
        """Remove a variant and its aliases. Returns False when it was not registered."""
        with self._registry_lock:
            registration = self._registrations.pop(name, None)
            if registration is None:
                return False
            for alias in registration.aliases:
                self._aliases.pop(alias, None)
        return True

    def resolve(self, name: str) -> VariantRegistration:
        """
        Resolve a name or alias to its registration.

        Raises:
            UnknownVariantError: If nothing is registered under the name
        """
        with self._registry_lock:
            actual_name = self._aliases.get(name, name)
            registration = self._registrations.get(actual_name)
        if registration is None:
            raise UnknownVariantError(self.kind, name, self.list_variants())
        return registration

    def get_class(self, name: str) -> Type:
        return self.resolve(name).variant_class

    def create(self, name: str):
        """
        Instantiate the variant registered under ``name``.

        Raises:
            UnknownVariantError: If the variant is not registered
            RegistrationError: If the registered class fails to instantiate
        """
        registration = self.resolve(name)
        try:
            return registration.variant_class()
        except Exception as e:
            self.logger.error("Failed to create variant", kind=self.kind, name=name, error=str(e))
            raise RegistrationError(f"Failed to create {self.kind} '{name}': {e}", details={"name": name}) from e

    def list_variants(self) -> List[str]:
        """List primary names of all registered variants."""
        with self._registry_lock:
            return sorted(self._registrations.keys())

    def list_aliases(self) -> Dict[str, str]:
        with self._registry_lock:
            return dict(self._aliases)

    def is_registered(self, name: str) -> bool:
        with self._registry_lock:
            return name in self._registrations or name in self._aliases

    def clear_registrations(self) -> None:
        """Clear all registrations (primarily for testing)."""
        with self._registry_lock:
            self._registrations.clear()
            self._aliases.clear()


def ensure_registered(registry: BaseVariantRegistry, name: str, variant_class: Type,
                      aliases: Optional[List[str]] = None) -> None:
    """Register a variant unless its name is already present."""
    if not registry.is_registered(name):
        registry.register(name, variant_class, aliases)

