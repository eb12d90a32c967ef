"""Algorithms base classes.

This module defines the base classes for algorithms and algorithm factories that
can be registered and created through :mod:`electronic_structure_pyscf.algorithms.registry`.
"""

# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

from abc import ABC, abstractmethod
from collections.abc import Callable

from electronic_structure_pyscf.data import Settings


class Algorithm(ABC):
    """Base class for algorithms.

    In derived classes, ensure to call super().__init__() to properly
    initialize the base class and override the _settings attribute if
    custom settings are needed.

    Examples:
        >>> from electronic_structure_pyscf.algorithms import registry
        >>> builder = registry.create("molecular_data_builder", "pyscf")
        >>> builder.settings().set("max_iterations", 100)
        >>> molecular_data = builder.run(spec)

    """

    def __init__(self):
        """Initialize the base algorithm."""
        super().__init__()
        self._settings = Settings()

    @abstractmethod
    def _run_impl(self, *args, **kwargs):
        """The implementation of the algorithm.

        Derived classes must implement this method.
        """

    def run(self, *args, **kwargs):
        """Run the algorithm with the provided arguments.

        The settings are locked before the implementation runs.
        """
        self._settings.lock()
        return self._run_impl(*args, **kwargs)

    def settings(self) -> Settings:
        """Get the settings for this algorithm."""
        return self._settings

    @abstractmethod
    def type_name(self) -> str:
        """Return the name of the algorithm type, e.g. ``"molecular_data_builder"``."""

    @abstractmethod
    def name(self) -> str:
        """Return the main name of the algorithm, e.g. ``"pyscf"``."""

    def aliases(self) -> list[str]:
        """Return all aliases of the algorithm's name, including the main name."""
        return [self.name()]


class AlgorithmFactory(ABC):
    """Base class for algorithm factories.

    Algorithm factories create and manage algorithm instances of a specific type.
    Each factory maintains a registry of implementations that can be instantiated
    by name or alias.

    Note:
        This class is typically not used directly. Use the higher-level registry
        functions in :mod:`electronic_structure_pyscf.algorithms.registry` instead.

    """

    def __init__(self) -> None:
        """Initialize the algorithm factory with an empty registry."""
        self._registry: dict[str, Callable[[], Algorithm]] = {}
        self._aliases: dict[str, str] = {}

    @abstractmethod
    def algorithm_type_name(self) -> str:
        """Return the type name of algorithms this factory creates."""

    @abstractmethod
    def default_algorithm_name(self) -> str:
        """Return the name of the default algorithm for this type."""

    def create(self, name: str | None = None) -> Algorithm:
        """Create an algorithm instance by name or alias.

        Args:
            name (Optional[str]): The name of the algorithm to create.
                If None or empty, creates the default algorithm.

        Returns:
            Algorithm: A new instance of the requested algorithm.

        Raises:
            RuntimeError: If the requested algorithm name is not registered in this factory.

        """
        if not name:
            name = self.default_algorithm_name()
        name = self._aliases.get(name, name)
        if name not in self._registry:
            raise RuntimeError(
                f"Algorithm '{name}' of type '{self.algorithm_type_name()}' is not registered. "
                f"Available algorithms: {list(self._registry.keys())}"
            )
        return self._registry[name]()

    def register_instance(self, generator: Callable[[], Algorithm]) -> None:
        """Register a new algorithm implementation in this factory.

        Args:
            generator (Callable[[], Algorithm]): A callable that returns a new
                instance of the algorithm. The instance's name() is used as the
                registration key and its aliases() are resolved to it.

        """
        instance = generator()
        self._registry[instance.name()] = generator
        for alias in instance.aliases():
            self._aliases[alias] = instance.name()

    def unregister_instance(self, name: str) -> bool:
        """Remove an algorithm implementation from this factory.

        Returns:
            bool: True if the algorithm was found and removed, False otherwise.

        """
        if self._registry.pop(name, None) is None:
            return False
        self._aliases = {alias: target for alias, target in self._aliases.items() if target != name}
        return True

    def available(self) -> list[str]:
        """Get a list of all available algorithm names in this factory."""
        return list(self._registry.keys())

    def has(self, key: str) -> bool:
        """Check if an algorithm name or alias is registered in this factory."""
        return self._aliases.get(key, key) in self._registry

    def clear(self) -> None:
        """Remove all registered algorithms from this factory."""
        self._registry.clear()
        self._aliases.clear()
