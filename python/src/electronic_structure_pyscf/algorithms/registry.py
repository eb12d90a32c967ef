"""Algorithms registry.

This module contains a registration mechanism for algorithm types (factories)
and their implementations. Plugins register their implementations when they are
loaded, and users can add and remove custom algorithms at runtime.
"""

# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

from collections.abc import Callable
from typing import Any

from electronic_structure_pyscf.algorithms.base import Algorithm, AlgorithmFactory
from electronic_structure_pyscf.algorithms.molecular_data_builder import MolecularDataBuilderFactory

__all__ = [
    "available",
    "create",
    "register",
    "register_factory",
    "show_settings",
    "unregister",
    "unregister_factory",
]

_factories: list[AlgorithmFactory] = []


def _find_factory(algorithm_type: str) -> AlgorithmFactory:
    for factory in _factories:
        if factory.algorithm_type_name() == algorithm_type:
            return factory
    available_types = [factory.algorithm_type_name() for factory in _factories]
    raise KeyError(
        f"Algorithm type '{algorithm_type}' is not registered. Available algorithm types: {', '.join(available_types)}. "
        "Available algorithm types are influenced by loaded plugins and registered custom algorithms."
    )


def create(algorithm_type: str, algorithm_name: str | None = None, **kwargs) -> Algorithm:
    """Create an algorithm instance by type and name.

    Args:
        algorithm_type (str): The type of algorithm to create (e.g., "molecular_data_builder").
        algorithm_name (Optional[str]): The specific implementation to create. If None or
            empty string, creates the default algorithm for that type.
        **kwargs: Settings to apply to the new instance via ``settings().update()``.

    Returns:
        Algorithm: The created algorithm instance.

    Raises:
        KeyError: If the algorithm type or name is not registered.

    Examples:
        >>> from electronic_structure_pyscf.algorithms import registry
        >>> builder = registry.create("molecular_data_builder", "pyscf", max_iterations=100)

    """
    factory = _find_factory(algorithm_type)
    try:
        instance = factory.create(algorithm_name)
    except RuntimeError as e:
        available_algorithms = factory.available()
        if not available_algorithms:
            raise KeyError(
                f"No algorithms available for type '{algorithm_type}'. "
                "This may indicate that no plugins providing this algorithm type are loaded or registered."
            ) from e
        raise KeyError(
            f"Algorithm '{algorithm_name}' not found for type '{algorithm_type}'. "
            f"Available algorithms for this type: {', '.join(available_algorithms)}."
        ) from e
    instance.settings().update(kwargs or {})
    return instance


def show_settings(algorithm_type: str, algorithm_name: str | None = None) -> list[tuple[str, str, Any]]:
    """Show the settings schema for a specific algorithm.

    Returns:
        list[tuple[str, str, Any]]: ``(name, type name, default value)`` for every setting.

    Raises:
        KeyError: If the algorithm type is not registered.

    """
    settings = create(algorithm_type, algorithm_name).settings()
    return [(name, settings.get_type_name(name), settings.get(name)) for name in settings.keys()]


def register(generator: Callable[[], Algorithm]) -> None:
    """Register an algorithm implementation.

    The algorithm's type is detected from the instance returned by ``generator``.

    Args:
        generator (Callable[[], Algorithm]): A callable returning a new instance of the algorithm.

    Raises:
        KeyError: If the algorithm's type is not a registered algorithm type.

    """
    algorithm_type = generator().type_name()
    _find_factory(algorithm_type).register_instance(generator)


def available(algorithm_type: str | None = None) -> dict[str, list[str]] | list[str]:
    """List all available algorithms by type.

    Args:
        algorithm_type (Optional[str]): If provided, only list algorithms of this type.

    Returns:
        dict[str, list[str]] | list[str]: A mapping of every type to its algorithm names, or the
        algorithm names of ``algorithm_type`` (empty if the type is unknown).

    """
    if algorithm_type is None:
        return {factory.algorithm_type_name(): factory.available() for factory in _factories}
    for factory in _factories:
        if factory.algorithm_type_name() == algorithm_type:
            return factory.available()
    return []


def unregister(algorithm_type: str, algorithm_name: str) -> None:
    """Unregister an algorithm implementation.

    Raises:
        KeyError: If the specified algorithm type is not registered.

    """
    _find_factory(algorithm_type).unregister_instance(algorithm_name)


def register_factory(factory: AlgorithmFactory) -> None:
    """Register a new algorithm factory, adding an entire algorithm type.

    Raises:
        ValueError: If a factory with the same algorithm type name is already registered.

    """
    algorithm_type = factory.algorithm_type_name()
    for existing_factory in _factories:
        if existing_factory.algorithm_type_name() == algorithm_type:
            raise ValueError(f"Factory for algorithm type '{algorithm_type}' is already registered.")
    _factories.append(factory)


def unregister_factory(algorithm_type: str) -> None:
    """Unregister an existing algorithm factory.

    Raises:
        KeyError: If no factory with the specified algorithm type name is found.

    """
    for existing_factory in _factories:
        if existing_factory.algorithm_type_name() == algorithm_type:
            _factories.remove(existing_factory)
            return
    raise KeyError(f"Factory for algorithm type '{algorithm_type}' is not registered.")


register_factory(MolecularDataBuilderFactory())
