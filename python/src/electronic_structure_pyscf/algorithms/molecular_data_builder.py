"""Molecular data builder abstractions.

A molecular data builder turns a :class:`MolecularSpec` into a
:class:`MolecularData` record by running a mean-field calculation and
extracting the molecular-orbital integrals.
"""

# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING

from electronic_structure_pyscf.algorithms.base import Algorithm, AlgorithmFactory
from electronic_structure_pyscf.data import Settings

if TYPE_CHECKING:
    from electronic_structure_pyscf.data import MolecularData, MolecularSpec

__all__ = ["MolecularDataBuilder", "MolecularDataBuilderFactory", "MolecularDataBuilderSettings"]


class MolecularDataBuilderSettings(Settings):
    """Settings common to molecular data builders.

    - tolerance (double, default=1e-9): SCF energy convergence tolerance.
    - max_iterations (int, default=50): Maximum number of SCF iterations.
    - require_convergence (bool, default=False): Raise if the SCF does not converge.

    """

    def __init__(self):
        """Initialize the settings with default values."""
        super().__init__()
        self._set_default("tolerance", "double", 1e-9)
        self._set_default("max_iterations", "int", 50)
        self._set_default("require_convergence", "bool", False)


class MolecularDataBuilder(Algorithm):
    """Abstract base class for building :class:`MolecularData` from a :class:`MolecularSpec`."""

    def __init__(self):
        """Initialize the builder with default settings."""
        super().__init__()
        self._settings = MolecularDataBuilderSettings()

    def type_name(self) -> str:
        """Return ``molecular_data_builder`` as the algorithm type name."""
        return "molecular_data_builder"

    @abstractmethod
    def _run_impl(self, spec: MolecularSpec) -> MolecularData:
        """Compute the molecular data for ``spec``.

        Args:
            spec (MolecularSpec): The molecular specification.

        Returns:
            MolecularData: Nuclear repulsion energy and MO integrals.

        """


class MolecularDataBuilderFactory(AlgorithmFactory):
    """Factory class for creating MolecularDataBuilder instances."""

    def algorithm_type_name(self) -> str:
        """Return ``molecular_data_builder`` as the algorithm type name."""
        return "molecular_data_builder"

    def default_algorithm_name(self) -> str:
        """Return ``pyscf`` as the default algorithm name."""
        return "pyscf"
