"""Algorithms package.

Algorithm types are registered as factories in :mod:`.registry`; plugins add
concrete implementations when they are loaded.
"""

# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

from electronic_structure_pyscf.algorithms import registry
from electronic_structure_pyscf.algorithms.base import Algorithm, AlgorithmFactory
from electronic_structure_pyscf.algorithms.molecular_data_builder import (
    MolecularDataBuilder,
    MolecularDataBuilderFactory,
    MolecularDataBuilderSettings,
)
from electronic_structure_pyscf.algorithms.registry import (
    available,
    create,
    register,
    register_factory,
    show_settings,
    unregister,
    unregister_factory,
)

__all__ = [
    "Algorithm",
    "AlgorithmFactory",
    "MolecularDataBuilder",
    "MolecularDataBuilderFactory",
    "MolecularDataBuilderSettings",
    "available",
    "create",
    "register",
    "register_factory",
    "registry",
    "show_settings",
    "unregister",
    "unregister_factory",
]
