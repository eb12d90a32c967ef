"""Data module for molecular specifications, Hamiltonian integral records and settings.

Exposed classes are:

- ``Atom``: A single atom with element label and coordinates.
- ``DataClass``: Base immutable data class with JSON/HDF5 serialization.
- ``Geometry``: Ordered collection of atoms.
- ``MolecularData``: Nuclear repulsion energy and one-/two-electron MO integrals.
- ``MolecularSpec``: Geometry, basis set, charge and spin of a molecular system.
- ``Settings``: Typed, lockable configuration settings.

Exposed exceptions are

- ``SettingNotFound`` / ``SettingNotFoundError``: Raised when a requested setting is not found.
- ``SettingTypeMismatch`` / ``SettingTypeMismatchError``: Raised when a setting value has an incorrect type.
- ``SettingsAreLocked`` / ``SettingsAreLockedError``: Raised when modifying locked settings.

"""

# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

from electronic_structure_pyscf.data.base import DataClass
from electronic_structure_pyscf.data.molecular_data import MolecularData
from electronic_structure_pyscf.data.molecular_spec import Atom, Geometry, MolecularSpec
from electronic_structure_pyscf.data.settings import (
    SettingNotFound,
    Settings,
    SettingsAreLocked,
    SettingTypeMismatch,
)

# Give Users the option to use "Error" suffix for exceptions if they prefer
SettingNotFoundError = SettingNotFound
SettingTypeMismatchError = SettingTypeMismatch
SettingsAreLockedError = SettingsAreLocked

__all__ = [
    "Atom",
    "DataClass",
    "Geometry",
    "MolecularData",
    "MolecularSpec",
    "SettingNotFound",
    "SettingNotFoundError",
    "SettingTypeMismatch",
    "SettingTypeMismatchError",
    "Settings",
    "SettingsAreLocked",
    "SettingsAreLockedError",
]
