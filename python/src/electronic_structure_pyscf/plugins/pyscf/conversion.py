"""Utilities for converting molecular specifications into PySCF molecules.

The main functionality includes:

* Converting a :class:`Geometry` to the PySCF atom-list format.
* Converting a :class:`MolecularSpec` to a built PySCF ``Mole`` object.

Values are passed to PySCF unchanged; malformed geometries and unknown basis set
names are reported by PySCF itself when the molecule is built.

Examples:
    >>> from electronic_structure_pyscf.plugins.pyscf.conversion import to_pyscf
    >>> mol = to_pyscf(spec)
    >>> mol.nao

"""

# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

import logging
from typing import Any

from electronic_structure_pyscf.data import Geometry, MolecularSpec
from electronic_structure_pyscf.plugins.pyscf.engine import PyscfEngine, default_engine

_LOGGER = logging.getLogger(__name__)

__all__ = ["geometry_to_pyscf_atoms", "to_pyscf"]


def geometry_to_pyscf_atoms(geometry: Geometry) -> list[tuple[str, tuple[float, float, float]]]:
    """Convert a geometry to the PySCF atom-list format.

    Args:
        geometry: Ordered atoms with coordinates in Angstrom.

    Returns:
        list[tuple[str, tuple[float, float, float]]]: One ``(species, (x, y, z))`` entry per atom,
        in the order of the geometry.

    """
    return [(atom.species, atom.coords) for atom in geometry]


def to_pyscf(spec: MolecularSpec, engine: PyscfEngine | None = None) -> Any:
    """Convert ``spec`` to a PySCF ``Mole`` object and build it.

    Symmetry detection is always disabled so that orbitals come out in a plain,
    deterministic order rather than as symmetry-adapted irreps.

    Args:
        spec: The molecular specification.
        engine: Engine handle; the process default is used when omitted.

    Returns:
        pyscf.gto.Mole: The built molecule.

    """
    engine = engine or default_engine()
    _LOGGER.debug("Building %s molecule in basis '%s'", "".join(spec.geometry.symbols), spec.basis)
    mol = engine.gto.Mole(atom=geometry_to_pyscf_atoms(spec.geometry), basis=spec.basis)
    mol.spin = spec.spin
    mol.charge = spec.charge
    mol.symmetry = False
    mol.build()
    return mol
