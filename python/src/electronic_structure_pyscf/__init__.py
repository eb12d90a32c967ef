"""Hartree-Fock molecular integrals computed with PySCF.

Typical use::

    >>> from electronic_structure_pyscf import MolecularSpec, compute_molecular_data
    >>> spec = MolecularSpec([("H", (0.0, 0.0, 0.0)), ("H", (0.0, 0.0, 0.74))], "sto-3g")
    >>> molecular_data = compute_molecular_data(spec)
    >>> molecular_data.one_body_integrals.shape
    (2, 2)

"""

# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

__version__ = "0.1.0"

from electronic_structure_pyscf.algorithms import registry
from electronic_structure_pyscf.data import Atom, Geometry, MolecularData, MolecularSpec
from electronic_structure_pyscf.plugins import pyscf as _pyscf_plugin
from electronic_structure_pyscf.plugins.pyscf.conversion import to_pyscf
from electronic_structure_pyscf.plugins.pyscf.engine import EngineLoadError, PyscfEngine, default_engine, load_engine
from electronic_structure_pyscf.plugins.pyscf.integrals import one_electron_integrals, two_electron_integrals
from electronic_structure_pyscf.plugins.pyscf.molecular_data_builder import (
    PyscfMolecularDataBuilder,
    compute_molecular_data,
)
from electronic_structure_pyscf.plugins.pyscf.wrappers import (
    PyscfMol,
    PyscfScf,
    ScfMethod,
    ScfNotConvergedError,
    run_hartree_fock,
)

_pyscf_plugin.load()

__all__ = [
    "Atom",
    "EngineLoadError",
    "Geometry",
    "MolecularData",
    "MolecularSpec",
    "PyscfEngine",
    "PyscfMol",
    "PyscfMolecularDataBuilder",
    "PyscfScf",
    "ScfMethod",
    "ScfNotConvergedError",
    "compute_molecular_data",
    "default_engine",
    "load_engine",
    "one_electron_integrals",
    "registry",
    "run_hartree_fock",
    "to_pyscf",
    "two_electron_integrals",
]
