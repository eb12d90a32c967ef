"""Molecular-orbital integrals from a converged PySCF SCF calculation."""

# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

import logging

import numpy as np

from electronic_structure_pyscf.plugins.pyscf.wrappers import PyscfMol, PyscfScf

_LOGGER = logging.getLogger(__name__)

__all__ = ["NO_PERMUTATION_SYMMETRY", "one_electron_integrals", "two_electron_integrals"]

# ``ao2mo.restore`` symmetry code for full, unpacked (n, n, n, n) storage
NO_PERMUTATION_SYMMETRY = 1


def one_electron_integrals(pyscf_scf: PyscfScf) -> np.ndarray:
    """Compute one-electron MO integrals.

    The AO core Hamiltonian is transformed with the converged orbital coefficients,
    ``C.T @ hcore @ C``.

    Args:
        pyscf_scf: A converged SCF calculation.

    Returns:
        numpy.ndarray: ``(n_orbitals, n_orbitals)`` one-electron integrals.

    """
    mo_coeff = pyscf_scf.scf.mo_coeff
    hcore = pyscf_scf.scf.get_hcore()
    return mo_coeff.T @ hcore @ mo_coeff


def two_electron_integrals(pymol: PyscfMol, pyscf_scf: PyscfScf) -> np.ndarray:
    """Compute two-electron MO integrals, indexed in chemists' order.

    PySCF returns the transformed integrals in permutation-compressed form; they
    are restored to full storage, so ``eri[i, j, k, l] = (ij|kl)``.

    Args:
        pymol: The molecule the SCF calculation was run on.
        pyscf_scf: A converged SCF calculation.

    Returns:
        numpy.ndarray: ``(n_orbitals,) * 4`` two-electron integrals.

    """
    mo_coeff = pyscf_scf.scf.mo_coeff
    ao2mo = pymol.engine.ao2mo
    two_electron_compressed = ao2mo.kernel(pymol.mol, mo_coeff)
    n_orbitals = mo_coeff.shape[1]
    _LOGGER.debug("Restoring %d-orbital two-electron integrals to full storage", n_orbitals)
    return ao2mo.restore(NO_PERMUTATION_SYMMETRY, two_electron_compressed, n_orbitals)
