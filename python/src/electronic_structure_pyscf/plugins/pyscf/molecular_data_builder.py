"""PySCF-based molecular data builder.

This module computes the integrals of a molecular Hamiltonian with PySCF. It contains:

* :func:`compute_molecular_data`: the spec -> molecule -> SCF -> integrals pipeline
* :class:`PyscfMolecularDataBuilder`: the same pipeline as a registered algorithm
  named ``"pyscf"``, configured through its settings

>>> from electronic_structure_pyscf.algorithms import registry
>>> builder = registry.create("molecular_data_builder", "pyscf")
>>> molecular_data = builder.run(spec)
>>> molecular_data.two_body_integrals.shape
(2, 2, 2, 2)

The two-body integrals are indexed in chemists' order.
"""

# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

import logging

from electronic_structure_pyscf.algorithms.molecular_data_builder import MolecularDataBuilder
from electronic_structure_pyscf.data import MolecularData, MolecularSpec
from electronic_structure_pyscf.plugins.pyscf.engine import PyscfEngine
from electronic_structure_pyscf.plugins.pyscf.integrals import one_electron_integrals, two_electron_integrals
from electronic_structure_pyscf.plugins.pyscf.wrappers import PyscfMol, PyscfScf, run_hartree_fock

_LOGGER = logging.getLogger(__name__)

__all__ = ["PyscfMolecularDataBuilder", "compute_molecular_data"]


def compute_molecular_data(
    spec: MolecularSpec,
    engine: PyscfEngine | None = None,
    *,
    tolerance: float | None = None,
    max_iterations: int | None = None,
    require_convergence: bool = False,
) -> MolecularData:
    """Compute integrals and energies for the molecular Hamiltonian of ``spec`` using PySCF.

    Args:
        spec: The molecular specification.
        engine: Engine handle; the process default is used when omitted.
        tolerance: SCF energy convergence tolerance; PySCF's default when None.
        max_iterations: Maximum number of SCF iterations; PySCF's default when None.
        require_convergence: Raise if the SCF does not converge.

    Returns:
        MolecularData: The spec, nuclear repulsion energy and MO integrals. The two-body
        integrals are indexed in chemists' order.

    Raises:
        ScfNotConvergedError: If ``require_convergence`` is set and the SCF did not converge.

    """
    pymol = PyscfMol.from_spec(spec, engine)
    pyscf_scf = PyscfScf.from_mol(pymol)
    if tolerance is not None:
        pyscf_scf.scf.conv_tol = tolerance
    if max_iterations is not None:
        pyscf_scf.scf.max_cycle = max_iterations
    run_hartree_fock(pyscf_scf, require_convergence=require_convergence)
    one_e_ints = one_electron_integrals(pyscf_scf)
    two_e_ints = two_electron_integrals(pymol, pyscf_scf)
    nuclear_repulsion = pymol.mol.energy_nuc()
    _LOGGER.info(
        "Computed %s integrals for %d orbitals (nuclear repulsion %.10f)",
        pyscf_scf.method.constructor_name,
        one_e_ints.shape[0],
        nuclear_repulsion,
    )
    return MolecularData(spec, nuclear_repulsion, one_e_ints, two_e_ints)


class PyscfMolecularDataBuilder(MolecularDataBuilder):
    """Molecular data builder backed by PySCF.

    Closed-shell specifications are solved with RHF and open-shell ones with ROHF
    before the integrals are transformed to the molecular-orbital basis.

    Examples:
        >>> builder = PyscfMolecularDataBuilder()
        >>> builder.settings()["tolerance"] = 1e-10
        >>> molecular_data = builder.run(spec)

    """

    def __init__(self, engine: PyscfEngine | None = None):
        """Initialize the builder.

        Args:
            engine: Engine handle; the process default is used when omitted.

        """
        super().__init__()
        self._engine = engine

    def _run_impl(self, spec: MolecularSpec) -> MolecularData:
        return compute_molecular_data(
            spec,
            self._engine,
            tolerance=self._settings["tolerance"],
            max_iterations=self._settings["max_iterations"],
            require_convergence=self._settings["require_convergence"],
        )

    def name(self) -> str:
        """Return the name of the builder."""
        return "pyscf"
