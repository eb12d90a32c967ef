"""Compute the Hartree-Fock integrals of a hydrogen molecule."""

# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

from electronic_structure_pyscf import MolecularSpec, compute_molecular_data, load_engine

# Load PySCF once at startup; a missing installation fails here with EngineLoadError
engine = load_engine()

# Coordinates in Angstrom, as (element, x, y, z)
spec = MolecularSpec([("H", 0.0, 0.0, 0.0), ("H", 0.0, 0.0, 0.74)], "sto-3g")

molecular_data = compute_molecular_data(spec, engine)

print(molecular_data.get_summary())
print("One-electron integrals:")
print(molecular_data.one_body_integrals)
print(f"(00|11) = {molecular_data.two_body_integrals[0, 0, 1, 1]:.10f}")

# Open-shell molecules (non-zero spin) are solved with ROHF
cation = MolecularSpec(spec.geometry, "sto-3g", charge=1, spin=1)
cation_data = compute_molecular_data(cation, engine, require_convergence=True)
print(f"H2+ has {cation_data.n_orbitals} molecular orbitals")
