"""Create molecular data builders through the algorithm registry."""

# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

from electronic_structure_pyscf.algorithms import available, create, show_settings
from electronic_structure_pyscf.data import MolecularSpec

spec = MolecularSpec([("Li", (0.0, 0.0, 0.0)), ("H", (0.0, 0.0, 1.595))], "sto-3g")

print("Available molecular data builders:", available("molecular_data_builder"))
for name, type_name, default in show_settings("molecular_data_builder", "pyscf"):
    print(f"  {name} ({type_name}) = {default}")

# Settings can be passed to create() or set before the first run
builder = create("molecular_data_builder", "pyscf", max_iterations=100)
builder.settings().set("tolerance", 1e-10)
print(f"Set max_iterations to: {builder.settings().get('max_iterations')}")

molecular_data = builder.run(spec)
print(f"LiH: {molecular_data.n_orbitals} orbitals, E_nuc = {molecular_data.nuclear_repulsion:.10f}")
