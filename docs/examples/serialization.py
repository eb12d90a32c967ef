"""Serialization examples for molecular specifications and integral records."""

# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

import os
import shutil
import tempfile

import numpy as np
from electronic_structure_pyscf import MolecularData, MolecularSpec

spec = MolecularSpec([("H", (0.0, 0.0, 0.0)), ("H", (0.0, 0.0, 0.74))], "sto-3g")

# Serialize to JSON object
json_data = spec.to_json()
print("Serialized to JSON:", type(json_data))
print(f"Deserialized spec has {len(MolecularSpec.from_json(json_data).geometry)} atoms")

# A hand-built record; normally produced by the PySCF molecular data builder
molecular_data = MolecularData(spec, 0.7151043391, np.diag([-1.25, -0.47]), np.zeros((2, 2, 2, 2)))

tmpdir = tempfile.mkdtemp()
try:
    # File names must be of the form <name>.<data_type>.<extension>
    json_file = os.path.join(tmpdir, "h2.molecular_spec.json")
    spec.to_json_file(json_file)
    print(f"Saved to {json_file}")
    print(f"Loaded spec from file: {MolecularSpec.from_json_file(json_file) == spec}")

    hdf5_file = os.path.join(tmpdir, "h2.molecular_data.h5")
    molecular_data.to_hdf5_file(hdf5_file)
    loaded = MolecularData.from_hdf5_file(hdf5_file)
    print(f"Loaded record from HDF5: {loaded.n_orbitals} orbitals, E_nuc = {loaded.nuclear_repulsion}")
finally:
    shutil.rmtree(tmpdir)
