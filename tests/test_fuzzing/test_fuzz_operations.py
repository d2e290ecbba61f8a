from __future__ import annotations

import itertools

import numpy as np
import pytest
from tqdm import tqdm

from tests.fuzzing.operations import OperationFuzzer, ReferenceBiMap
from tests.util import assert_bimap_equal, make_bimap


@pytest.mark.fuzzing
@pytest.mark.parametrize(
    "key_space, seed",
    [
        (4, 0),
        (16, 1),
        (64, 2),
        (256, 3),
    ],
)
def test_against_reference(kinds, key_space: int, seed: int, request):
    num_ops = request.config.getoption("--fuzz-iterations")
    rng = np.random.default_rng(seed)

    bimap = make_bimap(kinds)
    reference = ReferenceBiMap()
    fuzzer = OperationFuzzer(rng, key_space)

    for op_i, (name, args) in tqdm(
        enumerate(itertools.islice(fuzzer.generate_operations(), num_ops)),
        desc=f"Fuzzing ({key_space=})",
        total=num_ops,
    ):
        try:
            assert getattr(bimap, name)(*args) == getattr(reference, name)(*args)
            assert len(bimap) == len(reference)
            bimap.check_invariants()
        except AssertionError:
            tqdm.write("-----------")
            tqdm.write(f"OP I: {op_i}")
            tqdm.write(f"OPERATION: {name}{args!r}")
            tqdm.write(f"BIMAP: {bimap!r}")
            tqdm.write("-----------")
            raise

    assert_bimap_equal(bimap, reference.fwd)
