# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause
import logging

import pytest

from pydiverse.common.util.structlog import setup_logging
from tests.fixtures.kinds import KIND_COMBINATIONS

# Setup


def pytest_addoption(parser):
    parser.addoption(
        "--fuzz-iterations",
        action="store",
        type=int,
        default=1000,
        help="number of random operations per fuzzing run",
    )


@pytest.fixture(params=list(KIND_COMBINATIONS), ids=list(KIND_COMBINATIONS))
def kinds(request):
    """(left kind factory, right kind factory) for every store combination"""
    return KIND_COMBINATIONS[request.param]


setup_logging(log_level=logging.INFO)
