# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import pytest

from robject.core import InitializerRegistry, TypeFactory, init_core


@pytest.fixture
def registry():
    """A private registry holding only the core initializers."""
    reg = InitializerRegistry()
    init_core(reg)
    return reg


@pytest.fixture
def factory(registry):
    return TypeFactory(registry)
