# *******************************************************************************
# Copyright (c) 2025 Contributors to the Eclipse Foundation
#
# See the NOTICE file(s) distributed with this work for additional
# information regarding copyright ownership.
#
# This program and the accompanying materials are made available under the
# terms of the Apache License Version 2.0 which is available at
# https://www.apache.org/licenses/LICENSE-2.0
#
# SPDX-License-Identifier: Apache-2.0
# *******************************************************************************

"""Predicate factories for filtering a set of versions against a bound.

    >>> Collection(["1.0.0", "1.5.0", "2.0.0"]).filter(gte("1.5")).to_json()
    ['1.5.0', '2.0.0']
"""

from collections.abc import Callable, Hashable

from .compare import (
    cast,
    equal,
    greater_or_equal,
    greater_than,
    less_or_equal,
    less_than,
)
from .version import BaseVersion

Predicate = Callable[..., bool]


def _make(
    check: Callable[[BaseVersion | str, BaseVersion | str], bool],
    bound: BaseVersion | str,
) -> Predicate:
    bound = cast(bound)

    def predicate(candidate: BaseVersion | str, key: Hashable = None) -> bool:
        return check(candidate, bound)

    return predicate


def eq(bound: BaseVersion | str) -> Predicate:
    """Keep versions equal to ``bound``."""
    return _make(equal, bound)


def gt(bound: BaseVersion | str) -> Predicate:
    """Keep versions greater than ``bound``."""
    return _make(greater_than, bound)


def gte(bound: BaseVersion | str) -> Predicate:
    """Keep versions greater than or equal to ``bound``."""
    return _make(greater_or_equal, bound)


def lt(bound: BaseVersion | str) -> Predicate:
    """Keep versions less than ``bound``."""
    return _make(less_than, bound)


def lte(bound: BaseVersion | str) -> Predicate:
    """Keep versions less than or equal to ``bound``."""
    return _make(less_or_equal, bound)


BY_NAME: dict[str, Callable[[BaseVersion | str], Predicate]] = {
    "eq": eq,
    "gt": gt,
    "gte": gte,
    "lt": lt,
    "lte": lte,
}
