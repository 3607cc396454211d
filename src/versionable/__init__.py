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

from .collection import Collection, PrefixPolicy
from .compare import (
    compare,
    equal,
    greater_or_equal,
    greater_than,
    less_or_equal,
    less_than,
    natural_compare,
    version_key,
)
from .errors import (
    InvalidArgumentError,
    InvalidIncrementError,
    NotFoundError,
    ParseError,
    VersionableError,
)
from .version import (
    BaseVersion,
    PrefixedVersion,
    UnprefixedVersion,
    Version,
    create,
    is_valid,
    parse,
)

__all__ = [
    "BaseVersion",
    "Collection",
    "InvalidArgumentError",
    "InvalidIncrementError",
    "NotFoundError",
    "ParseError",
    "PrefixPolicy",
    "PrefixedVersion",
    "UnprefixedVersion",
    "Version",
    "VersionableError",
    "compare",
    "create",
    "equal",
    "greater_or_equal",
    "greater_than",
    "is_valid",
    "less_or_equal",
    "less_than",
    "natural_compare",
    "parse",
    "version_key",
]
