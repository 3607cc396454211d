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

"""Precedence comparison of semantic versions.

Build metadata never takes part in a comparison: two versions that differ only
in their build are equal. Pre-release strings are compared in natural order,
so digit runs compare by value ("alpha.2" < "alpha.10").
"""

import re
from functools import cmp_to_key

from .errors import InvalidArgumentError
from .version import BaseVersion, Version

_DIGITS = re.compile(r"\d+")


def natural_compare(a: str, b: str) -> int:
    """Compare two strings, treating runs of digits as numbers.

    Equal digit runs of different lengths, such as "01" and "1", are ordered
    by their leading zeros, so only identical strings compare equal.
    """
    i = j = 0
    while i < len(a) and j < len(b):
        run_a = _DIGITS.match(a, i)
        run_b = _DIGITS.match(b, j)
        if run_a and run_b:
            num_a, num_b = int(run_a.group()), int(run_b.group())
            if num_a != num_b:
                return -1 if num_a < num_b else 1
            # Same value: the run with more leading zeros sorts first.
            len_a, len_b = len(run_a.group()), len(run_b.group())
            if len_a != len_b:
                return -1 if len_a > len_b else 1
            i, j = run_a.end(), run_b.end()
            continue

        if a[i] != b[j]:
            return -1 if a[i] < b[j] else 1
        i += 1
        j += 1

    remaining_a, remaining_b = len(a) - i, len(b) - j
    if remaining_a == remaining_b:
        return 0
    return -1 if remaining_a < remaining_b else 1


def cast(version: BaseVersion | str) -> BaseVersion:
    """Return ``version`` as a version object, parsing strings."""
    if isinstance(version, BaseVersion):
        return version
    if isinstance(version, str):
        return Version.parse(version)
    raise InvalidArgumentError(
        f"Expected a version or a version string, got {type(version).__name__}"
    )


def equal(v1: BaseVersion | str, v2: BaseVersion | str) -> bool:
    v1, v2 = cast(v1), cast(v2)
    return (v1.major, v1.minor, v1.patch, v1.prerelease) == (
        v2.major,
        v2.minor,
        v2.patch,
        v2.prerelease,
    )


def greater_than(v1: BaseVersion | str, v2: BaseVersion | str) -> bool:
    v1, v2 = cast(v1), cast(v2)

    if equal(v1, v2):
        return False

    for attr in ("major", "minor", "patch"):
        val1 = getattr(v1, attr)
        val2 = getattr(v2, attr)
        if val1 != val2:
            return val1 > val2

    # Two releases with the same numbers are equal, caught above.
    if not v1.is_prerelease and not v2.is_prerelease:
        return False

    # A release has higher precedence than any of its pre-releases.
    if v1.is_prerelease != v2.is_prerelease:
        return not v1.is_prerelease

    assert v1.prerelease is not None and v2.prerelease is not None
    return natural_compare(v1.prerelease, v2.prerelease) > 0


def greater_or_equal(v1: BaseVersion | str, v2: BaseVersion | str) -> bool:
    return equal(v1, v2) or greater_than(v1, v2)


def less_than(v1: BaseVersion | str, v2: BaseVersion | str) -> bool:
    return greater_than(v2, v1)


def less_or_equal(v1: BaseVersion | str, v2: BaseVersion | str) -> bool:
    return greater_or_equal(v2, v1)


def compare(v1: BaseVersion | str, v2: BaseVersion | str) -> int:
    """Three-way comparison returning -1, 0 or 1.

    Examples:
        >>> compare("1.0.0-alpha.2", "1.0.0-alpha.10")
        -1
        >>> compare("1.0.0+build.1", "1.0.0+build.2")
        0
    """
    if equal(v1, v2):
        return 0
    return 1 if greater_than(v1, v2) else -1


version_key = cmp_to_key(compare)
