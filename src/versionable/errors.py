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


class VersionableError(Exception):
    """Base class for all errors raised by this package."""


class InvalidArgumentError(VersionableError, ValueError):
    """A value that is not a version was given where a version was required."""


class ParseError(InvalidArgumentError):
    """Raised when a string is not a valid semantic version."""

    def __init__(self, version: object, message: str = ""):
        self.version = version
        self.message = message or f"Invalid SemVer string: {version!r}"
        super().__init__(self.message)


class InvalidIncrementError(InvalidArgumentError):
    def __init__(self, by: int):
        self.by = by
        super().__init__(f"You must increment by at least 1, got {by}")


class NotFoundError(VersionableError, KeyError):
    def __init__(self, key: object):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"No version found at key {self.key!r}"
