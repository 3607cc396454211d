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
import random

import pytest

from versionable import Collection, PrefixPolicy
from versionable.gh_logging import Logger

# Ordered example from https://semver.org/#spec-item-11
PRECEDENCE_CHAIN = [
    "1.0.0-alpha",
    "1.0.0-alpha.1",
    "1.0.0-alpha.beta",
    "1.0.0-beta",
    "1.0.0-beta.2",
    "1.0.0-beta.11",
    "1.0.0-rc.1",
    "1.0.0",
]


class MockLogger(Logger):
    """Logger that captures messages for testing."""

    def __init__(self):
        super().__init__("test")
        self.debug_messages: list[str] = []
        self.info_messages: list[str] = []
        self.warning_messages: list[str] = []
        self.error_messages: list[str] = []

    def _print(self, prefix: str, msg: str) -> None:
        if prefix == "debug":
            self.debug_messages.append(msg)
        elif prefix == "info":
            self.info_messages.append(msg)
        elif prefix == "warning":
            self.warning_messages.append(msg)
        elif prefix == "error":
            self.error_messages.append(msg)


@pytest.fixture
def mock_logger() -> MockLogger:
    """Create a mock logger for testing."""
    return MockLogger()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep settings of the calling shell or CI runner out of the tests."""
    for name in ("VERSIONABLE_PREFIX", "VERSIONABLE_DEBUG", "RUNNER_DEBUG", "GITHUB_ACTIONS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def shuffled_chain() -> list[str]:
    versions = list(PRECEDENCE_CHAIN)
    random.Random(1234).shuffle(versions)
    # Make sure the shuffle actually changed something
    if versions == PRECEDENCE_CHAIN:
        versions.reverse()
    return versions


def make_collection(
    versions: list[str] | None = None,
    policy: PrefixPolicy = PrefixPolicy.UNMANAGED,
) -> Collection:
    if versions is None:
        versions = ["1.0.0", "v2.0.0", "1.5.0-beta"]
    return Collection(versions, policy=policy)
