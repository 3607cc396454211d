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

from argparse import Namespace
from unittest.mock import patch

from tests.conftest import MockLogger
from versionable import PrefixPolicy
from versionable.main import get_prefix_policy


class TestPrefixPolicyResolution:
    """Test prefix policy resolution."""

    def test_policy_from_cli_argument(self):
        with patch.dict("os.environ", {"VERSIONABLE_PREFIX": "never"}):
            args = Namespace(prefix=PrefixPolicy.FORCE_PREFIXED)
            assert get_prefix_policy(args) is PrefixPolicy.FORCE_PREFIXED

    def test_policy_from_environment(self):
        with patch.dict("os.environ", {"VERSIONABLE_PREFIX": "never"}):
            args = Namespace(prefix=None)
            assert get_prefix_policy(args) is PrefixPolicy.FORCE_UNPREFIXED

    def test_environment_value_is_normalized(self):
        with patch.dict("os.environ", {"VERSIONABLE_PREFIX": " Always "}):
            args = Namespace(prefix=None)
            assert get_prefix_policy(args) is PrefixPolicy.FORCE_PREFIXED

    def test_unmanaged_when_unset(self):
        args = Namespace(prefix=None)
        assert get_prefix_policy(args) is PrefixPolicy.UNMANAGED

    def test_unknown_environment_value(self, mock_logger: MockLogger):
        with (
            patch.dict("os.environ", {"VERSIONABLE_PREFIX": "sometimes"}),
            patch("versionable.main.log", mock_logger),
        ):
            args = Namespace(prefix=None)
            assert get_prefix_policy(args) is PrefixPolicy.UNMANAGED
        assert len(mock_logger.warning_messages) == 1
        assert "sometimes" in mock_logger.warning_messages[0]
