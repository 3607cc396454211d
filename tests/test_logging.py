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

from unittest.mock import patch

import pytest

from versionable import Collection
from versionable.gh_logging import Logger


def test_local_format(capsys: pytest.CaptureFixture[str]) -> None:
    Logger("demo").info("hello")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "INFO: demo hello\n"


def test_github_actions_annotation(capsys: pytest.CaptureFixture[str]) -> None:
    with patch.dict("os.environ", {"GITHUB_ACTIONS": "true"}):
        Logger("demo").warning("careful")
    assert capsys.readouterr().err == "::warning::demo careful\n"


def test_warnings_are_recorded() -> None:
    log = Logger("demo")
    log.warning("one")
    log.warning("two")
    assert log.warnings == ["one", "two"]


def test_debug_is_off_by_default(capsys: pytest.CaptureFixture[str]) -> None:
    Logger("demo").debug("hidden")
    assert capsys.readouterr().err == ""


@pytest.mark.parametrize(
    "env", [{"VERSIONABLE_DEBUG": "1"}, {"RUNNER_DEBUG": "1"}]
)
def test_debug_enabled(env: dict[str, str], capsys: pytest.CaptureFixture[str]) -> None:
    with patch.dict("os.environ", env):
        Logger("demo").debug("shown")
    assert "shown" in capsys.readouterr().err


def test_fatal_exits(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        Logger("demo").fatal("boom")
    assert exc_info.value.code == 1
    assert capsys.readouterr().err == "ERROR: demo boom\n"


def test_collection_logs_policy_changes(capsys: pytest.CaptureFixture[str]) -> None:
    with patch.dict("os.environ", {"VERSIONABLE_DEBUG": "1"}):
        Collection(["1.0.0"]).with_prefix()
    assert "Prefix policy set to 'always' for 1 versions" in capsys.readouterr().err
