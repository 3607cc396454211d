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

import json
from unittest.mock import patch

import pytest

from tests.conftest import PRECEDENCE_CHAIN
from versionable.main import main


def run(args: list[str], capsys: pytest.CaptureFixture[str]) -> list[str]:
    main(args)
    return capsys.readouterr().out.splitlines()


def test_sort(shuffled_chain: list[str], capsys: pytest.CaptureFixture[str]) -> None:
    assert run(["sort", *shuffled_chain], capsys) == PRECEDENCE_CHAIN


def test_sort_desc_json(capsys: pytest.CaptureFixture[str]) -> None:
    (line,) = run(["--json", "sort", "--desc", "1.0.0", "v2.0.0", "1.5"], capsys)
    assert json.loads(line) == ["v2.0.0", "1.5.0", "1.0.0"]


def test_prefix_flags(capsys: pytest.CaptureFixture[str]) -> None:
    assert run(["--prefix", "sort", "1.0.0", "v2.0.0"], capsys) == ["v1.0.0", "v2.0.0"]
    assert run(["--no-prefix", "sort", "1.0.0", "v2.0.0"], capsys) == ["1.0.0", "2.0.0"]


def test_prefix_from_environment(capsys: pytest.CaptureFixture[str]) -> None:
    with patch.dict("os.environ", {"VERSIONABLE_PREFIX": "always"}):
        assert run(["max", "1.0.0", "2.0.0-rc.1"], capsys) == ["v2.0.0-rc.1"]


def test_min_max(capsys: pytest.CaptureFixture[str]) -> None:
    versions = ["1.0.0", "2.0.0", "1.5.0-beta"]
    assert run(["min", *versions], capsys) == ["1.0.0"]
    assert run(["max", *versions], capsys) == ["2.0.0"]


@pytest.mark.parametrize(
    "left, right, expected",
    [
        ("1.0.0", "2.0.0", "-1"),
        ("1.0.0+a", "v1.0.0+b", "0"),
        ("1.0.0-alpha.10", "1.0.0-alpha.2", "1"),
    ],
)
def test_compare(
    left: str, right: str, expected: str, capsys: pytest.CaptureFixture[str]
) -> None:
    assert run(["compare", left, right], capsys) == [expected]


def test_bump(capsys: pytest.CaptureFixture[str]) -> None:
    assert run(["bump", "minor", "v1.2.3-rc.1+b"], capsys) == ["v1.3.0"]
    assert run(["bump", "patch", "1.2.3", "--by", "3"], capsys) == ["1.2.6"]


def test_bump_invalid_increment(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["bump", "major", "1.2.3", "--by", "0"])
    assert exc_info.value.code == 1
    assert "at least 1" in capsys.readouterr().err


def test_filter(capsys: pytest.CaptureFixture[str]) -> None:
    result = run(["filter", "gte", "1.5", "1.0.0", "1.5.0", "2.0.0"], capsys)
    assert result == ["1.5.0", "2.0.0"]


def test_filter_invalid_bound(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit):
        main(["filter", "gt", "nope", "1.0.0"])
    assert "Invalid bound" in capsys.readouterr().err


def test_invalid_version_is_fatal(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["sort", "1.0.0", "not-a-version"])
    assert exc_info.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "not-a-version" in captured.err


def test_validate_all_correct(capsys: pytest.CaptureFixture[str]) -> None:
    main(["validate", "1", "v 1.2.3"])
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["1.0.0", "v1.2.3"]
    assert "warning" not in captured.err.lower()


def test_validate_with_warnings(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["validate", "1.0.0", "01.0.0", "2.0.0"])
    assert exc_info.value.code == 1
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["1.0.0", "2.0.0"]
    assert "'01.0.0' is not a valid semantic version" in captured.err
    assert "Completed with 1 warnings." in captured.err


def test_warnings_do_not_leak_between_runs(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit):
        main(["validate", "bad"])
    assert run(["validate", "1.0.0"], capsys)[-1] == "1.0.0"
