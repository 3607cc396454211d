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

import os
import sys
from typing import NoReturn


def is_running_in_github_actions() -> bool:
    return "GITHUB_ACTIONS" in os.environ


def is_debug_enabled() -> bool:
    return bool(os.environ.get("VERSIONABLE_DEBUG")) or (
        os.environ.get("RUNNER_DEBUG") == "1"
    )


class Logger:
    """Minimal logger writing to stderr, with annotations on GitHub Actions.

    stdout is left to command output. Debug messages are dropped unless
    VERSIONABLE_DEBUG (or RUNNER_DEBUG=1 on GitHub Actions) is set.
    """

    def __init__(self, name: str):
        self.name = name
        self.warnings: list[str] = []

    def _print(self, prefix: str, msg: str) -> None:
        if is_running_in_github_actions():
            github_prefix = {
                "debug": "debug",
                "info": "notice",
                "warning": "warning",
                "error": "error",
                "success": "notice",
            }
            print(
                f"::{github_prefix.get(prefix, prefix)}::{self.name} {msg}",
                file=sys.stderr,
            )
            return

        pretty_prefix = {
            "debug": "DEBUG",
            "info": "INFO",
            "warning": "WARNING",
            "error": "ERROR",
            "success": "SUCCESS",
        }
        print(f"{pretty_prefix.get(prefix, prefix)}: {self.name} {msg}", file=sys.stderr)

    def debug(self, msg: str) -> None:
        if is_debug_enabled():
            self._print("debug", msg)

    def info(self, msg: str) -> None:
        self._print("info", msg)

    def ok(self, msg: str) -> None:
        self._print("success", msg)

    def warning(self, msg: str) -> None:
        self.warnings.append(msg)
        self._print("warning", msg)

    def fatal(self, msg: str) -> NoReturn:
        self._print("error", msg)
        raise SystemExit(1)
