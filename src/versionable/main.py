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

import argparse
import json
import os
import sys

from . import filters
from .collection import Collection, PrefixPolicy
from .compare import compare
from .errors import InvalidArgumentError
from .gh_logging import Logger
from .version import BaseVersion, is_valid

log = Logger(__name__)


def parse_args(args: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Parse, compare, sort and bump semantic versions."
    )
    prefix_group = parser.add_mutually_exclusive_group()
    prefix_group.add_argument(
        "--prefix",
        dest="prefix",
        action="store_const",
        const=PrefixPolicy.FORCE_PREFIXED,
        default=None,
        help="Print every version with a 'v' prefix.",
    )
    prefix_group.add_argument(
        "--no-prefix",
        dest="prefix",
        action="store_const",
        const=PrefixPolicy.FORCE_UNPREFIXED,
        help="Print every version without a 'v' prefix.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as a JSON array of version strings.",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    sort = commands.add_parser("sort", help="Sort versions by precedence.")
    sort.add_argument("--desc", action="store_true", help="Highest version first.")
    sort.add_argument("versions", nargs="+")

    for name, what in (("min", "lowest"), ("max", "highest")):
        extreme = commands.add_parser(name, help=f"Print the {what} version.")
        extreme.add_argument("versions", nargs="+")

    comp = commands.add_parser("compare", help="Print -1, 0 or 1.")
    comp.add_argument("left")
    comp.add_argument("right")

    bump = commands.add_parser("bump", help="Bump a version component.")
    bump.add_argument("component", choices=["major", "minor", "patch"])
    bump.add_argument("version")
    bump.add_argument("--by", type=int, default=1)

    filt = commands.add_parser("filter", help="Keep versions matching a bound.")
    filt.add_argument("operator", choices=sorted(filters.BY_NAME))
    filt.add_argument("bound")
    filt.add_argument("versions", nargs="+")

    validate = commands.add_parser(
        "validate", help="Print the canonical form of each valid version."
    )
    validate.add_argument("versions", nargs="+")

    return parser.parse_args(args)


def get_prefix_policy(args: argparse.Namespace) -> PrefixPolicy:
    """Get the prefix policy from CLI or environment.

    Tries sources in order:
    1. --prefix / --no-prefix CLI arguments
    2. VERSIONABLE_PREFIX environment variable ("always" or "never")
    3. Unmanaged: every version keeps the prefix it was written with
    """
    if args.prefix:
        log.debug(f"Using prefix policy '{args.prefix.value}' from command-line argument.")
        return args.prefix
    elif value := os.getenv("VERSIONABLE_PREFIX"):
        try:
            policy = PrefixPolicy(value.strip().lower())
        except ValueError:
            log.warning(
                f"Ignoring VERSIONABLE_PREFIX={value!r}; expected 'always' or 'never'."
            )
            return PrefixPolicy.UNMANAGED
        log.debug(f"Using prefix policy '{policy.value}' from environment variable.")
        return policy
    else:
        return PrefixPolicy.UNMANAGED


def make_collection(versions: list[str], policy: PrefixPolicy) -> Collection:
    try:
        return Collection(versions, policy=policy)
    except InvalidArgumentError as e:
        log.fatal(f"{e}: {e.__cause__}")


def run_command(p: argparse.Namespace, policy: PrefixPolicy) -> list[str]:
    """Execute the selected command and return the lines to print."""
    if p.command == "sort":
        versions = make_collection(p.versions, policy)
        return (versions.sort_desc() if p.desc else versions.sort()).to_json()

    if p.command in ("min", "max"):
        versions = make_collection(p.versions, policy)
        extreme = versions.min() if p.command == "min" else versions.max()
        return [extreme.version] if extreme else []

    if p.command == "compare":
        left, right = make_collection([p.left, p.right], policy)
        return [str(compare(left, right))]

    if p.command == "bump":
        (version,) = make_collection([p.version], policy)
        assert isinstance(version, BaseVersion)
        try:
            getattr(version, f"bump_{p.component}")(p.by)
        except InvalidArgumentError as e:
            log.fatal(str(e))
        return [version.version]

    if p.command == "filter":
        try:
            predicate = filters.BY_NAME[p.operator](p.bound)
        except InvalidArgumentError as e:
            log.fatal(f"Invalid bound: {e}")
        return make_collection(p.versions, policy).filter(predicate).to_json()

    if p.command == "validate":
        valid: list[str] = []
        for raw in p.versions:
            if is_valid(raw):
                valid.append(raw)
            else:
                log.warning(f"'{raw}' is not a valid semantic version; skipping.")
        return make_collection(valid, policy).to_json()

    raise AssertionError(f"Unhandled command {p.command}")


def main(args: list[str]) -> None:
    """Main entry point of the versionable command-line tool."""
    log.warnings.clear()
    p = parse_args(args)
    policy = get_prefix_policy(p)
    lines = run_command(p, policy)

    if p.json:
        print(json.dumps(lines))
    else:
        for line in lines:
            print(line)

    if log.warnings:
        # If any warnings were issued, exit with non-zero code
        log.fatal(f"Completed with {len(log.warnings)} warnings.")


def entrypoint() -> None:
    main(args=sys.argv[1:])


if __name__ == "__main__":
    entrypoint()
