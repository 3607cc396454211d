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

from collections.abc import Callable, Iterable, Iterator, Mapping
from enum import Enum
from typing import Any

from .compare import version_key
from .errors import InvalidArgumentError, NotFoundError
from .gh_logging import Logger
from .version import BaseVersion, PrefixedVersion, UnprefixedVersion, Version

log = Logger(__name__)

Key = int | str
VersionInput = BaseVersion | str | Callable[[], BaseVersion | str | None] | None


class PrefixPolicy(Enum):
    """Whether a collection forces the "v" prefix on or off for its versions."""

    UNMANAGED = "unmanaged"
    FORCE_PREFIXED = "always"
    FORCE_UNPREFIXED = "never"


_POLICY_TARGETS: dict[PrefixPolicy, type[BaseVersion]] = {
    PrefixPolicy.FORCE_PREFIXED: PrefixedVersion,
    PrefixPolicy.FORCE_UNPREFIXED: UnprefixedVersion,
}


def _is_int_key(key: object) -> bool:
    return isinstance(key, int) and not isinstance(key, bool)


def _reindex(items: Iterable[tuple[Key, Any]]) -> dict[Key, Any]:
    """Renumber integer keys from zero, keeping string keys as they are."""
    result: dict[Key, Any] = {}
    next_index = 0
    for key, value in items:
        if _is_int_key(key):
            result[next_index] = value
            next_index += 1
        else:
            result[key] = value
    return result


def _resolve_range(count: int, offset: int, length: int | None) -> tuple[int, int]:
    """Turn an offset/length pair into list bounds.

    A negative offset counts from the end, a negative length stops that many
    elements before the end, and no length runs to the end.
    """
    start = slice(offset, None).indices(count)[0]
    if length is None:
        return start, count
    if length < 0:
        return start, max(start, count + length)
    return start, min(start + length, count)


def _pairs(versions: object) -> Iterable[tuple[Key, Any]]:
    if isinstance(versions, Collection):
        return versions.items()
    if isinstance(versions, Mapping):
        return versions.items()
    if isinstance(versions, Iterable) and not isinstance(versions, (str, bytes)):
        return enumerate(versions)
    raise InvalidArgumentError(
        f"Expected a sequence, a mapping or a Collection, got {type(versions).__name__}"
    )


class Collection:
    """An ordered, keyed set of versions.

    Inputs are cast to versions on the way in: strings are parsed, zero-argument
    callables are called, and ``None`` is kept as an empty slot. When the
    collection enforces a prefix policy, every version it holds is converted to
    the matching prefixed or unprefixed variant.

    Keys are integers assigned in insertion order, or explicit keys when
    constructed from a mapping or set with :meth:`put`.
    """

    def __init__(
        self,
        versions: Iterable[VersionInput] | Mapping[Key, VersionInput] = (),
        policy: PrefixPolicy = PrefixPolicy.UNMANAGED,
    ) -> None:
        self._policy = policy
        try:
            self._versions: dict[Key, BaseVersion | None] = {
                key: self._cast(version) for key, version in _pairs(versions)
            }
        except InvalidArgumentError as e:
            log.debug(f"Could not build collection: {e}")
            raise InvalidArgumentError(
                "One or more of the given values are not a valid SemVer string"
            ) from e

    @property
    def policy(self) -> PrefixPolicy:
        return self._policy

    def all(self) -> dict[Key, BaseVersion | None]:
        return dict(self._versions)

    def keys(self) -> list[Key]:
        return list(self._versions)

    def items(self) -> list[tuple[Key, BaseVersion | None]]:
        return list(self._versions.items())

    def has(self, key: Key) -> bool:
        return key in self._versions

    def with_prefix(self) -> "Collection":
        """Force the "v" prefix on every version, now and on later inserts."""
        self._apply_policy(PrefixPolicy.FORCE_PREFIXED)
        return self

    def without_prefix(self) -> "Collection":
        """Strip the "v" prefix from every version, now and on later inserts."""
        self._apply_policy(PrefixPolicy.FORCE_UNPREFIXED)
        return self

    def forget(self, *keys: Key) -> "Collection":
        for key in keys:
            self._versions.pop(key, None)
        return self

    def get(self, key: Key, default: VersionInput = None) -> BaseVersion | None:
        if key in self._versions:
            return self._versions[key]
        return self._cast(default)

    def filter(self, callback: Callable[..., bool] | None = None) -> "Collection":
        """Keep the versions for which ``callback(version, key)`` is true.

        Without a callback, empty slots are dropped.
        """
        if callback is None:
            kept = {key: version for key, version in self._versions.items() if version}
        else:
            kept = {
                key: version
                for key, version in self._versions.items()
                if callback(version, key)
            }
        return self._new_from_this(kept)

    def first(
        self, callback: Callable[..., bool] | None = None, default: VersionInput = None
    ) -> BaseVersion | None:
        for key, version in self._versions.items():
            if callback is None or callback(version, key):
                return version
        return self._cast(default)

    def last(
        self, callback: Callable[..., bool] | None = None, default: VersionInput = None
    ) -> BaseVersion | None:
        for key, version in reversed(self._versions.items()):
            if callback is None or callback(version, key):
                return version
        return self._cast(default)

    def merge(self, versions: object) -> "Collection":
        """Append ``versions``, renumbering integer keys.

        Later values win on colliding string keys.
        """
        incoming = self._cast_batch(versions, "versions")
        return self._new_from_this(_reindex([*self._versions.items(), *incoming]))

    def union(self, versions: object) -> "Collection":
        """Add the entries of ``versions`` whose keys are not present yet.

        Existing entries win on every key collision and no key is renumbered.
        """
        incoming = self._cast_batch(versions, "versions")
        result = dict(self._versions)
        for key, version in incoming:
            if key not in result:
                result[key] = version
        return self._new_from_this(result)

    def pop(self) -> BaseVersion | None:
        if not self._versions:
            return None
        return self._versions.pop(next(reversed(self._versions)))

    def shift(self) -> BaseVersion | None:
        if not self._versions:
            return None
        version = self._versions.pop(next(iter(self._versions)))
        self._versions = _reindex(self._versions.items())
        return version

    def push(self, *versions: VersionInput) -> "Collection":
        cast = [self._cast(version) for version in versions]
        for version in cast:
            self._versions[self._next_key()] = version
        return self

    def add(self, version: VersionInput) -> "Collection":
        return self.push(version)

    def concat(self, versions: Iterable[VersionInput]) -> "Collection":
        if isinstance(versions, (str, bytes)):
            raise InvalidArgumentError("Expected an iterable of versions, got a string")
        result = self._new_from_this(self._versions)
        result.push(*versions)
        return result

    def put(self, key: Key, version: VersionInput) -> "Collection":
        self[key] = version
        return self

    def reverse(self) -> "Collection":
        return self._new_from_this(dict(reversed(self._versions.items())))

    def search(self, value: Any) -> Key | None:
        """Return the key of the first matching version, or None.

        ``value`` is either a predicate called as ``value(version, key)``, or a
        version (string or object) matched by its canonical string under this
        collection's prefix policy.
        """
        if callable(value) and not isinstance(value, (str, BaseVersion)):
            for key, version in self._versions.items():
                if value(version, key):
                    return key
            return None

        needle = self._cast(value)
        if needle is None:
            return None

        for key, version in self._versions.items():
            if version is not None and version.version == needle.version:
                return key
        return None

    def slice(self, offset: int, length: int | None = None) -> "Collection":
        items = list(self._versions.items())
        start, stop = _resolve_range(len(items), offset, length)
        return self._new_from_this(dict(items[start:stop]))

    def splice(
        self, offset: int, length: int | None = None, replacement: object = None
    ) -> "Collection":
        """Remove a range from this collection and return it.

        ``replacement`` values are inserted in place of the removed range.
        Integer keys of both collections are renumbered afterwards.
        """
        inserted = []
        if replacement is not None:
            inserted = [version for _, version in self._cast_batch(replacement, "replacement")]

        items = list(self._versions.items())
        start, stop = _resolve_range(len(items), offset, length)
        removed = items[start:stop]

        self._versions = _reindex(
            [*items[:start], *((0, version) for version in inserted), *items[stop:]]
        )
        return self._new_from_this(_reindex(removed))

    def sort(self) -> "Collection":
        """Sort in ascending precedence, keeping keys and the order of ties."""
        return self._new_from_this(
            dict(sorted(self._versions.items(), key=lambda item: version_key(item[1])))
        )

    def sort_desc(self) -> "Collection":
        return self._new_from_this(
            dict(
                sorted(
                    self._versions.items(),
                    key=lambda item: version_key(item[1]),
                    reverse=True,
                )
            )
        )

    def min(self) -> BaseVersion | None:
        return self.sort().first()

    def max(self) -> BaseVersion | None:
        return self.sort().last()

    def values(self) -> "Collection":
        return self._new_from_this(dict(enumerate(self._versions.values())))

    def to_json(self) -> list[str | None]:
        return [
            version.to_json() if version is not None else None
            for version in self._versions.values()
        ]

    def __len__(self) -> int:
        return len(self._versions)

    def __iter__(self) -> Iterator[BaseVersion | None]:
        return iter(list(self._versions.values()))

    def __getitem__(self, key: Key) -> BaseVersion | None:
        try:
            return self._versions[key]
        except KeyError:
            raise NotFoundError(key) from None

    def __setitem__(self, key: Key, version: VersionInput) -> None:
        try:
            self._versions[key] = self._cast(version)
        except InvalidArgumentError as e:
            raise InvalidArgumentError(
                "The value must be a valid version string or version instance"
            ) from e

    def __delitem__(self, key: Key) -> None:
        if key not in self._versions:
            raise NotFoundError(key)
        del self._versions[key]

    def __repr__(self) -> str:
        return f"Collection({self.to_json()!r}, policy={self._policy})"

    def _apply_policy(self, policy: PrefixPolicy) -> None:
        self._policy = policy
        self._versions = {
            key: self._normalize(version) if version is not None else None
            for key, version in self._versions.items()
        }
        log.debug(f"Prefix policy set to '{policy.value}' for {len(self)} versions")

    def _cast(self, version: VersionInput) -> BaseVersion | None:
        if callable(version) and not isinstance(version, (str, BaseVersion, type)):
            version = version()

        if version is None:
            return None
        if isinstance(version, str):
            version = Version.parse(version)
        elif not isinstance(version, BaseVersion):
            raise InvalidArgumentError(
                f"Expected a version or a version string, got {type(version).__name__}"
            )

        return self._normalize(version)

    def _cast_batch(self, versions: object, name: str) -> list[tuple[Key, BaseVersion | None]]:
        pairs = _pairs(versions)
        try:
            return [(key, self._cast(version)) for key, version in pairs]
        except InvalidArgumentError as e:
            log.debug(f"Rejected {name}: {e}")
            raise InvalidArgumentError(
                f"The {name} must only contain valid version strings or version instances"
            ) from e

    def _normalize(self, version: BaseVersion) -> BaseVersion:
        target = _POLICY_TARGETS.get(self._policy)
        if target is None or isinstance(version, target):
            return version
        return version.convert_to(target)

    def _next_key(self) -> int:
        return max((key for key in self._versions if _is_int_key(key)), default=-1) + 1  # type: ignore[type-var]

    def _new_from_this(self, versions: Mapping[Key, VersionInput]) -> "Collection":
        return type(self)(versions, policy=self._policy)
