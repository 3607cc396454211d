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

import re
from abc import ABC, abstractmethod
from typing import TypeVar

import semver

from .errors import InvalidArgumentError, InvalidIncrementError, ParseError

V = TypeVar("V", bound="BaseVersion")

# A leading "v" may be followed by a single whitespace character, e.g. "v 1.2.3".
_PREFIX_PATTERN = re.compile(r"^(?P<prefix>v\s?)?(?P<version>.*)$", re.DOTALL)


def _expand_shorthand(text: str) -> str:
    """Expand "1" to "1.0.0" and "1.2" to "1.2.0"."""
    dots = text.count(".")
    if dots == 0:
        return text + ".0.0"
    if dots == 1:
        return text + ".0"
    return text


def _parse_components(text: object) -> tuple[bool, semver.Version]:
    if not isinstance(text, str):
        raise ParseError(text, f"Version must be a string, got {type(text).__name__}")

    stripped = text.strip()
    if not stripped:
        raise ParseError(text, "Version string cannot be empty")

    match = _PREFIX_PATTERN.match(_expand_shorthand(stripped))
    assert match is not None

    try:
        parsed = semver.Version.parse(match.group("version"))
    except (TypeError, ValueError) as e:
        raise ParseError(text) from e

    return bool(match.group("prefix")), parsed


class BaseVersion(ABC):
    """A semantic version whose components can be read and bumped.

    Subclasses decide whether the canonical string carries a "v" prefix.
    Equality and ordering follow SemVer precedence, so build metadata is
    ignored by ``==``; for that reason versions are not hashable.
    """

    def __init__(
        self,
        major: int = 0,
        minor: int = 0,
        patch: int = 0,
        prerelease: str | None = None,
        build: str | None = None,
    ) -> None:
        # Components are trusted as given, only parsed strings are validated.
        self._major = major
        self._minor = minor
        self._patch = patch
        self._prerelease = prerelease
        self._build = build

    @classmethod
    def create(
        cls: type[V],
        major: int = 0,
        minor: int = 0,
        patch: int = 0,
        prerelease: str | None = None,
        build: str | None = None,
    ) -> V:
        return cls(major, minor, patch, prerelease, build)

    @classmethod
    def parse(cls: type[V], text: str) -> V:
        """Parse a version string such as "v1.2.3-rc.1+build.5".

        Partial versions are expanded first, so "1" and "1.2" are accepted.

        Raises:
            ParseError: If the string is empty or not a valid semantic version.
        """
        prefix, parsed = _parse_components(text)
        return cls.from_semver(parsed, prefix)

    @classmethod
    def from_semver(cls: type[V], version: semver.Version, prefix: bool = False) -> V:
        return cls(
            version.major,
            version.minor,
            version.patch,
            version.prerelease,
            version.build,
        )

    def to_semver(self) -> semver.Version:
        return semver.Version(
            self._major, self._minor, self._patch, self._prerelease, self._build
        )

    @property
    def major(self) -> int:
        return self._major

    @property
    def minor(self) -> int:
        return self._minor

    @property
    def patch(self) -> int:
        return self._patch

    @property
    def prerelease(self) -> str | None:
        return self._prerelease

    @property
    def build(self) -> str | None:
        return self._build

    @property
    @abstractmethod
    def has_prefix(self) -> bool:
        """Whether the canonical string starts with "v"."""

    @property
    def is_prerelease(self) -> bool:
        return self._prerelease is not None

    @property
    def has_build(self) -> bool:
        return self._build is not None

    @property
    def version(self) -> str:
        """The canonical string, e.g. "v1.2.3-alpha+001"."""
        return self.format()

    def set_major(self, major: int) -> None:
        self._major = major

    def set_minor(self, minor: int) -> None:
        self._minor = minor

    def set_patch(self, patch: int) -> None:
        self._patch = patch

    def set_prerelease(self, prerelease: str | None) -> None:
        self._prerelease = prerelease

    def unset_prerelease(self) -> None:
        self._prerelease = None

    def set_build(self, build: str | None) -> None:
        self._build = build

    def unset_build(self) -> None:
        self._build = None

    def bump_major(self: V, by: int = 1) -> V:
        self._validate_increment(by)
        self._major += by
        self._minor = 0
        self._patch = 0
        return self.release()

    def bump_minor(self: V, by: int = 1) -> V:
        self._validate_increment(by)
        self._minor += by
        self._patch = 0
        return self.release()

    def bump_patch(self: V, by: int = 1) -> V:
        self._validate_increment(by)
        self._patch += by
        return self.release()

    def release(self: V) -> V:
        """Drop the pre-release and build metadata, keeping the numbers."""
        self.unset_prerelease()
        self.unset_build()
        return self

    def format(self) -> str:
        return ("v" if self.has_prefix else "") + self._format_core()

    def _format_core(self) -> str:
        version = f"{self._major}.{self._minor}.{self._patch}"
        if self._prerelease:
            version += f"-{self._prerelease}"
        if self._build:
            version += f"+{self._build}"
        return version

    def to_json(self) -> str:
        return self.version

    def to_mutable(self) -> "Version":
        return Version(
            self._major,
            self._minor,
            self._patch,
            self._prerelease,
            self._build,
            prefix=self.has_prefix,
        )

    def to_prefixed(self) -> "PrefixedVersion":
        return PrefixedVersion(
            self._major, self._minor, self._patch, self._prerelease, self._build
        )

    def to_unprefixed(self) -> "UnprefixedVersion":
        return UnprefixedVersion(
            self._major, self._minor, self._patch, self._prerelease, self._build
        )

    def convert_to(self, target: type["BaseVersion"]) -> "BaseVersion":
        """Return a copy of this version as an instance of ``target``.

        Converting to :class:`Version` carries the current prefix over; the
        prefixed and unprefixed variants impose their own.
        """
        converters = {
            Version: self.to_mutable,
            PrefixedVersion: self.to_prefixed,
            UnprefixedVersion: self.to_unprefixed,
        }
        try:
            converter = converters[target]
        except (KeyError, TypeError):
            raise InvalidArgumentError(
                f"Cannot convert a version to {target!r}; expected one of "
                "Version, PrefixedVersion or UnprefixedVersion"
            ) from None
        return converter()

    def eq(self, other: "BaseVersion | str") -> bool:
        from .compare import equal

        return equal(self, other)

    def gt(self, other: "BaseVersion | str") -> bool:
        from .compare import greater_than

        return greater_than(self, other)

    def gte(self, other: "BaseVersion | str") -> bool:
        from .compare import greater_or_equal

        return greater_or_equal(self, other)

    def lt(self, other: "BaseVersion | str") -> bool:
        from .compare import less_than

        return less_than(self, other)

    def lte(self, other: "BaseVersion | str") -> bool:
        from .compare import less_or_equal

        return less_or_equal(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (BaseVersion, str)):
            return NotImplemented
        return self.eq(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, (BaseVersion, str)):
            return NotImplemented
        return self.lt(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, (BaseVersion, str)):
            return NotImplemented
        return self.lte(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, (BaseVersion, str)):
            return NotImplemented
        return self.gt(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, (BaseVersion, str)):
            return NotImplemented
        return self.gte(other)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.version

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.version!r})"

    @staticmethod
    def _validate_increment(by: int) -> None:
        if by < 1:
            raise InvalidIncrementError(by)


class Version(BaseVersion):
    """A version whose "v" prefix can be switched on and off at runtime."""

    def __init__(
        self,
        major: int = 0,
        minor: int = 0,
        patch: int = 0,
        prerelease: str | None = None,
        build: str | None = None,
        prefix: bool = True,
    ) -> None:
        super().__init__(major, minor, patch, prerelease, build)
        self._prefix = prefix

    @classmethod
    def create(  # type: ignore[override]
        cls,
        major: int = 0,
        minor: int = 0,
        patch: int = 0,
        prerelease: str | None = None,
        build: str | None = None,
        has_prefix: bool = True,
    ) -> "Version":
        return cls(major, minor, patch, prerelease, build, prefix=has_prefix)

    @classmethod
    def from_semver(cls, version: semver.Version, prefix: bool = False) -> "Version":
        return cls(
            version.major,
            version.minor,
            version.patch,
            version.prerelease,
            version.build,
            prefix=prefix,
        )

    @property
    def has_prefix(self) -> bool:
        return self._prefix

    def set_prefix(self, prefix: bool) -> None:
        self._prefix = prefix

    def with_prefix(self) -> "Version":
        self._prefix = True
        return self

    def without_prefix(self) -> "Version":
        self._prefix = False
        return self

    def format(self, ignore_prefix: bool = False) -> str:
        return ("v" if self._prefix and not ignore_prefix else "") + self._format_core()


class PrefixedVersion(BaseVersion):
    """A version that is always rendered with a "v" prefix."""

    @property
    def has_prefix(self) -> bool:
        return True


class UnprefixedVersion(BaseVersion):
    """A version that is never rendered with a "v" prefix."""

    @property
    def has_prefix(self) -> bool:
        return False


def parse(text: str) -> Version:
    """Parse a version string, keeping the "v" prefix as found."""
    return Version.parse(text)


def create(
    major: int = 0,
    minor: int = 0,
    patch: int = 0,
    prerelease: str | None = None,
    build: str | None = None,
    has_prefix: bool = True,
) -> Version:
    return Version.create(major, minor, patch, prerelease, build, has_prefix)


def is_valid(text: object) -> bool:
    try:
        _parse_components(text)
    except ParseError:
        return False
    return True
