"""Describing software packages, assembled with a builder."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable


class Language(Enum):
    """The language a package is written in."""

    RUST = "Rust"
    JAVA = "Java"
    PERL = "Perl"


@dataclass(frozen=True)
class Dependency:
    """A package name with the version expression it is required at."""

    name: str
    version_expression: str


@dataclass
class Package:
    """A representation of a software package."""

    name: str
    version: str = "0.1"
    authors: list[str] = field(default_factory=list)
    dependencies: list[Dependency] = field(default_factory=list)
    language: Language | None = None

    def as_dependency(self) -> Dependency:
        """Return this package as a dependency for building other packages."""
        return Dependency(name=self.name, version_expression=self.version)


class PackageBuilder:
    """Builds a Package step by step; call ``build()`` to get it."""

    def __init__(self, name: str) -> None:
        self._package = Package(name=name)

    def version(self, version: str) -> PackageBuilder:
        """Set the package version."""
        self._package.version = version
        return self

    def authors(self, authors: Iterable[str]) -> PackageBuilder:
        """Set the package authors."""
        self._package.authors = list(authors)
        return self

    def dependency(self, dependency: Dependency) -> PackageBuilder:
        """Add a further dependency."""
        self._package.dependencies.append(dependency)
        return self

    def language(self, language: Language) -> PackageBuilder:
        """Set the language; without this it stays None."""
        self._package.language = language
        return self

    def build(self) -> Package:
        """Return the package built so far."""
        return replace(
            self._package,
            authors=list(self._package.authors),
            dependencies=list(self._package.dependencies),
        )


def main(argv: list[str] | None = None) -> int:
    """Build a few sample packages and print them."""
    base64 = PackageBuilder("base64").version("0.13").build()
    print(f"base64: {base64!r}")
    log = PackageBuilder("log").version("0.4").language(Language.RUST).build()
    print(f"log: {log!r}")
    serde = (
        PackageBuilder("serde")
        .authors(["djmitche"])
        .version("4.0")
        .dependency(base64.as_dependency())
        .dependency(log.as_dependency())
        .build()
    )
    print(f"serde: {serde!r}")
    return 0


if __name__ == "__main__":
    sys.exit(main())