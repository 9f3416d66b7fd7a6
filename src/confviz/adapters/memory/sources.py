"""In-memory configuration sources and report capture for testing.

Contents:
    * :class:`InMemoryFileProvider` - file-backed provider fed from a mapping.
    * :class:`SourceStub` - ``load_configuration`` double backed by in-memory files.
    * :class:`ReportSpy` - captures rendered reports and console setup calls.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, TextIO

from ...domain.errors import SourceNotFoundError
from ...domain.model import FileBacked, ProviderKind
from ..sources.builder import ConfigurationBuilder, MergedConfiguration
from ..sources.providers import EnvironmentProvider, MemoryProvider


class InMemoryFileProvider(MemoryProvider):
    """Mapping that presents itself as a file source named *path*.

    Example:
        >>> provider = InMemoryFileProvider("appsettings.json", {"Mode": "fast"})
        >>> provider.kind
        FileBacked(path='appsettings.json')
    """

    def __init__(self, path: str, data: Mapping[str, Any]) -> None:
        super().__init__(data, name=path)
        self.path = path

    @property
    def kind(self) -> ProviderKind:
        return FileBacked(self.path)


@dataclass
class SourceStub:
    """Serve ``load_configuration`` from in-memory files and environment.

    Attributes:
        files: Nested mappings keyed by the file name the CLI passes in.
        environ: Environment variables seen by environment providers.
        calls: Keyword arguments of every ``load_configuration`` call.

    Example:
        >>> stub = SourceStub(files={"base.toml": {"App": {"Mode": "safe"}}})
        >>> root = stub.load_configuration(files=["base.toml"], definitions=("App:Mode=fast",))
        >>> root.get("App:Mode")
        'fast'
        >>> len(stub.calls)
        1
    """

    files: dict[str, Mapping[str, Any]] = field(default_factory=dict)
    environ: dict[str, str] = field(default_factory=dict)
    calls: list[dict[str, Any]] = field(default_factory=list)

    def load_configuration(
        self,
        *,
        files: Sequence[str] = (),
        optional_files: Sequence[str] = (),
        environment: bool = False,
        env_prefix: str | None = None,
        definitions: tuple[str, ...] = (),
    ) -> MergedConfiguration:
        """Build a root the way the production loader does, without touching disk.

        Raises:
            SourceNotFoundError: If a required file is not in :attr:`files`.
            ValueError: If a definition is malformed.
        """
        self.calls.append(
            {
                "files": list(files),
                "optional_files": list(optional_files),
                "environment": environment,
                "env_prefix": env_prefix,
                "definitions": definitions,
            }
        )
        builder = ConfigurationBuilder()
        for path in files:
            if path not in self.files:
                raise SourceNotFoundError(f"Configuration file not found: {path}")
            builder.add(InMemoryFileProvider(path, self.files[path]))
        for path in optional_files:
            builder.add(InMemoryFileProvider(path, self.files.get(path, {})))
        if environment or env_prefix:
            builder.add(EnvironmentProvider(env_prefix, environ=self.environ))
        if definitions:
            builder.add_command_line(definitions)
        return builder.build()


@dataclass
class ReportSpy:
    """Capture reports instead of printing them.

    Each test should create its own ReportSpy to avoid cross-test pollution.

    Attributes:
        reports: Every report passed to :meth:`display_report`.
        unicode_requests: Number of :meth:`enable_unicode_console` calls.

    Example:
        >>> spy = ReportSpy()
        >>> spy.display_report("Configuration Structure:\\n")
        >>> spy.last
        'Configuration Structure:\\n'
    """

    reports: list[str] = field(default_factory=list)
    unicode_requests: int = 0

    @property
    def last(self) -> str:
        """Most recent report; raises ``IndexError`` when nothing was displayed."""
        return self.reports[-1]

    def clear(self) -> None:
        """Reset captured data for the next test."""
        self.reports.clear()
        self.unicode_requests = 0

    def display_report(self, report: str) -> None:
        self.reports.append(report)

    def enable_unicode_console(self, *streams: TextIO) -> bool:
        self.unicode_requests += 1
        return False


__all__ = [
    "InMemoryFileProvider",
    "ReportSpy",
    "SourceStub",
]
