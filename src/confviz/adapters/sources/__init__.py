"""Configuration source adapter - providers and the root builder.

Contents:
    * :mod:`.flatten` - Nested mapping to colon path flattening
    * :mod:`.definitions` - ``SECTION:KEY=VALUE`` definition parsing
    * :mod:`.providers` - Memory, file, environment and command-line providers
    * :mod:`.builder` - Provider merge into a configuration root
    * :mod:`.loader` - Command-line sources to configuration root
"""

from __future__ import annotations

from .builder import ConfigurationBuilder, LoadableProvider, MergedConfiguration, merge_providers
from .definitions import Definition, parse_definition, parse_definitions
from .loader import load_configuration
from .providers import (
    CommandLineProvider,
    DotenvFileProvider,
    EnvironmentProvider,
    FileProvider,
    FlatProvider,
    JsonFileProvider,
    MemoryProvider,
    TomlFileProvider,
    detect_format,
    provider_for_file,
)

__all__ = [
    "CommandLineProvider",
    "ConfigurationBuilder",
    "Definition",
    "DotenvFileProvider",
    "EnvironmentProvider",
    "FileProvider",
    "FlatProvider",
    "JsonFileProvider",
    "LoadableProvider",
    "MemoryProvider",
    "MergedConfiguration",
    "TomlFileProvider",
    "detect_format",
    "load_configuration",
    "merge_providers",
    "parse_definition",
    "parse_definitions",
    "provider_for_file",
]
