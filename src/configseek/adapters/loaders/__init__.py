"""Configuration source loaders and the filesystem probes they use."""

from configseek.adapters.loaders.loaders import (
    RC_EXTENSIONS,
    load_defined_file,
    load_package_prop,
    load_rc,
    load_script,
)


__all__ = [
    "RC_EXTENSIONS",
    "load_defined_file",
    "load_package_prop",
    "load_rc",
    "load_script",
]
