"""
Configuration loading for artiver.

Loads version gate files (minimum versions per artifact) from YAML and
merges them over shared defaults.

Public API
----------
load_gate_config : function
    Load a gate file merged over defaults/gates.yaml.
build_gates : function
    Turn a loaded configuration into VersionGate objects.
"""

from .loader import build_gates, load_gate_config

__all__ = ["build_gates", "load_gate_config"]
