"""yang-to-thrift: Render parsed YANG schema trees as Thrift struct definitions.

This package provides tools for:
- Loading YAML/JSON dumps of parsed YANG entry trees
- Flattening nested containers into independent structs
- Formatting structs as Thrift IDL through a named formatter registry

Quick Start:
    >>> from yang_thrift.models import load_schema_tree
    >>> from yang_thrift.formatters import render_thrift
    >>>
    >>> entries = load_schema_tree("device.yaml")
    >>> print(render_thrift(entries))

Modules:
    models: Pydantic models for schema nodes and the tree loader
    transform: Tree flattening, type mapping and name normalization
    formatters: Formatter registry and the Thrift formatter
    validation: Structural checks on loaded trees
    cli: Command-line interface
"""

__version__ = "0.1.0"
