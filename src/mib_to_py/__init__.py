"""mib-to-py: Generator of statically-typed Python bindings for SNMP MIB modules.

This package provides tools for:
- Loading compiled MIB modules (YAML/JSON) through a search path
- Emitting one Python module of typed node declarations per MIB module
- Collecting shared type declarations across all generated modules

Quick Start:
    >>> from mib_to_py.generate import GenerateOptions, Generator
    >>>
    >>> options = GenerateOptions(out_dir="mibs", package="mibs", paths=["compiled"])
    >>> Generator(options).run(["IF-MIB"])

Modules:
    models: Pydantic models for compiled MIB documents
    smi: Schema loader exposing modules, nodes and types
    generate: Module/node/type emission, formatting and output
    bindings: Runtime dataclasses used by the generated code
    cli: Command-line interface
"""

__version__ = "0.1.0"
