"""Root model for a compiled MIB module document."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

from mib_to_py.models.nodes import NodeDefinition
from mib_to_py.models.types import TypeDefinition


class ModuleDefinition(BaseModel):
    """A compiled MIB module.

    Example:
    -------
        ```yaml
        name: IF-MIB
        description: The MIB module to describe generic objects for network interfaces.
        imports: [SNMPv2-SMI, SNMPv2-TC]
        types:
          InterfaceIndex:
            base_type: Integer32
        nodes:
          - name: ifNumber
            kind: scalar
            oid: [1, 3, 6, 1, 2, 1, 2, 1]
            type: Integer32
        ```

    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: Annotated[
        str,
        Field(
            min_length=1,
            description="Module name (e.g. IF-MIB)",
        ),
    ]
    description: Annotated[
        str,
        Field(
            default="",
            description="Module DESCRIPTION clause",
        ),
    ]
    imports: Annotated[
        list[str],
        Field(
            default_factory=list,
            description="Modules this module imports from, loaded first",
        ),
    ]
    types: Annotated[
        dict[str, TypeDefinition],
        Field(
            default_factory=dict,
            description="Named types (textual conventions) defined by the module",
        ),
    ]
    nodes: Annotated[
        list[NodeDefinition],
        Field(
            default_factory=list,
            description="Nodes in module order",
        ),
    ]

    @model_validator(mode="after")
    def validate_unique_node_names(self) -> ModuleDefinition:
        """Ensure node names are unique within the module."""
        seen: set[str] = set()
        for node in self.nodes:
            if node.name in seen:
                raise ValueError(f"Duplicate node name: {node.name}")
            seen.add(node.name)
        return self
