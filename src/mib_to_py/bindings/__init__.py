"""Runtime support for generated MIB bindings.

Generated files import this package as::

    from mib_to_py.bindings import BaseType, models
"""

from mib_to_py.bindings import models
from mib_to_py.bindings.models import (
    BaseNode,
    BaseType,
    ColumnNode,
    Enum,
    NotificationNode,
    Range,
    RowNode,
    ScalarNode,
    TableNode,
    Type,
)

__all__ = [
    "models",
    "BaseType",
    "BaseNode",
    "ColumnNode",
    "Enum",
    "NotificationNode",
    "Range",
    "RowNode",
    "ScalarNode",
    "TableNode",
    "Type",
]
