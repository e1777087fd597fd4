# hostel_core/services/common/__init__.py
"""
Shared service-layer infrastructure.

- **EntityStore**: write transactions, graph snapshots and commit notifications
- **UnitOfWork**: transaction boundary and repository access
- **mapping**: model-to-schema conversions

Example usage:
    >>> from hostel_core.services.common import EntityStore
    >>> store = EntityStore.from_settings()
    >>> snapshot = store.read_graph()
"""

from hostel_core.services.common.entity_store import CommitEvent, EntityStore, build_snapshot
from hostel_core.services.common.mapping import (
    MappingError,
    to_optional_schema,
    to_schema,
    to_schema_list,
)
from hostel_core.services.common.unit_of_work import (
    UnitOfWork,
    is_contention_error,
    translate_store_error,
)

__all__ = [
    "CommitEvent",
    "EntityStore",
    "MappingError",
    "UnitOfWork",
    "build_snapshot",
    "is_contention_error",
    "to_optional_schema",
    "to_schema",
    "to_schema_list",
    "translate_store_error",
]
