from __future__ import annotations
import copy
import logging
import typing
from .. import adapters, config
from ..equality import loose_equals
from ..errors import NoRootFound
from ..types import *

if typing.TYPE_CHECKING:
    from ..collection import Collection

logger = logging.getLogger(__name__)


class _TreeOperations(Generic[T]):
    """
    builds trees out of flat records linked by an id field and a parent id field.
    records are copied before being decorated with their children, the input
    collection is never modified.
    """

    def group_by_recursive(self: 'Collection[T]',
                           id_field: str,
                           parent_id_field: str,
                           children_field: Optional[str] = None,
                           parent_id_value: Any = None) -> 'Collection[T]':
        """
        the records whose parent id equals parent_id_value, each carrying its own
        children (computed the same way) under children_field.

        every level re-partitions the remaining records, o(n^2) in the worst case.
        recursion depth is bounded by the depth of the hierarchy.
        """
        children_field = children_field or config.settings.children_field
        read_id = adapters.property_selector(id_field)
        read_parent_id = adapters.property_selector(parent_id_field)

        # direct children and everything else, both fields may be paths
        children, not_children = self.partition(
            lambda element: loose_equals(read_parent_id(element), parent_id_value))

        def attach(child: T) -> T:
            node = copy.copy(child)
            adapters.assign_field(node, children_field, not_children.group_by_recursive(
                id_field, parent_id_field, children_field, read_id(child)))
            return node

        return children.map(attach)

    def to_tree(self: 'Collection[T]',
                id_field: str,
                parent_id_field: str,
                children_field: Optional[str] = None) -> 'Collection[Any]':
        """
        infer the root(s) and build the tree.

        roots are the parent ids that never occur as an id (usually none).
        one root gives the collection of top-level nodes, several roots give a
        collection holding one forest per root. no root raises NoRootFound.
        """
        root_ids = self.map(parent_id_field).uniq().difference(self.map(id_field).uniq())
        logger.debug(f"to_tree inferred {root_ids.count()} root(s): {root_ids.to_array()!r}")

        if root_ids.count() == 1:
            return self.group_by_recursive(id_field, parent_id_field, children_field, root_ids.head().get())
        elif root_ids.count() > 1:
            return root_ids.map(
                lambda root_id: self.group_by_recursive(id_field, parent_id_field, children_field, root_id))
        raise NoRootFound(f"no root found for '{parent_id_field}' -> '{id_field}', the data is cyclic or empty")
