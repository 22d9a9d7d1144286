import logging
from collections import deque
from typing import TypeVar, Generic, Deque, List, Optional, Tuple

from tree_errors import EmptyTreeError
from tree_settings import TreeSettings

T = TypeVar('T')

logger = logging.getLogger(__name__)


class OrderedTree(Generic[T]):
    """
    Unbalanced binary search tree.

    Every value in a node's left subtree is smaller than the node's value and
    every value in its right subtree is larger. Matching uses only ``<`` and
    ``>``, so two values that compare neither smaller nor larger are treated
    as the same element and inserting the second one is a no-op.

    No rebalancing is done: inserting sorted input produces a chain whose
    height equals its size. Use ``TreeSettings(iterative=True)`` for such
    workloads so that no operation depends on the interpreter's recursion
    limit.
    """

    class Node:
        def __init__(
            self,
            value: T,
            left: Optional['OrderedTree.Node'] = None,
            right: Optional['OrderedTree.Node'] = None,
        ) -> None:
            self.value: T = value
            self.left: Optional['OrderedTree.Node'] = left
            self.right: Optional['OrderedTree.Node'] = right

    def __init__(self, settings: Optional[TreeSettings] = None) -> None:
        self._root: Optional[OrderedTree.Node] = None
        self._settings: TreeSettings = settings if settings is not None else TreeSettings()

    @property
    def settings(self) -> TreeSettings:
        return self._settings

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert(self, value: T) -> None:
        if self._settings.iterative:
            self._insert_iterative(value)
        else:
            self._root = self._insert(self._root, value)

    def remove(self, value: T) -> None:
        if self._settings.iterative:
            self._remove_iterative(value)
        else:
            self._root = self._remove(self._root, value)

    def make_empty(self) -> None:
        logger.debug("make_empty: discarding all nodes")
        self._root = None

    def _insert(self, node: Optional[Node], value: T) -> Node:
        if node is None:
            logger.debug("inserted %r", value)
            return OrderedTree.Node(value)

        if value < node.value:
            node.left = self._insert(node.left, value)
        elif value > node.value:
            node.right = self._insert(node.right, value)
        else:
            logger.debug("ignored duplicate %r", value)
        return node

    def _insert_iterative(self, value: T) -> None:
        if self._root is None:
            self._root = OrderedTree.Node(value)
            logger.debug("inserted %r", value)
            return

        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = OrderedTree.Node(value)
                    logger.debug("inserted %r", value)
                    return
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = OrderedTree.Node(value)
                    logger.debug("inserted %r", value)
                    return
                node = node.right
            else:
                logger.debug("ignored duplicate %r", value)
                return

    def _remove(self, node: Optional[Node], value: T) -> Optional[Node]:
        if node is None:
            logger.debug("remove ignored, %r not present", value)
            return None

        if value < node.value:
            node.left = self._remove(node.left, value)
        elif value > node.value:
            node.right = self._remove(node.right, value)
        else:
            logger.debug("removed %r", node.value)
            return self._unlink(node)
        return node

    def _remove_iterative(self, value: T) -> None:
        parent: Optional[OrderedTree.Node] = None
        node = self._root
        is_left_child = False

        while node is not None:
            if value < node.value:
                parent, node, is_left_child = node, node.left, True
            elif value > node.value:
                parent, node, is_left_child = node, node.right, False
            else:
                break

        if node is None:
            logger.debug("remove ignored, %r not present", value)
            return

        logger.debug("removed %r", node.value)
        replacement = self._unlink(node)
        if parent is None:
            self._root = replacement
        elif is_left_child:
            parent.left = replacement
        else:
            parent.right = replacement

    def _unlink(self, node: Node) -> Optional[Node]:
        """Return what takes ``node``'s place once its value is deleted."""
        if node.left is not None and node.right is not None:
            node.value = self._find_min(node.right).value
            node.right = self._remove_min(node.right)
            return node
        return node.left if node.left is not None else node.right

    def _remove_min(self, node: Node) -> Optional[Node]:
        # The minimum has no left child, so splicing in its right child is enough.
        if node.left is None:
            return node.right
        parent = node
        child = node.left
        while child.left is not None:
            parent = child
            child = child.left
        parent.left = child.right
        return node

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def contains(self, value: T) -> bool:
        if self._settings.iterative:
            return self._find_node(self._root, value) is not None
        return self._contains(self._root, value)

    def find_min(self) -> T:
        if self._root is None:
            raise EmptyTreeError("find_min")
        return self._find_min(self._root).value

    def find_max(self) -> T:
        if self._root is None:
            raise EmptyTreeError("find_max")
        return self._find_max(self._root).value

    def is_empty(self) -> bool:
        return self._root is None

    def height(self) -> int:
        """Edges on the longest root-to-leaf path; -1 for an empty tree."""
        if self._settings.iterative:
            return len(self._levels()) - 1
        return self._height(self._root)

    def node_count(self) -> int:
        if self._settings.iterative:
            return len(self.breadth_first_traversal())
        return self._node_count(self._root)

    def is_full(self) -> bool:
        """True when no node has exactly one child. An empty tree is full."""
        if self._settings.iterative:
            stack = [self._root] if self._root is not None else []
            while stack:
                node = stack.pop()
                if (node.left is None) != (node.right is None):
                    return False
                if node.left is not None:
                    stack.append(node.left)
                    stack.append(node.right)
            return True
        return self._is_full(self._root)

    def _contains(self, node: Optional[Node], value: T) -> bool:
        if node is None:
            return False
        if value < node.value:
            return self._contains(node.left, value)
        if value > node.value:
            return self._contains(node.right, value)
        return True

    def _find_node(self, node: Optional[Node], value: T) -> Optional[Node]:
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return node
        return None

    def _find_min(self, node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    def _find_max(self, node: Node) -> Node:
        while node.right is not None:
            node = node.right
        return node

    def _height(self, node: Optional[Node]) -> int:
        if node is None:
            return -1
        return 1 + max(self._height(node.left), self._height(node.right))

    def _node_count(self, node: Optional[Node]) -> int:
        if node is None:
            return 0
        return 1 + self._node_count(node.left) + self._node_count(node.right)

    def _is_full(self, node: Optional[Node]) -> bool:
        if node is None:
            return True
        if node.left is None and node.right is None:
            return True
        if node.left is None or node.right is None:
            return False
        return self._is_full(node.left) and self._is_full(node.right)

    # ------------------------------------------------------------------
    # Structural comparison
    # ------------------------------------------------------------------

    def compare_structure(self, other: 'OrderedTree[T]') -> bool:
        """True when both trees have the same shape; values are ignored."""
        if self._settings.iterative:
            return self._match_pairs(self._root, other._root, compare_values=False, mirrored=False)
        return self._same_shape(self._root, other._root)

    def structural_equals(self, other: 'OrderedTree[T]') -> bool:
        """True when both trees have the same shape and equal values at every position."""
        if self._settings.iterative:
            return self._match_pairs(self._root, other._root, compare_values=True, mirrored=False)
        return self._equal_nodes(self._root, other._root)

    def is_mirror(self, other: 'OrderedTree[T]') -> bool:
        """True when ``other`` is the left-right reflection of this tree, values included."""
        if self._settings.iterative:
            return self._match_pairs(self._root, other._root, compare_values=True, mirrored=True)
        return self._mirrored_nodes(self._root, other._root)

    def _same_shape(self, a: Optional[Node], b: Optional[Node]) -> bool:
        if a is None and b is None:
            return True
        if a is None or b is None:
            return False
        return self._same_shape(a.left, b.left) and self._same_shape(a.right, b.right)

    def _equal_nodes(self, a: Optional[Node], b: Optional[Node]) -> bool:
        if a is None and b is None:
            return True
        if a is None or b is None or a.value != b.value:
            return False
        return self._equal_nodes(a.left, b.left) and self._equal_nodes(a.right, b.right)

    def _mirrored_nodes(self, a: Optional[Node], b: Optional[Node]) -> bool:
        if a is None and b is None:
            return True
        if a is None or b is None or a.value != b.value:
            return False
        return self._mirrored_nodes(a.left, b.right) and self._mirrored_nodes(a.right, b.left)

    def _match_pairs(
        self,
        a: Optional[Node],
        b: Optional[Node],
        compare_values: bool,
        mirrored: bool,
    ) -> bool:
        stack: List[Tuple[Optional[OrderedTree.Node], Optional[OrderedTree.Node]]] = [(a, b)]
        while stack:
            x, y = stack.pop()
            if x is None and y is None:
                continue
            if x is None or y is None:
                return False
            if compare_values and x.value != y.value:
                return False
            if mirrored:
                stack.append((x.right, y.left))
                stack.append((x.left, y.right))
            else:
                stack.append((x.right, y.right))
                stack.append((x.left, y.left))
        return True

    # ------------------------------------------------------------------
    # Derived trees
    # ------------------------------------------------------------------

    def copy(self) -> 'OrderedTree[T]':
        """Deep copy: same shape and values, no nodes shared with this tree."""
        clone: OrderedTree[T] = OrderedTree(self._settings)
        if self._settings.iterative:
            clone._root = self._rebuild(self._root, mirrored=False)
        else:
            clone._root = self._copy(self._root)
        logger.debug("copied tree")
        return clone

    def mirror(self) -> 'OrderedTree[T]':
        """
        Return a new tree that is the left-right reflection of this one.

        The result keeps every value but reverses the ordering: larger values
        now sit on the left. It is a shape transform only, so calling
        ``insert``, ``remove`` or ``contains`` on it with the same ``<``/``>``
        ordering gives meaningless answers. Mirror it again to get back a
        tree that is a valid search tree.
        """
        reflected: OrderedTree[T] = OrderedTree(self._settings)
        if self._settings.iterative:
            reflected._root = self._rebuild(self._root, mirrored=True)
        else:
            reflected._root = self._mirror(self._root)
        logger.debug("mirrored tree")
        return reflected

    def _copy(self, node: Optional[Node]) -> Optional[Node]:
        if node is None:
            return None
        return OrderedTree.Node(node.value, self._copy(node.left), self._copy(node.right))

    def _mirror(self, node: Optional[Node]) -> Optional[Node]:
        if node is None:
            return None
        return OrderedTree.Node(node.value, self._mirror(node.right), self._mirror(node.left))

    def _rebuild(self, node: Optional[Node], mirrored: bool) -> Optional[Node]:
        if node is None:
            return None
        root = OrderedTree.Node(node.value)
        stack = [(node, root)]
        while stack:
            source, target = stack.pop()
            left, right = (source.right, source.left) if mirrored else (source.left, source.right)
            if left is not None:
                target.left = OrderedTree.Node(left.value)
                stack.append((left, target.left))
            if right is not None:
                target.right = OrderedTree.Node(right.value)
                stack.append((right, target.right))
        return root

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def in_order_traversal(self) -> List[T]:
        result: List[T] = []
        if not self._settings.iterative:
            self._in_order(self._root, result)
            return result

        stack: List[OrderedTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def breadth_first_traversal(self) -> List[T]:
        result: List[T] = []
        if self._root is None:
            return result
        queue: Deque[OrderedTree.Node] = deque([self._root])
        while queue:
            node = queue.popleft()
            result.append(node.value)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return result

    def leveled_traversal(self) -> List[Tuple[int, List[T]]]:
        """Level-order values grouped by depth; the root is level 0."""
        return list(enumerate(self._levels()))

    def _in_order(self, node: Optional[Node], result: List[T]) -> None:
        if node is None:
            return
        self._in_order(node.left, result)
        result.append(node.value)
        self._in_order(node.right, result)

    def _levels(self) -> List[List[T]]:
        levels: List[List[T]] = []
        if self._root is None:
            return levels
        queue: Deque[OrderedTree.Node] = deque([self._root])
        while queue:
            level: List[T] = []
            for _ in range(len(queue)):
                node = queue.popleft()
                level.append(node.value)
                if node.left is not None:
                    queue.append(node.left)
                if node.right is not None:
                    queue.append(node.right)
            levels.append(level)
        return levels

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def print_tree(self) -> str:
        if self.is_empty():
            return "Empty tree"
        return "\n".join(str(value) for value in self.in_order_traversal())

    def format_levels(self) -> str:
        return "\n".join(" ".join(str(value) for value in level) for level in self._levels())

    def __len__(self) -> int:
        return self.node_count()

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __repr__(self) -> str:
        return f"OrderedTree({self.in_order_traversal()})"

    def __str__(self) -> str:
        return f"OrderedTree(size={self.node_count()}, height={self.height()})"
