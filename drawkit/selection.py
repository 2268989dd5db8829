"""Single selection across one or more lists of selectable nodes."""

from __future__ import annotations

from functools import partial
from typing import Callable, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from drawkit.geometry import DrawError
from drawkit.settings import Hsv, NodeSettings

Callback = Callable[[], None]


class Node:
    """A selectable item that can ask to have its selection toggled."""

    def __init__(self, settings: Optional[NodeSettings] = None) -> None:
        settings = settings if settings is not None else NodeSettings()
        self.is_selected: bool = settings.is_selected
        self.highlight_color: Hsv = settings.highlight_color
        self._listeners: List[Callback] = []

    def toggle_select(self) -> None:
        """Notify every connected listener that a toggle was requested."""
        for listener in list(self._listeners):
            listener()

    @property
    def settings(self) -> NodeSettings:
        return NodeSettings(self.is_selected, self.highlight_color)

    def _connect(self, listener: Callback) -> None:
        self._listeners.append(listener)

    def _disconnect(self, listener: Callback) -> None:
        self._listeners.remove(listener)


class SelectableList:
    """An ordered collection of nodes with at most one selected index."""

    def __init__(self, nodes: Iterable[Node] = ()) -> None:
        self._nodes: List[Node] = list(nodes)
        self.selected: Optional[int] = None
        self._will_change: List[Callback] = []
        self._changed: List[Callable[[int], None]] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, index: int) -> Node:
        return self._nodes[index]

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def append(self, node: Node) -> None:
        """Add a node to the end of the list."""
        self._announce_change()
        self._nodes.append(node)
        self._announce_count()

    def resize(self, count: int) -> None:
        """Grow with default nodes or shrink to exactly ``count`` nodes."""
        if count < 0:
            raise ValueError(f"count must not be negative, got {count!r}")
        self._announce_change()
        del self._nodes[count:]
        self._nodes.extend(Node() for _ in range(count - len(self._nodes)))
        if self.selected is not None and self.selected >= count:
            self.selected = None
        self._announce_count()

    def _announce_change(self) -> None:
        for listener in list(self._will_change):
            listener()

    def _announce_count(self) -> None:
        count = len(self._nodes)
        for listener in list(self._changed):
            listener(count)


class SelectionBrain:
    """Keeps a single selected node across all of its lists."""

    def __init__(
        self, lists: Union[SelectableList, Sequence[SelectableList]]
    ) -> None:
        if isinstance(lists, SelectableList):
            lists = [lists]
        self._lists: List[SelectableList] = list(lists)
        self._connections: List[List[Tuple[Node, Callback]]] = [
            [] for _ in self._lists
        ]
        for list_index, selectable in enumerate(self._lists):
            selectable._will_change.append(partial(self._clear, list_index))
            selectable._changed.append(partial(self._on_count, list_index))
            self._on_count(list_index, len(selectable))

    def get_node(self, list_index: int, node_index: int) -> Node:
        return self._lists[list_index][node_index]

    def toggle_select(self, unordered: int, list_index: int) -> None:
        """Select the given node, or clear the selection if it was selected."""
        for index, selectable in enumerate(self._lists):
            was_selected = selectable.selected
            same_selection = was_selected == unordered and index == list_index

            if was_selected is not None:
                self.get_node(index, was_selected).is_selected = False
                selectable.selected = None

            if same_selection:
                return

        selectable = self._lists[list_index]
        node = self.get_node(list_index, unordered)
        selectable.selected = unordered
        node.is_selected = True

    def _clear(self, list_index: int) -> None:
        for node, listener in self._connections[list_index]:
            node._disconnect(listener)
        self._connections[list_index].clear()

    def _on_count(self, list_index: int, count: int) -> None:
        connections = self._connections[list_index]
        if len(connections) == count:
            return
        if connections:
            raise DrawError("unexpected change in count")
        for node_index, node in enumerate(self._lists[list_index]):
            listener = partial(self.toggle_select, node_index, list_index)
            node._connect(listener)
            connections.append((node, listener))