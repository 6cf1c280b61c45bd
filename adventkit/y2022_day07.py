"""No space left on device: a directory tree rebuilt from a shell session."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

TOTAL_SPACE = 70_000_000
NEEDED_SPACE = 30_000_000
SMALL_LIMIT = 100_000


@dataclass
class Node:
    """A file or a directory; a directory's size is the sum of its children."""

    name: str
    size: int
    children: list[Node] = field(default_factory=list)
    is_file: bool = False

    def walk(self) -> Iterator[Node]:
        """Yield this node and then every descendant, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def render(self) -> str:
        """Draw the tree as indented ``<dir>`` and ``<file>`` elements."""
        return "".join(self._lines(0))

    def _lines(self, level: int) -> Iterator[str]:
        name = "__root__" if self.name == "/" else self.name
        attributes = f'name="{name}" size="{self.size}"'
        indent = "\t" * level
        if self.is_file:
            yield f"{indent}<file {attributes}/>\n"
            return
        yield f"{indent}<dir {attributes}>\n"
        for child in self.children:
            yield from child._lines(level + 1)
        yield f"{indent}</dir>\n"


def _directory(tokens: list[str], position: int, name: str) -> tuple[Node, int]:
    position += 2  # the listing command that follows every change of directory
    children: list[Node] = []
    while position < len(tokens):
        token = tokens[position]
        if token.isdigit():
            if position + 1 >= len(tokens):
                raise ValueError(f"file of size {token} has no name")
            children.append(Node(tokens[position + 1], int(token), is_file=True))
            position += 2
        elif token == "dir":
            position += 2
        elif token == "$":
            if position + 2 >= len(tokens):
                break
            target = tokens[position + 2]
            position += 3
            if target == "..":
                break
            child, position = _directory(tokens, position, target)
            children.append(child)
        else:
            position += 1
    return Node(name, sum(child.size for child in children), children), position


def parse_tree(text: str) -> Node:
    """Rebuild the tree from a session that starts by changing to the root."""
    tokens = text.split()
    if len(tokens) < 3 or tokens[0] != "$" or tokens[1] != "cd":
        raise ValueError("the session must start with a change of directory")
    root, _ = _directory(tokens, 3, tokens[2])
    return root


def _directories(root: Node) -> Iterator[Node]:
    return (node for node in root.walk() if not node.is_file)


def part_one(text: str) -> int:
    return sum(d.size for d in _directories(parse_tree(text)) if d.size <= SMALL_LIMIT)


def part_two(text: str) -> int:
    root = parse_tree(text)
    used = root.size
    if used > TOTAL_SPACE:
        raise ValueError("more space is used than the disk holds")
    to_delete = NEEDED_SPACE - (TOTAL_SPACE - used)
    if to_delete < 0:
        return used
    return min(
        (d.size for d in _directories(root) if d.size >= to_delete),
        default=used,
    )