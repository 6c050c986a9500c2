from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass(frozen=True)
class Commit:
    '''Commit is an immutable record pointing to the previous commit of its chain'''
    id: int
    message: str
    # identity is the id, parent stays out of eq/hash/repr
    parent: Optional["Commit"] = field(default=None, compare=False, repr=False)

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def derive_commit(self, commit_id: int, message: str) -> "Commit":
        return Commit(commit_id, message, parent=self)


def traverse(start: Optional[Commit]) -> Iterator[Commit]:
    '''Yield start and all of its parents, newest first'''
    current_commit = start
    while current_commit is not None:
        yield current_commit
        current_commit = current_commit.parent
