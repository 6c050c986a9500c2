import abc
from typing import Optional

from memvcs.commit_chain import Commit


class Reference(abc.ABC):
    @abc.abstractmethod
    def get_pointer(self) -> Optional[Commit]:
        pass


class Branch(Reference):
    '''Branch is a movable reference to a tip commit'''
    def __init__(self, name: str, commit: Optional[Commit] = None):
        self.name = name
        self.commit = commit

    def get_pointer(self) -> Optional[Commit]:
        return self.commit

    def move_to(self, commit: Commit):
        self.commit = commit

    def fork(self, name: str) -> "Branch":
        return Branch(name, self.commit)

    def __repr__(self):
        tip = self.commit.id if self.commit is not None else None
        return f'Branch({self.name!r}, tip={tip})'


class Head(Reference):
    '''Head is a reference to a current branch'''
    def __init__(self, branch: Branch):
        self.branch = branch

    def get_pointer(self) -> Optional[Commit]:
        return self.branch.get_pointer()
