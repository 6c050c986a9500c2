import logging
from typing import Optional

from memvcs.commit_chain import Commit, traverse
from memvcs.names_enum import NamesEnum
from memvcs.references import Branch, Head

logger = logging.getLogger(__name__)

# commit ids are kept within a signed 32-bit range
MAX_COMMIT_ID = 2 ** 31 - 1


class CommitIdOverflowError(OverflowError):
    def __init__(self, max_commit_id: int):
        super().__init__(f'commit id counter exhausted: no id left above {max_commit_id}')
        self.max_commit_id = max_commit_id


class Repository:
    def __init__(self,
                 name: str,
                 default_branch: str = NamesEnum.DEFAULT_BRANCH.value,
                 max_commit_id: int = MAX_COMMIT_ID):
        self._name = name
        self._last_commit_id = -1
        self.max_commit_id = max_commit_id

        branch = Branch(default_branch)
        self.branches: list[Branch] = [branch]
        self.head: Head = Head(branch)

        logger.debug('initialized repository %s on branch %s', name, default_branch)

    @property
    def name(self) -> str:
        return self._name

    @property
    def last_commit_id(self) -> int:
        return self._last_commit_id

    @property
    def current_branch(self) -> Branch:
        return self.head.branch

    def commit(self, message: str) -> Commit:
        new_id = self._last_commit_id + 1
        if new_id > self.max_commit_id:
            raise CommitIdOverflowError(self.max_commit_id)

        branch = self.current_branch
        parent = branch.get_pointer()
        if parent is None:
            new_commit = Commit(new_id, message)
        else:
            new_commit = parent.derive_commit(new_id, message)

        branch.move_to(new_commit)
        self._last_commit_id = new_id
        logger.debug('commit %d on branch %s: %s', new_id, branch.name, message)

        return new_commit

    def log(self) -> list[Commit]:
        return list(traverse(self.get_commit_from_head()))

    def checkout(self, branch_name: str) -> Branch:
        '''Move head to a branch, creating it from the current tip if it does not exist'''
        branch = self._find_branch(branch_name)
        if branch is None:
            branch = self.current_branch.fork(branch_name)
            self.branches.append(branch)
            logger.debug('created branch %s from %s', branch_name, self.current_branch.name)

        self.head = Head(branch)
        logger.debug('head moved to branch %s', branch_name)

        return branch

    def get_branch_by_name(self, branch_name: str) -> Branch:
        branch = self._find_branch(branch_name)
        if branch is None:
            raise KeyError(branch_name)

        return branch

    def get_branches_names(self) -> list[str]:
        return [branch.name for branch in self.branches]

    def get_commit_from_head(self) -> Optional[Commit]:
        return self.head.get_pointer()

    def _find_branch(self, branch_name: str) -> Optional[Branch]:
        # newest branch wins if names ever collide
        for branch in reversed(self.branches):
            if branch.name == branch_name:
                return branch

        return None
