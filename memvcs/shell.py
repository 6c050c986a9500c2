import argparse
import cmd
import logging
import os
import sys

from memvcs.commit_chain import Commit
from memvcs.names_enum import NamesEnum
from memvcs.repository import Repository, CommitIdOverflowError


class MemVCSShell(cmd.Cmd):
    intro = 'memvcs shell, type help or ? to list commands'
    prompt = '(memvcs) '

    def __init__(self, stdin=None, stdout=None):
        super(MemVCSShell, self).__init__(stdin=stdin, stdout=stdout)
        if stdin is not None:
            self.use_rawinput = False
        self.repository: Repository = None

        self._commit_parser = None
        self._initialize_argparsers()

    def do_init(self, arg: str):
        '''Initialize repository
        init [name]'''
        if self.repository:
            print(f'repository {self.repository.name} already initialized')
            return

        name = arg.strip() or NamesEnum.DEFAULT_REPOSITORY.value
        self.repository = Repository(name)
        self._update_prompt()

        print(f'initialized repository {name}')

    def do_commit(self, arg: str):
        '''Create a new commit
        commit -m message'''
        if not self._check_repository():
            return

        arg = arg.split()
        try:
            values = vars(self._commit_parser.parse_args(arg))
        except SystemExit:
            return

        try:
            commit = self.repository.commit(' '.join(values['m']))
        except CommitIdOverflowError as error:
            print(f'can not commit: {error}')
            return

        print(f'[{self.repository.current_branch.name} {commit.id}] {commit.message}')

    def do_log(self, arg: str):
        '''Show all commits of the current branch up to the first'''
        if not self._check_repository():
            return

        history = self.repository.log()
        for commit in history:
            self._print_commit_info(commit)
            print(NamesEnum.LOG_SEPARATOR.value)
        print(f'{len(history)} commit(s)')

    def do_checkout(self, arg: str):
        '''Move head to a branch, creating it if it does not exist
        checkout branch_name'''
        if not self._check_repository():
            return
        branch_name = arg.strip()
        if not branch_name:
            print('pass the argument')
            return

        is_new = branch_name not in self.repository.get_branches_names()
        self.repository.checkout(branch_name)
        self._update_prompt()

        if is_new:
            print(f"switched to a new branch '{branch_name}'")
        else:
            print(f"switched to branch '{branch_name}'")

    def do_branch(self, arg: str):
        '''List branches'''
        if not self._check_repository():
            return

        current = self.repository.current_branch.name
        for branch_name in self.repository.get_branches_names():
            marker = '*' if branch_name == current else ' '
            print(f'{marker} {branch_name}')

    def do_status(self, arg: str):
        '''Show the current branch and its tip'''
        if not self._check_repository():
            return

        print(f'current branch: {self.repository.current_branch.name}')
        commit = self.repository.get_commit_from_head()
        if commit is None:
            print('no commits yet')
        else:
            self._print_commit_info(commit)

    def do_exit(self, arg: str):
        '''Leave the shell'''
        return True

    def do_EOF(self, arg: str):
        print()
        return True

    def emptyline(self):
        pass

    def _initialize_argparsers(self):
        self._commit_parser = argparse.ArgumentParser(prog='commit')
        self._commit_parser.add_argument('-m', nargs='+', required=True, help='commit message')

    def _check_repository(self) -> bool:
        if self.repository is None:
            print('not a repository, run init first')
            return False

        return True

    def _update_prompt(self):
        self.prompt = f'({self.repository.name}:{self.repository.current_branch.name}) '

    @staticmethod
    def _print_commit_info(commit: Commit):
        print(f'{commit.id} | {commit.message}')


def get_log_level() -> int:
    '''Return the level named by the environment, WARNING for unknown names'''
    name = os.environ.get(NamesEnum.LOG_LEVEL_VARIABLE.value, 'WARNING').upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.WARNING

    return level


def main(argv=None) -> int:
    logging.basicConfig(level=get_log_level())

    if argv is None:
        argv = sys.argv[1:]

    shell = MemVCSShell()
    if not argv:
        shell.cmdloop()
        return 0

    command = argv[0]
    if command != 'init':
        shell.onecmd('init')
    shell.onecmd(' '.join(argv))

    return 0
