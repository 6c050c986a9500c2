from enum import Enum


class NamesEnum(str, Enum):
    DEFAULT_BRANCH = 'master'
    DEFAULT_REPOSITORY = 'test'

    LOG_LEVEL_VARIABLE = 'MEMVCS_LOG_LEVEL'
    LOG_SEPARATOR = '-' * 20
