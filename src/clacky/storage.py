'''
Register storage: numbered registers holding Rationals.

Registers that were never stored to recall as zero, and stay that way.
'''

from abc import ABC, abstractmethod
from pathlib import Path
import logging

from .rational import Rational, ZERO
from .util import (ClackyError, NegativeRegisterNumber, StorageFailure,
                   wrap_user_errors)


logger = logging.getLogger(__name__)


class Storage(ABC):
    '''
    Interface to a register store. The number of registers is unbounded.
    '''

    @staticmethod
    def _check_register(register):
        if register < 0:
            raise NegativeRegisterNumber(
                'Negative register number {}'.format(register))

    @abstractmethod
    def store(self, value, register):
        '''
        Store value into register.

        :raises NegativeRegisterNumber:
        '''

    @abstractmethod
    def recall(self, register):
        '''
        Return value in register, or zero if register never stored to.

        :raises NegativeRegisterNumber:
        '''

    @abstractmethod
    def register_count(self):
        '''
        Return number of registers in use.
        '''


class InMemoryStorage(Storage):
    def __init__(self):
        self.registers = dict()

    def store(self, value, register):
        self._check_register(register)
        self.registers[register] = value

    def recall(self, register):
        self._check_register(register)
        return self.registers.get(register, ZERO)

    def register_count(self):
        return len(self.registers)


class OnDiskStorage(Storage):
    '''
    One file per register, named <register>.crg, holding the value as text.
    '''

    SUFFIX = '.crg'

    def __init__(self, directory='.'):
        self.directory = Path(directory)

    def _path(self, register):
        return self.directory / '{}{}'.format(register, self.SUFFIX)

    def store(self, value, register):
        self._check_register(register)
        path = self._path(register)
        logger.debug('Writing register %d to %s', register, path)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            # Never leave a half written register behind.
            partial = path.with_suffix('.tmp')
            partial.write_text(str(value) + '\n')
            partial.replace(path)
        except OSError as e:
            raise StorageFailure(
                'Failed to write register file {}: {}'.format(path, e)) from e

    def recall(self, register):
        self._check_register(register)
        path = self._path(register)
        logger.debug('Reading register %d from %s', register, path)
        try:
            text = path.read_text()
        except FileNotFoundError:
            return ZERO
        except OSError as e:
            raise StorageFailure(
                'Failed to read register file {}: {}'.format(path, e)) from e
        try:
            return Rational.parse(text)
        except ClackyError as e:
            raise StorageFailure(
                'Corrupt register file {}: {}'.format(path, e.args[0])) from e

    @wrap_user_errors('Cannot list registers in {0.directory}',
                      error=StorageFailure)
    def register_count(self):
        if not self.directory.is_dir():
            return 0
        return sum(1
                   for path
                   in self.directory.glob('*' + self.SUFFIX)
                   if path.is_file())
