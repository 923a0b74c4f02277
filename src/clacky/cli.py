from os import isatty
import sys
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging

from prompt_toolkit import PromptSession

from .util import ClackyError
from .machine import Machine
from .lexer import Lexer
from .storage import InMemoryStorage, OnDiskStorage


logger = logging.getLogger(__name__)


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    history=None,  # TODO: ~/.clacky_history
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the calculator.
    '''

    DEFAULT_PROMPT = '> '
    QUIT = 'quit'

    def dumper(self):
        '''
        Dump all lexemes matches, parse, and arity.
        '''
        machine = Machine()
        lexer = Lexer()
        print('[groups]\t<repr(lexeme)>\t<arity>')
        for line in self.args.expressions:
            for match in lexer.lex(line):
                if not lexer.isfeedable(match):
                    continue
                matched = match.group(0)
                groups = lexer.matchedgroups(match)
                try:
                    parsed = machine.parse(groups)
                except ClackyError as e:
                    print(e.args[0], file=sys.stderr)
                    continue
                print(*groups.keys(),
                      repr(matched),
                      machine._arity(parsed),
                      sep='\t')

    def executor(self):
        '''
        Run machine (RPN calculator), showing the stack after each line.
        '''
        machine = Machine(storage=self._storage())
        for line in self.args.expressions:
            if line.strip() == self.QUIT:
                break
            try:
                machine.run(line)
            # Abort entire rest of line, makes sense anyway
            except ClackyError as e:
                if self.args.verbose:
                    logger.exception('Error in line %r', line)
                print('{}: {}'.format(type(e).__name__, e.args[0]),
                      file=sys.stderr)
            if not self.args.quiet:
                for level in machine.stack.display():
                    print(level)

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        lexer = Lexer()
        print(lexer.LEXEME)

    def _storage(self):
        if self.args.registers is None:
            return InMemoryStorage()
        return OnDiskStorage(self.args.registers)

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(sys.stdin.fileno()) and isatty(sys.stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Exact rational RPN calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-q', '--quiet',
                                          action='store_true',
                                          help="don't show the stack")
        self.argument_parser.add_argument('-r', '--registers',
                                          metavar='DIR',
                                          help='keep registers as files in DIR')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(
            level=logging.INFO if self.args.verbose else logging.WARNING)
        if self.args.expressions is None and \
           self.args.action in (self.executor, self.dumper):
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            sys.exit(1)


def main():
    CLI().run()
