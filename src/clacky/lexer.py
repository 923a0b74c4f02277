from functools import reduce
import operator

import regex


class Lexer:
    '''
    Lexer for the calculator's *regular* grammar.

    A line is numbers and words separated by whitespace. Which words mean
    something is the machine's business, not the lexer's.

    For consistency, for now, needs to be instantiated, despite holding no
    internal state.
    '''
    # Integer, optionally negative. No thousands separators, no plus sign.
    INTEGER = r'''
               (?:
                   -?
                   \d+
               )
               '''
    # 3, -3, 3/4, -3/-4 but not 3/ nor 3.5
    NUMBER = r'''
              (?:
                  {INTEGER}
                  (?:
                      /
                      {INTEGER}
                  )?
                  # Must end the word; 3abc is a (bad) word, not 3 and abc.
                  (?=\s|$)
              )
              '''.format(INTEGER=INTEGER)
    # Anything else that isn't whitespace: +, dup, rolld, 3abc, ...
    WORD = r'\S+'
    SPACE = r'\s+'

    # All possible lexemes. Order matters: -3 is a number, - alone a word.
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<word>' + WORD + r')|' \
             r'(?<space>' + SPACE + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.DOTALL,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def lex(self, line):
        '''
        Take a line and yield all lexemes, in order.
        '''
        pattern = regex.compile(type(self).LEXEME, flags=type(self).FLAGS)
        position = 0
        while position < len(line):
            match = pattern.match(line, position)
            yield match
            position = match.end()

    def isfeedable(self, match):
        '''
        Return True if lexeme can be fed to machine.
        '''
        return 'space' not in self.matchedgroups(match).keys()

    def matchedgroups(self, match):
        '''
        Return the named groups that matched, and what they matched.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}
