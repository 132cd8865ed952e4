from os import isatty
import sys
from sys import stdin, stdout, exit
from traceback import print_exc
from argparse import ArgumentParser, REMAINDER, OPTIONAL

from prompt_toolkit import PromptSession

from .util import Base26Error
from .calculator import Calculator
from .lexer import Lexer
from .postfix import to_postfix, format_postfix


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    enable_suspend=True,
                                    history=None,
                                    prompt_continuation=' ' * len(self.prompt),
                                    mouse_support=False,
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the base 26 calculator.
    '''

    DEFAULT_PROMPT = '> '
    # Sentinel line ending the session, compared case-insensitively.
    EXIT = 'EXIT'
    BANNER = '\n'.join([
        'Base 26 calculator',
        'Supported operators: + - * / ^ %',
        'Example: 145B + 1524 * 154FE / 24GF - 4245EAC * 14DC - AB',
        "Enter an expression in base 26, or 'exit' to quit.",
    ])
    LABELS = {
        26: 'base 26',
        10: 'base 10',
        2: 'binary',
        16: 'hexadecimal',
    }

    def _lines(self):
        '''
        Yield normalised expressions until the exit sentinel.
        '''
        for line in self.args.expressions:
            expression = line.strip().upper()
            if expression == self.EXIT:
                return
            if expression:
                yield expression

    def _report(self, e):
        print('Error:', e.args[0], file=sys.stderr)
        if self.args.verbose:
            print_exc(file=sys.stderr)

    def dumper(self):
        '''
        Dump all tokens and the postfix order of each expression.
        '''
        lexer = Lexer()
        print('<kind>\t<repr(text)>')
        for expression in self._lines():
            try:
                tokens = list(lexer.lex(expression))
                for token in tokens:
                    print(token.kind, repr(token.text), sep='\t')
                print('postfix', format_postfix(to_postfix(tokens)), sep='\t')
            except Base26Error as e:
                self._report(e)

    def executor(self):
        '''
        Evaluate each expression, printing its tree and results.
        '''
        calculator = Calculator(max_exponent=self.args.max_exponent,
                                max_tokens=self.args.max_tokens)
        if self._interactive():
            print(self.BANNER)
        for expression in self._lines():
            # One bad expression never ends the session.
            try:
                # Tree first, so it is shown even when evaluation fails.
                tree = calculator.parse(expression)
                print('Tree:')
                print(*tree.render(), sep='\n')
                calculation = calculator.evaluate(expression, tree)
                for base, text in calculation.formats().items():
                    print('{}: {}'.format(self.LABELS[base], text))
            except Base26Error as e:
                self._report(e)

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        lexer = Lexer()
        print(lexer.LEXEME)

    def _prompting_input(self):
        '''
        Return the source of expressions when none were given.

        Prompts when either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(stdin.fileno()) and isatty(stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='Base 26 calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('--max-exponent', type=int,
                                          metavar='N',
                                          help='largest exponent allowed')
        self.argument_parser.add_argument('--max-tokens', type=int,
                                          metavar='N',
                                          help='largest expression allowed')
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
                                      ('-P', '--postfix', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=stdin)

    def _interactive(self):
        return isinstance(self.args.expressions, InteractiveInput)

    def run(self, *, args=None):
        '''
        Parse args (sys.argv by default) and run the selected action.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)
