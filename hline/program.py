# This file is part of hline.
#
# hline is free software: you can redistribute it and/or modify it
# under the terms of the GNU General Public License as published by the
# Free Software Foundation, either version 3 of the License, (or at your
# option) any later version.
#
# hline is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or
# FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License
# for more details.
#
# You should have received a copy of the GNU General Public License
# along with hline.  If not, see <https://www.gnu.org/licenses/>.

"""Assembles the GHCi program that ghc -e evaluates.

The program is a sequence of GHCi statements, in this order:

    - builtin aliases, one statement each (C{sort = Data.List.sort}, ...),
    - the user's definitions, verbatim, as one statement,
    - C{userFn = (EXPRESSION)},
    - the display helper and the entry point for the selected mode.

Every statement is a separate GHCi input, so a later binding shadows an earlier
one of the same name. That is how a definitions file overrides a builtin alias.
A statement spanning several lines is wrapped in a GHCi :{ ... :} block.

Assembly is plain string concatenation and can't fail. The expression and the
definitions are not parsed, quoted or escaped; ghc reports any problem with them.
"""

from enum import Enum

import hline.builtin

USER_FUNCTION = 'userFn'
DISPLAY_FUNCTION = 'hlineDisplay'
IDENTITY = 'id'
BLOCK_OPEN = ':{'
BLOCK_CLOSE = ':}'

# Strings are written as is, anything else as show renders it.
DISPLAY = (f'{DISPLAY_FUNCTION} x = '
           f'Data.Maybe.fromMaybe (show x) (Data.Typeable.cast x)')
LINE_BUFFERING = 'System.IO.hSetBuffering System.IO.stdout System.IO.LineBuffering'


class Mode(Enum):
    PER_LINE = 'per-line'
    WHOLE_INPUT = 'whole-input'

    @staticmethod
    def of(all_input):
        return Mode.WHOLE_INPUT if all_input else Mode.PER_LINE

    def entry_point(self):
        if self is Mode.PER_LINE:
            # lazy: each line is written as soon as it is read and transformed
            return f'interact (unlines . map ({DISPLAY_FUNCTION} . {USER_FUNCTION}) . lines)'
        else:
            return f'interact ((++ "\\n") . {DISPLAY_FUNCTION} . {USER_FUNCTION} . lines)'


class Program(object):

    def __init__(self, mode, statements):
        self.mode = mode
        self._statements = tuple(statements)

    def __repr__(self):
        return f'Program({self.mode.value}, {len(self._statements)} statements)'

    def __str__(self):
        return '\n'.join(self.lines())

    def statements(self):
        return list(self._statements)

    def lines(self):
        lines = []
        for statement in self._statements:
            statement_lines = statement.split('\n')
            if len(statement_lines) > 1 and statement_lines[-1] == '':
                del statement_lines[-1]
            if len(statement_lines) > 1:
                lines.append(BLOCK_OPEN)
                lines.extend(statement_lines)
                lines.append(BLOCK_CLOSE)
            else:
                lines.extend(statement_lines)
        return lines


def user_function(expression):
    if expression is None or len(expression.strip()) == 0:
        expression = IDENTITY
    return f'{USER_FUNCTION} = ({expression})'


def assemble(mode, expression=None, definitions='', builtins=None):
    if builtins is None:
        builtins = hline.builtin.BUILTINS
    statements = hline.builtin.aliases(builtins)
    if definitions and len(definitions.strip()) > 0:
        statements.append(definitions)
    statements.append(user_function(expression))
    statements.append(DISPLAY)
    statements.append(LINE_BUFFERING)
    statements.append(mode.entry_point())
    return Program(mode, statements)
