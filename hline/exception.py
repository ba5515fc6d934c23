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

import os

EXIT_OK = 0
EXIT_USAGE = os.EX_USAGE
EXIT_CONFIG_NOT_FOUND = os.EX_NOINPUT
EXIT_EVALUATOR_NOT_FOUND = 127


# Exception for terminating hline before (or instead of) running the evaluator.
# By extending BaseException, this exception cannot be caught by "except Exception".
class HlineException(BaseException):

    def __init__(self, cause, exit_code=1):
        super().__init__(cause)
        self.cause = cause
        self.exit_code = exit_code

    def __str__(self):
        return str(self.cause)


class UsageException(HlineException):

    def __init__(self, cause):
        super().__init__(cause, EXIT_USAGE)


# An explicitly requested definitions file (-c) is missing or can't be read.
# A missing file at the default location is not an error.
class ConfigNotFoundException(HlineException):

    def __init__(self, path, reason=None):
        message = f'Definitions file not found: {path}'
        if reason:
            message = f'{message} ({reason})'
        super().__init__(message, EXIT_CONFIG_NOT_FOUND)
        self.path = path


class EvaluatorNotFoundException(HlineException):

    def __init__(self, executable):
        super().__init__(f'Haskell evaluator not found: {executable}. '
                         f'Install ghc, or set HLINE_GHC.',
                         EXIT_EVALUATOR_NOT_FOUND)
        self.executable = executable
