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
import pathlib
import shutil
import sys


def print_to_stderr(message):
    sys.stdout.flush()
    print(message, file=sys.stderr, flush=True)


def executable(name):
    return shutil.which(name)


def normalize_path(x):
    x = pathlib.Path(x)
    if x.as_posix().startswith('~'):
        x = x.expanduser()
    return x


class Trace(object):

    def __init__(self, tracefile):
        self.path = normalize_path(tracefile)
        self.path.touch(exist_ok=True)

    def write(self, line):
        with self.path.open(mode='a') as file:
            print(f'{os.getpid()}: {line}', file=file, flush=True)

    @staticmethod
    def from_environment():
        tracefile = os.environ.get('HLINE_TRACE', None)
        return Trace(tracefile) if tracefile else NoTrace()


class NoTrace(object):

    def write(self, line):
        pass
