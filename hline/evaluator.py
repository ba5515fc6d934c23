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
import subprocess
import sys

import hline.exception
import hline.util

DEFAULT_EXECUTABLE = 'ghc'
EVALUATE_FLAG = '-e'


# Runs an assembled program with ghc -e. stdin, stdout and stderr are inherited
# from hline, not piped, so ghc reads the caller's input and its output reaches
# the caller exactly as ghc produces it.
class Evaluator(object):

    def __init__(self, executable=None, trace=None):
        if executable is None:
            executable = os.environ.get('HLINE_GHC', DEFAULT_EXECUTABLE)
        self.executable = executable
        self.trace = trace if trace else hline.util.NoTrace()

    def __repr__(self):
        return f'Evaluator({self.executable})'

    def command(self, program):
        command = [self.resolved_executable()]
        for line in program.lines():
            command.append(EVALUATE_FLAG)
            command.append(line)
        return command

    def resolved_executable(self):
        path = hline.util.executable(self.executable)
        if path is None:
            raise hline.exception.EvaluatorNotFoundException(self.executable)
        return path

    def run(self, program):
        command = self.command(program)
        self.trace.write(f'evaluator command: {command}')
        sys.stdout.flush()
        sys.stderr.flush()
        process = subprocess.Popen(command)
        Evaluator.wait(process)
        self.trace.write(f'evaluator exit: {process.returncode}')
        return Evaluator.exit_code(process.returncode)

    # ctrl-C goes to ghc as well, (same process group). However many times it is
    # pressed, keep waiting until ghc is done, and report how it ended.
    @staticmethod
    def wait(process):
        while True:
            try:
                return process.wait()
            except KeyboardInterrupt:
                pass

    @staticmethod
    def exit_code(returncode):
        # Popen reports death by signal N as -N. Shells report 128 + N.
        return 128 - returncode if returncode < 0 else returncode
