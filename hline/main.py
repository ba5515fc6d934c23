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

import sys

import hline.builtin
import hline.cliargs
import hline.definitions
import hline.evaluator
import hline.exception
import hline.program
import hline.util
import hline.version
from hline.doc.help_hline import HELP, USAGE


def command_line():
    return hline.cliargs.CommandLine(
        config=hline.cliargs.flag('-c', '--config'),
        all=hline.cliargs.boolean_flag('-a', '--all'),
        program=hline.cliargs.boolean_flag('-p', '--program'),
        help=hline.cliargs.boolean_flag('-h', '--help'),
        version=hline.cliargs.boolean_flag('-V', '--version'),
        expression=hline.cliargs.anon())


def help_text():
    width = max(len(short) for short, _ in hline.builtin.BUILTINS)
    builtins = '\n'.join(f'    {short:{width}}  {qualified}'
                         for short, qualified in hline.builtin.builtins())
    return HELP.format(builtins=builtins)


class Main(object):

    def __init__(self, argv, evaluator=None, trace=None):
        self.argv = argv
        self.trace = trace if trace else hline.util.Trace.from_environment()
        self.evaluator = evaluator
        self.request = None

    def run(self):
        self.request = command_line().parse(self.argv)
        self.trace.write(f'request: {self.request}')
        if self.request['help']:
            print(help_text())
            return hline.exception.EXIT_OK
        if self.request['version']:
            print(f'hline {hline.version.VERSION}')
            return hline.exception.EXIT_OK
        program = self.assemble()
        if self.request['program']:
            print(program)
            return hline.exception.EXIT_OK
        if self.evaluator is None:
            self.evaluator = hline.evaluator.Evaluator(trace=self.trace)
        return self.evaluator.run(program)

    def assemble(self):
        path, definitions = hline.definitions.load_for(self.request['config'])
        self.trace.write(f'definitions: {path} ({len(definitions)} chars)')
        mode = hline.program.Mode.of(self.request['all'])
        return hline.program.assemble(mode, self.request['expression'], definitions)


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    try:
        return Main(argv).run()
    except hline.exception.UsageException as e:
        hline.util.print_to_stderr(e)
        hline.util.print_to_stderr(USAGE)
        return e.exit_code
    except hline.exception.HlineException as e:
        hline.util.print_to_stderr(e)
        return e.exit_code


if __name__ == '__main__':
    sys.exit(main())
