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

USAGE = 'usage: hline [-c|--config PATH] [-a|--all] [-p|--program] [-h|--help] [-V|--version] [EXPRESSION]'

HELP = USAGE + '''

Applies a Haskell EXPRESSION to standard input, using ghc -e.

    -c, --config PATH   Definitions file, spliced into the program ahead of
                        EXPRESSION. Without -c, $XDG_CONFIG_HOME/hline/definitions.hs
                        (or $HLINE_CONFIG) is used, if it exists.

    -a, --all           Apply EXPRESSION once, to the list of all input lines.
                        Without -a, EXPRESSION is applied to each line.

    -p, --program       Print the generated program instead of running it.

    -h, --help          Print this message.

    -V, --version       Print the version of hline.

    EXPRESSION          A Haskell function. Defaults to id.

Results that are strings are printed as is. Anything else is printed
the way show renders it.

These names can be used without qualification or imports:

{builtins}

Examples:

    $ echo "hello world" | hline length
    11
    $ echo "hello world" | hline reverse
    dlrow olleh
    $ printf '3\\n1\\n2\\n' | hline -a sort
    ["1","2","3"]
    $ echo aabbcc | hline group
    ["aa","bb","cc"]

Environment:

    HLINE_GHC       ghc executable to run (default: ghc, found on PATH).
    HLINE_CONFIG    Default definitions file.
    HLINE_TRACE     If set, a file recording the request and the ghc command.
'''
