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

from hline.exception import UsageException

END_OF_FLAGS = '--'


def _report_error(message):
    raise UsageException(message)


class Arg(object):

    def __init__(self, default):
        self.var = None  # Filled in by CommandLine
        self.default = default

    def register_flags(self, all_flags):
        pass

    def has_flag(self, flag):
        return False

    def is_anon(self):
        return False

    def is_boolean(self):
        return False


class AnonArg(Arg):

    def __repr__(self):
        return 'anon()'

    def is_anon(self):
        return True


class FlagArg(Arg):

    def __init__(self, f1, f2, default):
        super().__init__(default)
        self.short = None
        self.long = None
        for f in (f1, f2):
            if f is None:
                continue
            if FlagArg.short_flag(f) and self.short is None:
                self.short = f
            elif FlagArg.long_flag(f) and self.long is None:
                self.long = f
            else:
                _report_error(f'If two flags are specified, one must be long and one must be short: {f1}, {f2}')

    def __repr__(self):
        return (f'{self.short}|{self.long}' if self.short and self.long else
                self.short if self.short else
                self.long)

    def register_flags(self, all_flags):
        for flag in (self.short, self.long):
            if flag is not None:
                if flag in all_flags:
                    _report_error(f'Duplicated flag: {flag}')
                all_flags.add(flag)

    def has_flag(self, flag):
        return self.short == flag or self.long == flag

    @staticmethod
    def short_flag(f):
        FlagArg.check_valid_flag(f)
        return f[0] == '-' and f[1] != '-'

    @staticmethod
    def long_flag(f):
        FlagArg.check_valid_flag(f)
        return f.startswith('--')

    @staticmethod
    def check_valid_flag(f):
        if len(f) < 2 or f[0] != '-' or f == END_OF_FLAGS:
            _report_error(f'Invalid flag: {f}')


class BooleanFlagArg(FlagArg):

    def __repr__(self):
        return f'boolean({super().__repr__()})'

    def is_boolean(self):
        return True


class CommandLine(object):
    """Describes the command line as keyword args: var=flag(...), var=boolean_flag(...), var=anon().

    parse() returns a dict mapping each var to its value, default if not specified.
    At most one anon() may be given, and it accepts at most one value.
    """

    def __init__(self, **var_arg):
        self.var_arg = var_arg
        anon_seen = False
        for var, arg in self.var_arg.items():
            if not isinstance(arg, Arg):
                _report_error(f'Arg value must be flag(), boolean_flag(), or anon(): {arg}')
            if arg.is_anon():
                if anon_seen:
                    _report_error('Too many anon() specified.')
                anon_seen = True
            arg.var = var
        all_flags = set()
        for arg in self.var_arg.values():
            arg.register_flags(all_flags)

    def parse(self, argv):
        def isflag(token):
            return len(token) > 1 and token.startswith('-')

        def arg_of(flag):
            for arg in self.var_arg.values():
                if arg.has_flag(flag):
                    return arg
            _report_error(f'Unrecognized flag: {flag}')

        def anon_arg():
            for arg in self.var_arg.values():
                if arg.is_anon():
                    return arg
            return None

        # Generator yielding (arg, value) for flags, and (None, token) for anything else.
        def token_scan():
            a = 0
            flags_done = False
            while a < len(argv):
                token = argv[a]
                a += 1
                if flags_done or not isflag(token):
                    yield None, token
                elif token == END_OF_FLAGS:
                    flags_done = True
                else:
                    arg = arg_of(token)
                    if arg.is_boolean():
                        yield arg, True
                    elif a == len(argv) or isflag(argv[a]):
                        _report_error(f'Value missing for flag: {token}')
                    else:
                        a += 1
                        yield arg, argv[a - 1]

        values = {var: arg.default for var, arg in self.var_arg.items()}
        anon = []
        for arg, value in token_scan():
            if arg is None:
                anon.append(value)
            else:
                values[arg.var] = value
        if anon:
            anon_target = anon_arg()
            if anon_target is None:
                _report_error(f'Unexpected argument: {anon[0]}')
            if len(anon) > 1:
                _report_error(f'Too many arguments: {anon}')
            values[anon_target.var] = anon[0]
        return values


def flag(f1, f2=None, default=None):
    return FlagArg(f1, f2, default)


def boolean_flag(f1, f2=None, default=False):
    return BooleanFlagArg(f1, f2, default)


def anon(default=None):
    return AnonArg(default)
