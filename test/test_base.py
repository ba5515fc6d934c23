import contextlib
import io
import os
import pathlib
import shutil
import subprocess
import sys
import time

import dill.source

import hline.main


TEST_TIMING = False
PROJECT_DIR = pathlib.Path(__file__).resolve().parent.parent


def timeit(f):
    def timetest():
        start = time.time()
        f()
        stop = time.time()
        usec = (stop - start) * 1000000
        print(f'TEST TIMING -- {f.__name__}: {usec}')
    timetest.__name__ = f.__name__
    return timetest if TEST_TIMING else f


def ghc_available():
    return shutil.which('ghc') is not None


class TestBase:
    test_home = '/tmp/hline_test_home'

    def __init__(self):
        self.failures = 0
        self.reset_environment()

    def reset_environment(self):
        os.environ['HOME'] = TestBase.test_home
        for var in ('XDG_CONFIG_HOME', 'HLINE_CONFIG', 'HLINE_GHC', 'HLINE_TRACE'):
            os.environ.pop(var, None)
        shutil.rmtree(TestBase.test_home, ignore_errors=True)
        os.makedirs(TestBase.test_home)

    def path(self, filename):
        return pathlib.Path(TestBase.test_home) / filename

    def new_file(self, filename, contents='', executable=False):
        path = self.path(filename)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(contents)
        if executable:
            path.chmod(0o755)
        return path

    def delete_files(self, *filenames):
        for filename in filenames:
            try:
                os.remove(self.path(filename))
            except IsADirectoryError:
                shutil.rmtree(self.path(filename))
            except FileNotFoundError:
                pass

    def description(self, x):
        if isinstance(x, str):
            return x
        if isinstance(x, (list, tuple)):
            return ' '.join(x)
        # Skip decorators
        source_lines = [line.strip() for line in dill.source.getsource(x).split('\n')]
        return next((line for line in source_lines if line.startswith('def ')), source_lines[0])

    def fail(self, test, message):
        print(f'{self.description(test)} failed: {message}', file=sys.__stdout__)
        self.failures += 1
        raise AssertionError(f'{self.description(test)}: {message}')

    def to_string(self, x):
        if isinstance(x, str):
            return x
        elif isinstance(x, tuple) or isinstance(x, list):
            return '\n'.join([str(o) for o in x])
        else:
            return str(x)

    def remove_empty_line_at_end(self, lines):
        if len(lines) > 0 and len(lines[-1]) == 0:
            del lines[-1]
        return lines

    def check_ok(self, test, expected, actual):
        expected = self.remove_empty_line_at_end(self.to_string(expected).split('\n'))
        actual = self.remove_empty_line_at_end(self.to_string(actual).split('\n'))
        if expected != actual:
            print(f'{self.description(test)} failed:', file=sys.__stdout__)
            print(f'    expected:\n<<<{expected}>>>', file=sys.__stdout__)
            print(f'    actual:\n<<<{actual}>>>', file=sys.__stdout__)
            self.failures += 1
            raise AssertionError(f'{self.description(test)}: expected {expected}, actual {actual}')

    def check_substring(self, test, expected, actual):
        if expected not in actual:
            print(f'{self.description(test)} failed. Expected substring not found in actual:', file=sys.__stdout__)
            print(f'    expected:\n<<<{expected}>>>', file=sys.__stdout__)
            print(f'    actual:\n<<<{actual}>>>', file=sys.__stdout__)
            self.failures += 1
            raise AssertionError(f'{self.description(test)}: {expected!r} not in {actual!r}')

    def check_true(self, test, condition, message='condition is false'):
        if not condition:
            self.fail(test, message)

    def run_tests(self, *tests):
        for test in tests:
            try:
                test()
            except AssertionError:
                # Already reported and counted
                pass

    def report_failures(self, label):
        print(f'{self.failures} failures: {label}')


class TestHline(TestBase):

    # Runs hline as a separate process: ghc inherits hline's stdout and stderr, so output
    # can only be captured outside the hline process.
    def run(self,
            argv,
            input='',
            expected_out=None,
            expected_err=None,
            expected_exit=0,
            env=None):
        print(f'TESTING: {self.description(argv)}')
        process_env = dict(os.environ)
        process_env['PYTHONPATH'] = str(PROJECT_DIR)
        if env:
            process_env.update(env)
        completed = subprocess.run([sys.executable, '-m', 'hline.main', *argv],
                                   input=input,
                                   capture_output=True,
                                   text=True,
                                   env=process_env,
                                   timeout=300)
        # expected_exit of None: any failure
        if (completed.returncode == 0 if expected_exit is None else completed.returncode != expected_exit):
            self.fail(argv, f'exit code {completed.returncode}, expected {expected_exit}. '
                            f'stderr: {completed.stderr}')
        if len(completed.stderr) > 0 and expected_err is None and expected_exit == 0:
            self.fail(argv, f'Unexpected error: {completed.stderr}')
        if expected_out is not None:
            self.check_ok(argv, expected_out, completed.stdout)
        if expected_err is not None:
            self.check_substring(argv, expected_err, completed.stderr)
        return completed

    # Runs hline in this process, for cases that don't start an evaluator.
    def run_and_capture_output(self, argv):
        stdout = io.StringIO()
        stderr = io.StringIO()
        with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
            exit_code = hline.main.main(argv)
        return exit_code, stdout.getvalue(), stderr.getvalue()

    # A stand-in for ghc, writing each of its arguments on a separate line.
    def fake_ghc_echo(self, exit_code=0):
        return self.new_file('bin/fake_ghc_echo',
                             '#!/bin/sh\n'
                             'for arg in "$@"; do printf "%s\\n" "$arg"; done\n'
                             f'exit {exit_code}\n',
                             executable=True)

    # A stand-in for ghc, copying stdin to stdout.
    def fake_ghc_cat(self):
        return self.new_file('bin/fake_ghc_cat',
                             '#!/bin/sh\n'
                             'exec cat\n',
                             executable=True)

    # A stand-in for ghc, terminated by a signal.
    def fake_ghc_killed(self):
        return self.new_file('bin/fake_ghc_killed',
                             '#!/bin/sh\n'
                             'kill -TERM $$\n',
                             executable=True)
