"""Interactive console for generating, running and checking test cases."""

from __future__ import annotations

import os
import random
import subprocess
import sys
from collections import deque
from pathlib import Path

from fenwicklab.generate import DEFAULT_DIRECTORY, SMALL_TEST_NAME, gen_special_test, gen_test
from fenwicklab.runner import (
    benchmark_test_case,
    run_numbered_test_case,
    run_test_case,
    verify_test_case,
)
from fenwicklab.testcase import RANGE, UPDATE, InvalidTestCaseError, Query, TestCase

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

HELP_TEXT = """
====== Fenwick Tree ======
A Fenwick Tree implementation

Available Commands:
  g, generate    - Generate random test cases
  s, small       - Generate small test cases
  r, run         - Run test cases
  v, verify      - Verify test case correctness
  b, benchmark   - Benchmark test case performance
  p, print       - Print test cases
  i, input       - Input your own testcase
  c, clear       - Clear the screen
  h, help        - Show this help message
  e, exit        - Exit the program

For queries:
  1: update [index] [value] - Update value at index
  2: query [left] [right]   - Get sum from left to right

"""

PASSED = "✓ Verification PASSED: All results match the naive implementation.\n\n"
FAILED = "✗ Verification FAILED: Results do not match the naive implementation.\n\n"

_FAILURES = (InvalidTestCaseError, IndexError, OSError)


class Console:
    """Command loop reading whitespace-separated tokens from ``stdin``."""

    def __init__(self, stdin=None, stdout=None, directory=DEFAULT_DIRECTORY):
        self.stdin = sys.stdin if stdin is None else stdin
        self.stdout = sys.stdout if stdout is None else stdout
        self.directory = Path(directory)
        self.rng = random.Random()
        self._tokens = deque()
        self._commands = {}
        for names, handler in (
            (("g", "generate"), self.handle_generate),
            (("s", "small"), self.handle_small),
            (("r", "run"), self.handle_run),
            (("v", "verify"), self.handle_verify),
            (("b", "benchmark"), self.handle_benchmark),
            (("p", "print"), self.handle_print),
            (("i", "input"), self.handle_input),
            (("c", "clear"), self.clear_screen),
            (("h", "help"), self.print_help),
        ):
            for name in names:
                self._commands[name] = handler

    def _write(self, text):
        self.stdout.write(text)
        self.stdout.flush()

    def _next_token(self):
        while not self._tokens:
            line = self.stdin.readline()
            if not line:
                raise EOFError("end of input")
            self._tokens.extend(line.split())
        return self._tokens.popleft()

    def _discard_line(self):
        self._tokens.clear()

    def _path_for(self, filename):
        return self.directory / f"{filename}.txt"

    def _existing_path(self, filename):
        path = self._path_for(filename)
        if not path.is_file():
            self._write(f"Error: File '{path}' not found.\n\n")
            return None
        return path

    def _report_error(self, exc):
        self._write(f"Error: {exc}\n")

    def print_help(self):
        """Show the list of commands."""
        self._write(HELP_TEXT)

    def clear_screen(self):
        """Clear the terminal when attached to one."""
        isatty = getattr(self.stdout, "isatty", None)
        if isatty is not None and isatty():
            command = "cls" if os.name == "nt" else "clear"
            try:
                subprocess.run(command, shell=True, check=False)
            except OSError:
                pass
        self._write("Screen cleared.\n\n")

    def get_int(self, prompt, min_value=INT_MIN, max_value=INT_MAX):
        """Prompt until an integer within ``min_value..max_value`` is entered."""
        while True:
            self._write(prompt)
            token = self._next_token()
            try:
                value = int(token)
            except ValueError:
                self._discard_line()
                self._write("Invalid input. Please enter a number.\n")
                continue
            if min_value <= value <= max_value:
                return value
            self._write(f"Value must be between {min_value} and {max_value}.\n")

    def get_string(self, prompt):
        """Prompt for a single word."""
        self._write(prompt)
        return self._next_token()

    def get_yes_no(self, prompt):
        """Prompt until a yes or no answer is given."""
        while True:
            self._write(f"{prompt} (y/n): ")
            answer = self._next_token().lower()
            if answer in ("y", "yes"):
                return True
            if answer in ("n", "no"):
                return False
            self._write("Please enter 'y' or 'n'.\n")

    def _run(self, path, verify):
        try:
            run_test_case(path, verify, self.stdout)
        except FileNotFoundError:
            self._write(f"Error: Could not open file: {path}\n")
        except _FAILURES as exc:
            self._report_error(exc)

    def handle_generate(self):
        """Generate a numbered random test case, optionally running one."""
        number = self.get_int(
            "Enter the id of test case you want to generate (eg: 1): ", 1, 100
        )
        gen_test(number, self.directory, self.rng, self.stdout)
        self._write(f"Successfully generated: Testcase_{number}.txt\n\n")

        if self.get_yes_no("Would you like to run one of the generated test cases?"):
            test_number = self.get_int(
                "Enter the test case number to run (1, 2, 3, ...): ", 1, number
            )
            verify = self.get_yes_no("Would you like to verify the results?")
            path = self.directory / f"Testcase_{test_number}.txt"
            try:
                run_numbered_test_case(test_number, verify, self.stdout, self.directory)
            except FileNotFoundError:
                self._write(f"Error: Could not open file: {path}\n")
            except _FAILURES as exc:
                self._report_error(exc)

    def handle_small(self):
        """Generate the small test case, optionally running it."""
        n = self.get_int("Enter the number of elements: ", 1, 1000)
        m = self.get_int("Enter the number of queries: ", 1, 1000)
        gen_special_test(n, m, self.directory, self.rng, self.stdout)
        self._write(
            f"Small test case generated with {n} elements and {m} queries.\n\n"
        )
        if self.get_yes_no("Would you like to run this test case?"):
            verify = self.get_yes_no("Would you like to verify the results?")
            self._run(self.directory / SMALL_TEST_NAME, verify)

    def handle_run(self):
        """Run a named test case, optionally verifying and benchmarking it."""
        filename = self.get_string("Enter the filename (without .txt extension): ")
        path = self._existing_path(filename)
        if path is None:
            return
        verify = self.get_yes_no("Would you like to verify the results?")
        self._run(path, verify)
        if self.get_yes_no("Would you like to run a benchmark on this test case?"):
            self._benchmark(path)

    def handle_verify(self):
        """Check a named test case against the plain-array answers."""
        filename = self.get_string("Enter the filename (without .txt extension): ")
        path = self._existing_path(filename)
        if path is None:
            return
        self._write(f"Verifying test case: {filename}...\n")
        try:
            passed = verify_test_case(path, self.stdout)
        except _FAILURES as exc:
            self._report_error(exc)
            passed = False
        self._write(PASSED if passed else FAILED)

    def _benchmark(self, path):
        try:
            benchmark_test_case(path, self.stdout)
        except _FAILURES as exc:
            self._report_error(exc)

    def handle_benchmark(self):
        """Benchmark a named test case."""
        filename = self.get_string("Enter the filename (without .txt extension): ")
        path = self._existing_path(filename)
        if path is not None:
            self._benchmark(path)

    def handle_print(self):
        """Print the contents of a named test case."""
        filename = self.get_string("Enter the filename (without .txt extension): ")
        path = self._existing_path(filename)
        if path is None:
            return
        self._write(f"\n===== Contents of {filename}.txt =====\n")
        with path.open() as handle:
            for line in handle:
                self._write(line.rstrip("\n") + "\n")
        self._write("\n")

    def handle_input(self):
        """Read a test case from the user and save it under a chosen name."""
        filename = self.get_string("Enter the filename (without .txt extension): ")
        path = self._path_for(filename)
        try:
            handle = path.open("w")
        except OSError:
            self._write(f"Error: Could not create file '{path}'\n\n")
            return

        with handle:
            n = self.get_int("Enter the number of elements: ", 1, 1_000_000)
            m = self.get_int("Enter the number of queries: ", 1, 1_000_000)

            self._write(f"Enter {n} elements (space-separated): ")
            elements = [self.get_int("") for _ in range(n)]

            self._write(f"\nEnter {m} queries:\n")
            self._write("Format: 1 [index] [value] - Update array[index] += value\n")
            self._write("Format: 2 [left] [right]  - Query sum from left to right\n\n")

            queries = []
            for number in range(1, m + 1):
                self._write(f"Query {number}/{m}: ")
                kind = self.get_int("Type (1 for update, 2 for query): ", 1, 2)
                if kind == UPDATE:
                    index = self.get_int(f"Index to update (1 to {n}): ", 1, n)
                    value = self.get_int("Value to add: ")
                    queries.append(Query(UPDATE, index, value))
                else:
                    left = self.get_int(f"Left bound (1 to {n}): ", 1, n)
                    right = self.get_int(
                        f"Right bound ({left} to {n}): ", left, n
                    )
                    queries.append(Query(RANGE, left, right))

            handle.write(TestCase(elements, queries).dump())

        self._write(f"Test case saved to file: {path}\n\n")
        if self.get_yes_no("Would you like to run this test case?"):
            verify = self.get_yes_no("Would you like to verify the results?")
            self._run(path, verify)

    def run(self):
        """Show help and process commands until exit or end of input."""
        self.print_help()
        while True:
            self._write("Enter command (or 'h' for help): ")
            try:
                command = self._next_token()
            except EOFError:
                return
            if command.startswith("-"):
                command = command[1:]
            if command in ("e", "exit"):
                self._write("Exiting the program. Goodbye!\n")
                return
            handler = self._commands.get(command)
            if handler is None:
                self._write(f"Unknown command: '{command}'. Type 'h' for help.\n\n")
            else:
                try:
                    handler()
                except EOFError:
                    return
            self._discard_line()