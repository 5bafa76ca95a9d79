# =========================================================================
#   pyScout - Expectation-driven Mocks for Python
#
#   Copyright (c) 2025 Christian Renzel
#   SPDX-License-Identifier: MIT
# =========================================================================

import logging

logger = logging.getLogger(__name__)


class MockAssertionError(AssertionError):
    """
    A test failure detected by a mock: the test ran, but the code under test
    did not behave as the expectations said it would.
    """
    def __init__(self, member, message):
        super().__init__(message)
        self.member = member
        self.message = message


class NoExpectationError(MockAssertionError):
    def __init__(self, member):
        super().__init__(member, f"No expectation left for '{member}'")


class ArgumentCountMismatch(MockAssertionError):
    def __init__(self, member, expected, actual, missing=(), unexpected=()):
        details = []
        if expected != actual:
            details.append(f"Expected {expected} arguments, but got {actual}")
        if missing:
            details.append(f"missing keyword arguments {sorted(missing)}")
        if unexpected:
            details.append(f"unexpected keyword arguments {sorted(unexpected)}")
        super().__init__(member, f"Call to {member}: {', '.join(details)}")
        self.expected = expected
        self.actual = actual
        self.missing = sorted(missing)
        self.unexpected = sorted(unexpected)


class ArgumentMismatch(MockAssertionError):
    def __init__(self, member, mismatches):
        pairs = ", ".join(f"({arg!r}, {matcher})" for arg, matcher in mismatches)
        super().__init__(member, f"Arguments to {member} didn't match: [{pairs}]")
        self.mismatches = mismatches


class UnmetExpectationError(MockAssertionError):
    def __init__(self, members):
        super().__init__(', '.join(members), f"Expected calls never made: {', '.join(members)}")
        self.members = members


class MockSetupError(BaseException):
    """
    Fatal authoring error: the mock was declared one way and used another.
    Derives from BaseException so code under test catching Exception
    does not hide it.
    """


class ExpectationKindMismatch(MockSetupError):
    def __init__(self, member, declared, used):
        super().__init__(f"'{member}' was declared as a {declared} but used as a {used}")
        self.member = member
        self.declared = declared
        self.used = used


class ScoutFailureReporter:
    FAILURE_MODES = [':raise', ':collect']

    def __init__(self, failure_mode=':raise'):
        if failure_mode not in self.FAILURE_MODES:
            raise ValueError(f"Unknown failure mode '{failure_mode}'")
        self.failure_mode = failure_mode
        self.failures = []

    def fail(self, error):
        """
        Signal a test failure. In collect mode the failure is recorded and the
        caller continues with a None result.
        """
        if self.failure_mode == ':raise':
            raise error
        logger.warning("Recorded mock failure: %s", error)
        self.failures.append(error)

    def fatal(self, error):
        raise error

    def raise_recorded(self):
        if not self.failures:
            return
        first, rest = self.failures[0], self.failures[1:]
        self.failures = []
        if not rest:
            raise first
        summary = "; ".join(str(f) for f in rest)
        raise MockAssertionError(first.member, f"{first} (and {len(rest)} more: {summary})") from first

    def reset(self):
        self.failures = []
