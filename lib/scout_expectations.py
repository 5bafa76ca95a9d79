# =========================================================================
#   pyScout - Expectation-driven Mocks for Python
#
#   Copyright (c) 2025 Christian Renzel
#   SPDX-License-Identifier: MIT
# =========================================================================

from collections import deque

from scout_errors import ArgumentCountMismatch, ArgumentMismatch, MockAssertionError
from scout_matchers import as_matcher

VALUE = "property"
FUNCTION = "function"


class Expectation:
    """
    One queued behavior for a member. The queue owner asks has_next() before
    each read and drops the expectation once it reports False.
    """
    kind = VALUE
    required = True

    def has_next(self):
        raise NotImplementedError

    def next_value(self):
        raise NotImplementedError


class SingleValueExpectation(Expectation):
    def __init__(self, value):
        self.value = value
        self.consumed = False

    def has_next(self):
        return not self.consumed

    def next_value(self):
        self.consumed = True
        return self.value


class MultiValueExpectation(Expectation):
    def __init__(self, values):
        self.values = deque(values)

    def has_next(self):
        return len(self.values) > 0

    def next_value(self):
        return self.values.popleft()


class PersistentValueExpectation(Expectation):
    required = False

    def __init__(self, value):
        self.value = value

    def has_next(self):
        return True

    def next_value(self):
        return self.value


class ComputedValueExpectation(Expectation):
    required = False

    def __init__(self, getter):
        self.getter = getter

    def has_next(self):
        return True

    def next_value(self):
        return self.getter()


class FunctionExpectation(Expectation):
    """
    A function binding. Its value is the call itself: invoking it checks the
    actual arguments against the matchers captured at declaration, then runs
    the action. matchers=None accepts any arguments.
    """
    kind = FUNCTION

    def __init__(self, func_name, matchers, action, kw_matchers=None, repeat=False):
        self.func_name = func_name
        self.matchers = None if matchers is None else [as_matcher(m) for m in matchers]
        self.kw_matchers = {k: as_matcher(m) for k, m in (kw_matchers or {}).items()}
        self.action = action
        self.repeat = repeat
        self.required = not repeat

    def has_next(self):
        return self.repeat

    def next_value(self):
        return self.call

    def call(self, args, kwargs, fail=None):
        """
        Check the arguments, then run the action. When fail is given, an
        argument failure is handed to it instead of raised, and the call
        yields None.
        """
        try:
            self.check_args(args, kwargs)
        except MockAssertionError as e:
            if fail is None:
                raise
            fail(e)
            return None
        return self.action(*args, **kwargs)

    def check_args(self, args, kwargs):
        if self.matchers is None:
            return
        expected = len(self.matchers) + len(self.kw_matchers)
        actual = len(args) + len(kwargs)
        missing = set(self.kw_matchers) - set(kwargs)
        unexpected = set(kwargs) - set(self.kw_matchers)
        if len(args) != len(self.matchers) or missing or unexpected:
            raise ArgumentCountMismatch(self.func_name, expected, actual, missing, unexpected)

        mismatches = [(arg, matcher) for arg, matcher in zip(args, self.matchers)
                      if not matcher.matches(arg)]
        mismatches += [(kwargs[name], matcher) for name, matcher in self.kw_matchers.items()
                       if not matcher.matches(kwargs[name])]
        if mismatches:
            raise ArgumentMismatch(self.func_name, mismatches)
