# =========================================================================
#   pyScout - Expectation-driven Mocks for Python
#
#   Copyright (c) 2025 Christian Renzel
#   SPDX-License-Identifier: MIT
# =========================================================================

from functools import partial

from scout_expectations import FunctionExpectation


class ExpectDSL:
    """
    Entry point for declaring expectations on a mock, either as member
    values (expect.foo.to_return(1)) or function calls
    (expect.buz(equal_to(0)).to_return(1)).
    """
    def __init__(self, mock):
        self._mock = mock

    def member(self, name):
        return MemberActionDSL(self._mock, name)

    def __getattr__(self, name):
        if name.startswith('__'):
            raise AttributeError(name)
        return self.member(name)


class MemberActionDSL:
    def __init__(self, mock, member):
        self.mock = mock
        self.member = member

    def add(self, expectation):
        self.mock.append(expectation, self.member)
        return self

    @property
    def and_(self):
        return self

    def __call__(self, *matchers, **kw_matchers):
        """
        Declare the member as a function expected to be called with arguments
        satisfying matchers.
        """
        return FuncDSL(self.mock, self.member, list(matchers), kw_matchers)

    def __getattr__(self, name):
        return _bind_verb(self, 'member_verbs', name)


class FuncDSL:
    def __init__(self, mock, func_name, matchers, kw_matchers=None):
        self.mock = mock
        self.func_name = func_name
        self.matchers = matchers
        self.kw_matchers = kw_matchers or {}

    def add_action(self, action, repeat=False):
        self.mock.append(
            FunctionExpectation(self.func_name, self.matchers, action, self.kw_matchers, repeat),
            self.func_name,
        )
        return self

    @property
    def and_(self):
        return self

    def __getattr__(self, name):
        return _bind_verb(self, 'function_verbs', name)


def _bind_verb(dsl, table, name):
    if name.startswith('_'):
        raise AttributeError(name)
    verb = dsl.mock.plugins.verb(table, name)
    if verb is None:
        raise AttributeError(f"No plugin provides the declaration '{name}'")
    return partial(verb, dsl)


class Mockable:
    """
    Mixin for test doubles holding a Mock in self.mock.
    """
    @property
    def expect(self):
        return ExpectDSL(self.mock)
