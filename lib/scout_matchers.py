# =========================================================================
#   pyScout - Expectation-driven Mocks for Python
#
#   Copyright (c) 2025 Christian Renzel
#   SPDX-License-Identifier: MIT
# =========================================================================

class Matcher:
    """
    Predicate over a single call argument.
    """
    def matches(self, arg):
        raise NotImplementedError

    def __repr__(self):
        return str(self)


class EqualTo(Matcher):
    def __init__(self, value):
        self.value = value

    def matches(self, arg):
        # no expected value and no actual argument is a match
        if self.value is None and arg is None:
            return True
        return arg == self.value

    def __str__(self):
        return f"Equal to {self.value!r}"


class Anything(Matcher):
    def matches(self, arg):
        return True

    def __str__(self):
        return "Anything"


class InstanceOf(Matcher):
    def __init__(self, cls):
        self.cls = cls

    def matches(self, arg):
        return isinstance(arg, self.cls)

    def __str__(self):
        return f"Instance of {self.cls.__name__}"


class Satisfies(Matcher):
    def __init__(self, predicate, description=None):
        self.predicate = predicate
        self.description = description or getattr(predicate, "__name__", "predicate")

    def matches(self, arg):
        return bool(self.predicate(arg))

    def __str__(self):
        return f"Satisfies {self.description}"


def equal_to(value):
    return EqualTo(value)


def anything():
    return Anything()


def instance_of(cls):
    return InstanceOf(cls)


def satisfies(predicate, description=None):
    return Satisfies(predicate, description)


def as_matcher(value):
    """
    Wrap a plain declared value in an EqualTo matcher; matchers pass through.
    """
    return value if isinstance(value, Matcher) else EqualTo(value)
