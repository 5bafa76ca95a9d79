# =========================================================================
#   pyScout - Expectation-driven Mocks for Python
#
#   Copyright (c) 2025 Christian Renzel
#   SPDX-License-Identifier: MIT
# =========================================================================

import logging
from collections import deque

from scout_config import ScoutConfig
from scout_dsl import ExpectDSL
from scout_errors import (
    ExpectationKindMismatch,
    NoExpectationError,
    ScoutFailureReporter,
    UnmetExpectationError,
)
from scout_expectations import FUNCTION, VALUE
from scout_plugin_manager import ScoutPluginManager

logger = logging.getLogger(__name__)


class Mock:
    """
    Expectation registry owned by a single test double.

    Maps member names to FIFO queues of expectations. Declarations append to
    the back of a member's queue; property reads and function calls consume
    from the front.
    """
    def __init__(self, config=None, plugins=None):
        self.config = config if isinstance(config, ScoutConfig) else ScoutConfig(config)
        self.plugins = plugins if plugins is not None else ScoutPluginManager(self.config)
        self.reporter = ScoutFailureReporter(self.config.failure_mode)
        self.expectations = {}

    def append(self, expectation, member):
        self.expectations.setdefault(member, deque()).append(expectation)
        logger.debug("Expecting %s for '%s'", type(expectation).__name__, member)

    def next(self, member, kind=None):
        """
        Consume the next expectation for member and return the value it produces.

        Fails with NoExpectationError when nothing is queued for member. When
        kind is given, an expectation of the other kind at the front of the
        queue is a fatal ExpectationKindMismatch and nothing is consumed.
        """
        queue = self.expectations.get(member)
        if queue:
            expectation = queue[0]
        else:
            expectation = self.plugins.fallback_expectation(member, kind or VALUE)
            if expectation is None:
                self.reporter.fail(NoExpectationError(member))
                return None
            logger.debug("Unexpected access to '%s' ignored", member)

        if kind is not None and expectation.kind != kind:
            self.reporter.fatal(ExpectationKindMismatch(member, expectation.kind, kind))

        if queue and not expectation.has_next():
            queue.popleft()
        value = expectation.next_value()
        # drop an expectation emptied by this very read
        if queue and queue[0] is expectation and not expectation.has_next():
            queue.popleft()
        logger.debug("Consumed %s for '%s'", type(expectation).__name__, member)
        return value

    def get_value(self, member):
        return self.next(member, kind=VALUE)

    def call_function(self, member, *args, **kwargs):
        action = self.next(member, kind=FUNCTION)
        if action is None:
            return None
        return action(args, kwargs, self.reporter.fail)

    def pending(self, member):
        return len(self.expectations.get(member, ()))

    def verify(self):
        """
        Fail if any exhaustible expectation was never consumed, or if failures
        were recorded in collect mode.
        """
        self.reporter.raise_recorded()
        unmet = [member for member, queue in self.expectations.items()
                 if any(expectation.required for expectation in queue)]
        if unmet:
            raise UnmetExpectationError(unmet)

    def reset(self):
        self.expectations = {}
        self.reporter.reset()

    @property
    def expect(self):
        return ExpectDSL(self)

    @property
    def get(self):
        return MockGetter(self)

    @property
    def call(self):
        return MockCaller(self)


class MockGetter:
    def __init__(self, mock):
        self._mock = mock

    def __getattr__(self, member):
        if member.startswith('__'):
            raise AttributeError(member)
        return self._mock.get_value(member)


class MockCaller:
    def __init__(self, mock):
        self._mock = mock

    def __getattr__(self, member):
        if member.startswith('__'):
            raise AttributeError(member)
        return lambda *args, **kwargs: self._mock.call_function(member, *args, **kwargs)
