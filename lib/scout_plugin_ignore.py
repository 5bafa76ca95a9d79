from collections import deque

from scout_expectations import FUNCTION, FunctionExpectation, PersistentValueExpectation


class IgnoreExpectation(FunctionExpectation):
    def __init__(self, func_name, value):
        super().__init__(func_name, None, lambda *args, **kwargs: value, repeat=True)


class ScoutPluginIgnore:
    """
    Plugin for ignoring calls to a function, and for tolerating accesses to
    members nothing was declared for when fail_on_unexpected_calls is off.
    """
    def __init__(self, config):
        self.config = config
        self.priority = 2

    def member_verbs(self):
        return {
            'ignore': self.ignore,
            'ignore_and_return': self.ignore_and_return,
            'stop_ignore': self.stop_ignore,
        }

    def ignore(self, dsl):
        return self.ignore_and_return(dsl, None)

    def ignore_and_return(self, dsl, value):
        """
        Accept any number of calls with any arguments, returning value each time.
        """
        return dsl.add(IgnoreExpectation(dsl.member, value))

    def stop_ignore(self, dsl):
        queue = dsl.mock.expectations.get(dsl.member)
        if queue:
            dsl.mock.expectations[dsl.member] = deque(e for e in queue if not isinstance(e, IgnoreExpectation))
        return dsl

    def unexpected_access(self, member, kind):
        if self.config.fail_on_unexpected_calls:
            return None
        if kind == FUNCTION:
            return IgnoreExpectation(member, None)
        return PersistentValueExpectation(None)
