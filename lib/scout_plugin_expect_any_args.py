from scout_dsl import FuncDSL


class ScoutPluginExpectAnyArgs:
    """
    Plugin for expecting a call without checking its arguments.
    """
    def __init__(self, config):
        self.config = config
        self.priority = 3

    def member_verbs(self):
        return {'expect_any_args': self.expect_any_args}

    def expect_any_args(self, dsl):
        return FuncDSL(dsl.mock, dsl.member, None)
