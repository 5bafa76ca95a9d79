from scout_expectations import FunctionExpectation


class ScoutPluginCallback:
    """
    Plugin for routing every call of a function to a callback.
    """
    def __init__(self, config):
        self.config = config
        self.priority = 6
        self.include_count = config.callback_include_count

    def member_verbs(self):
        return {'stub_with_callback': self.stub_with_callback}

    def stub_with_callback(self, dsl, callback):
        """
        Bind callback to all calls of the member. With callback_include_count
        the number of previous calls is passed as the last positional argument.
        """
        calls = [0]

        def action(*args, **kwargs):
            if self.include_count:
                args = args + (calls[0],)
            calls[0] += 1
            return callback(*args, **kwargs)

        return dsl.add(FunctionExpectation(dsl.member, None, action, repeat=True))
