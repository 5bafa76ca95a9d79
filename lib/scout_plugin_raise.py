class ScoutPluginRaise:
    """
    Plugin for making an expected call raise an exception once its arguments
    have been checked.
    """
    def __init__(self, config):
        self.config = config
        self.priority = 7

    def function_verbs(self):
        return {'and_raise': self.and_raise}

    def and_raise(self, dsl, exception):
        def action(*args, **kwargs):
            raise exception
        return dsl.add_action(action)
