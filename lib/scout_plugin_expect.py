from scout_expectations import (
    ComputedValueExpectation,
    MultiValueExpectation,
    PersistentValueExpectation,
    SingleValueExpectation,
)


class ScoutPluginExpect:
    """
    Plugin for the core expectation declarations. Always loaded.
    """
    def __init__(self, config):
        self.config = config
        self.priority = 5

    def member_verbs(self):
        return {
            'to_return': self.to_return,
            'to_return_values_from': self.to_return_values_from,
            'to_always_return': self.to_always_return,
            'to_compute': self.to_compute,
        }

    def function_verbs(self):
        return {
            'to_return': self.func_to_return,
            'and_do': self.and_do,
        }

    def to_return(self, dsl, value):
        return dsl.add(SingleValueExpectation(value))

    def to_return_values_from(self, dsl, values):
        values = list(values)
        # an empty sequence declares nothing
        return dsl.add(MultiValueExpectation(values)) if values else dsl

    def to_always_return(self, dsl, value):
        return dsl.add(PersistentValueExpectation(value))

    def to_compute(self, dsl, getter):
        return dsl.add(ComputedValueExpectation(getter))

    def func_to_return(self, dsl, value):
        return dsl.add_action(lambda *args, **kwargs: value)

    def and_do(self, dsl, block):
        return dsl.add_action(block)
