"""
# dictreplace: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception classes.
"""


class CommittedMutateException(Exception):
    pass


class UncommittedApplyException(Exception):
    pass


class UnrecognisedStrategyException(Exception):
    _strategy_name: str

    def __init__(self, strategy_name: str):
        super().__init__(f'error: unrecognised strategy `{strategy_name}`')
        self._strategy_name = strategy_name

    @property
    def strategy_name(self) -> str:
        return self._strategy_name
