# engine/exceptions.py

class ProgressEngineError(Exception):
    pass


class InvalidInputError(ProgressEngineError, ValueError):
    pass
