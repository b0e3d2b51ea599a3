from typing import *

class DivisibleError(Exception):
    pass

class UsageError(DivisibleError):
    pass

class MissingInputError(DivisibleError):
    def __init__(self, path : str):
        super().__init__(f'Input file does not exist: {path}')
        self.path = path

class FormatError(DivisibleError, ValueError):
    def __init__(self, line : Optional[int], message : Optional[str] = None):
        super().__init__(message or f'Line {line} does not contain exactly 3 numbers')
        self.line = line

class InvalidDivisorError(FormatError):
    def __init__(self, line : Optional[int], message : Optional[str] = None):
        super().__init__(line, message or f'Line {line} has a zero divisor')

class ReadError(DivisibleError):
    def __init__(self, path : str, line : Optional[int] = None):
        super().__init__(f'Failed to open file: {path}' if line is None else f'Failed to read line {line}')
        self.path = path
        self.line = line

class OutputCreationError(DivisibleError):
    def __init__(self, path : str):
        super().__init__(f'Failed to create output file: {path}')
        self.path = path

class WriteError(DivisibleError):
    def __init__(self, position : int):
        super().__init__(f'Failed to write result {position} to output file')
        self.position = position

class FlushError(DivisibleError):
    def __init__(self, path : str):
        super().__init__(f'Failed to flush output buffer for {path}')
        self.path = path

def describe(err : BaseException) -> str:
    """
    renders an error and everything it was raised from as `outer: inner: innermost`
    """
    parts : List[str] = []
    current : Optional[BaseException] = err
    while current is not None:
        parts.append(str(current) or type(current).__name__)
        current = current.__cause__
    return ': '.join(parts)
