from typing import *
import logging
import sys
from errors import OutputCreationError, WriteError, FlushError
from loader import Result

def render(result : Result) -> str:
    return f"{result.end}:{' '.join(str(n) for n in result.numbers)}"

class Writer:
    """
    sends every rendered line to two sinks: the output file, created fresh on open,
    and a console stream
    """
    def __init__(self, output : str, console : Optional[TextIO] = None):
        self.output = output
        self.console = console if console is not None else sys.stdout
        try:
            self.file : TextIO = open(output, 'w', encoding='utf-8', newline='\n')
        except OSError as err:
            raise OutputCreationError(output) from err
        self.count = 0

    def write(self, result : Result) -> None:
        self.count += 1
        line = render(result)
        try:
            print(line, file=self.console)
            self.file.write(line + '\n')
        except OSError as err:
            raise WriteError(self.count) from err

    def close(self) -> None:
        # close() flushes first and releases the handle even when the flush fails
        try:
            self.file.close()
        except OSError as err:
            raise FlushError(self.output) from err

    def __enter__(self) -> 'Writer':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.close()
            return
        # the exception already in flight is the one to report
        try:
            self.file.close()
        except OSError as err:
            logging.debug(f'ignoring close failure of {self.output} after {exc_type.__name__}: {err}')

def write_results(output : str, results : Iterable[Result], console : Optional[TextIO] = None) -> None:
    logging.debug(f'writing results to {output}')
    with Writer(output, console) as writer:
        for result in results:
            writer.write(result)
    logging.info(f'wrote {writer.count} results to {output}')
