import fire #type: ignore
import logging
from typing import *
import os
import sys
import loader
import divisible
import writer
from errors import DivisibleError, UsageError, MissingInputError, describe
from loader import Result

def generate_divisible_numbers(input : str, order : str = 'end', progress : bool = False) -> List[Result]:
    """
    reads every triple from `input`, computes one result per triple and sorts them

    Args:
        input (str): path of the `a b end` file
        order (str): name of the ordering, see `divisible.ORDERINGS`
        progress (bool): show a progress bar on stderr while computing
    """
    try:
        triples = loader.load_triples(input)
    except DivisibleError as err:
        raise DivisibleError('Failed to read items from input file') from err
    results = divisible.compute_all(triples, progress=progress)
    return divisible.sort_results(results, order)

def run(input : str, output : str, order : str = 'end', progress : bool = False, console : Optional[TextIO] = None) -> None:
    if not os.path.exists(input):
        raise MissingInputError(input)
    # nothing touches the output file until every result is computed
    try:
        results = generate_divisible_numbers(input, order, progress)
    except DivisibleError as err:
        raise DivisibleError('Failed to generate divisible numbers') from err
    try:
        writer.write_results(output, results, console)
    except DivisibleError as err:
        raise DivisibleError('Failed to write results to output file') from err

FLAGS = {'order', 'progress', 'info', 'debug'}

def usage() -> NoReturn:
    print(f"usage: {sys.argv[0]} <input> <output> [--order=end|count] [--progress] [--info] [--debug]", file=sys.stderr)
    sys.exit(1)

def fire_command(argv : Sequence[str]) -> List[str]:
    """
    rewrites the command line for fire: positional arguments and flag values are quoted so
    they reach `main` as the exact strings typed (fire would turn `1e3` into 1000.0), and
    boolean flags get an explicit value so they never swallow the next path

    Raises:
        UsageError: on a flag `main` does not take, or `--order` without a value
    """
    command : List[str] = []
    expecting_value = False
    for arg in argv:
        if expecting_value:
            command.append(repr(arg))
            expecting_value = False
        elif arg in ('-h', '--help'):
            command.append(arg)
        elif arg.startswith('-'):
            name, equals, value = arg[2:].partition('=')
            name = name.replace('-', '_')
            negated = name.startswith('no') and name[2:] in FLAGS - {'order'}
            if not arg.startswith('--') or (name not in FLAGS and not negated):
                raise UsageError(f'unknown flag {arg}')
            if name == 'order':
                if equals:
                    command.append(f'--order={value!r}')
                else:
                    command.append('--order')
                    expecting_value = True
            elif equals:
                command.append(f'--{name}={value}')
            else:
                command.append(f'--{name[2:]}=False' if negated else f'--{name}=True')
        else:
            command.append(repr(arg))
    if expecting_value:
        raise UsageError('--order needs a value')
    return command

def main(*paths,
        order : str = 'end',
        progress : bool = False,
        info : bool = False,
        debug : bool = False) -> None:
    logging.basicConfig(format='%(asctime)s - %(levelname)s - %(name)s -   %(message)s',
                        datefmt='%m/%d/%Y %H:%M:%S',
                        level=logging.WARNING)
    if info:
        logging.getLogger().setLevel(logging.INFO)
    if debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if len(paths) != 2:
        usage()

    input, output = (str(p) for p in paths)
    logging.info(f'{input=} {output=} {order=}')

    try:
        if order not in divisible.ORDERINGS:
            raise UsageError(f'unknown order {order!r}, expected one of {sorted(divisible.ORDERINGS)}')
        run(input, output, order=order, progress=progress)
    except MissingInputError as err:
        print(err, file=sys.stderr)
        sys.exit(1)
    except DivisibleError as err:
        logging.error(describe(err))
        sys.exit(1)

def cli() -> None:
    try:
        command = fire_command(sys.argv[1:])
    except UsageError as err:
        print(err, file=sys.stderr)
        usage()
    fire.Fire(main, command=command)

if __name__ == "__main__":
    cli()
