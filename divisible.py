from tqdm import tqdm #type: ignore
from typing import *
import logging
from errors import InvalidDivisorError, UsageError
from loader import Triple, Result

def check_divisors(triple : Triple) -> None:
    if triple.a == 0 or triple.b == 0:
        raise InvalidDivisorError(None, f'zero divisor in {triple}')

def is_divisible(triple : Triple, n : int) -> bool:
    return n % triple.a == 0 or n % triple.b == 0

def divisible_numbers(triple : Triple) -> Iterator[int]:
    """
    scans 1..end inclusive, so the values come out ascending and without duplicates
    """
    check_divisors(triple)
    for n in range(1, triple.end + 1):
        if is_divisible(triple, n):
            yield n

def compute(triple : Triple) -> Result:
    numbers = tuple(divisible_numbers(triple))
    logging.debug(f'{triple=} gives {len(numbers)} numbers')
    return Result(end=triple.end, numbers=numbers)

def compute_all(triples : Sequence[Triple], progress : bool = False) -> List[Result]:
    return [compute(triple) for triple in tqdm(triples, disable=not progress)]

def by_end(result : Result) -> int:
    return result.end

def by_count(result : Result) -> int:
    return len(result.numbers)

ORDERINGS : Dict[str, Callable[[Result], int]] = {
    'end': by_end,
    'count': by_count,
}

def sort_results(results : Iterable[Result], order : str = 'end') -> List[Result]:
    """
    sorts results by a named ordering, ties keep their input order

    Args:
        results (Iterable[Result]): results in input order
        order (str): a key of `ORDERINGS`
    """
    if order not in ORDERINGS:
        raise UsageError(f'unknown order {order!r}, expected one of {sorted(ORDERINGS)}')
    return sorted(results, key=ORDERINGS[order])
