import pyparsing as pp #type: ignore
from typing import *
import logging
import re
from errors import FormatError, InvalidDivisorError, ReadError

U32_MAX = 2**32 - 1
# the Unicode White_Space property; str.isspace() also takes in \x1c-\x1f
WHITESPACE = '\t\n\v\f\r \x85\xa0\u1680' \
            + ''.join(chr(c) for c in range(0x2000, 0x200b)) \
            + '\u2028\u2029\u202f\u205f\u3000'

# an unsigned 32-bit value has to fill a whole token, '12abc' is not 12, and at most
# 10 significant digits are converted
unsigned = pp.Regex(r'\+?0*[0-9]{1,10}' + f'(?![^{re.escape(WHITESPACE)}])') \
            .set_parse_action(lambda t: int(t[0])) \
            .add_condition(lambda t: t[0] <= U32_MAX)
junk = pp.CharsNotIn(WHITESPACE).suppress()
field = unsigned | junk
line_end = pp.StringEnd()
record = pp.ZeroOrMore(field) + line_end
numbers_list = pp.ZeroOrMore(unsigned) + line_end
for element in (unsigned, junk, field, line_end, record, numbers_list):
    element.set_whitespace_chars(WHITESPACE)

class Triple(NamedTuple):
    a : int
    b : int
    end : int

class Result(NamedTuple):
    end : int
    numbers : Tuple[int, ...]

def parse_triple(line : str, line_number : int) -> Triple:
    """
    parses one `a b end` record, tokens that are not unsigned 32-bit integers are dropped
    before counting

    Args:
        line (str): raw input line
        line_number (int): 1-based line number used in errors

    Raises:
        FormatError: when the line does not hold exactly 3 numbers
        InvalidDivisorError: when `a` or `b` is zero
    """
    try:
        numbers : List[int] = list(record.parse_string(line))
    except pp.ParseException as err:
        raise FormatError(line_number) from err
    logging.debug(f'parsed {line_number=} {line=} {numbers=}')
    if len(numbers) != 3:
        raise FormatError(line_number)
    triple = Triple(*numbers)
    if triple.a == 0 or triple.b == 0:
        raise InvalidDivisorError(line_number)
    return triple

def load_triples(filename : str) -> List[Triple]:
    logging.debug(f'loading triples from {filename}')
    triples : List[Triple] = []
    try:
        file = open(filename, 'rb')
    except OSError as err:
        raise ReadError(filename) from err
    with file:
        for line_number, raw in enumerate(file, start=1):
            try:
                line = raw.decode('utf-8')
            except UnicodeDecodeError as err:
                raise ReadError(filename, line_number) from err
            triples.append(parse_triple(line, line_number))
    logging.info(f'loaded {len(triples)} triples from {filename}')
    return triples

def parse_result(line : str, line_number : int = 1) -> Result:
    """
    reads back one rendered `end:n1 n2 ...` line
    """
    head, colon, tail = line.partition(':')
    if not colon:
        raise FormatError(line_number, f'Line {line_number} has no colon')
    try:
        end = unsigned.parse_string(head.strip(), parse_all=True)[0]
        numbers = tuple(numbers_list.parse_string(tail))
    except pp.ParseException as err:
        raise FormatError(line_number, f'Line {line_number} is not a rendered result') from err
    return Result(end=end, numbers=numbers)

def load_results(filename : str) -> List[Result]:
    with open(filename, encoding='utf-8') as file:
        return [parse_result(line, i) for i, line in enumerate(file, start=1)]
