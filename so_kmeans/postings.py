"""postings.py

Parses raw StackOverflow posting lines

Each line holds 5 or 6 comma separated fields:

    <postTypeId>,<id>,[<acceptedAnswer>],[<parentId>],<score>[,<tag>]

postTypeId is 1 for a question and 2 for an answer. acceptedAnswer, parentId
and tag are optional and an empty string marks them missing. A question carries
a tag and no parentId, an answer carries a parentId and no tag.
"""

import logging
import re
from typing import NamedTuple, Optional

from .errors import MalformedRecord

logger = logging.getLogger(__name__)

QUESTION = 1
ANSWER = 2

# int() alone also takes underscores, spaces, a plus sign and non-ASCII digits
INTEGER = re.compile(r'-?[0-9]+')


class Posting(NamedTuple):
    """A raw posting, either a question or an answer"""

    postingType: int
    id: int
    acceptedAnswer: Optional[int]
    parentId: Optional[int]
    score: int
    tags: Optional[str]


def _toInt(field : str, name : str, line : str) -> int:
    if not INTEGER.fullmatch(field):
        raise MalformedRecord(line, f'{name} is not an integer')
    return int(field)


def _toOptionalInt(field : str, name : str, line : str) -> Optional[int]:
    return None if field == '' else _toInt(field, name, line)


def parsePosting(line : str) -> Posting:
    """Parses one line into a Posting

    :param line: A comma separated posting record
    :return: The parsed Posting
    :raises MalformedRecord: If the line is not a valid question or answer
    """

    arr = line.strip().split(',')
    if len(arr) not in (5, 6):
        raise MalformedRecord(line, f'expected 5 or 6 fields, got {len(arr)}')

    posting = Posting(
        postingType=_toInt(arr[0], 'postingType', line),
        id=_toInt(arr[1], 'id', line),
        acceptedAnswer=_toOptionalInt(arr[2], 'acceptedAnswer', line),
        parentId=_toOptionalInt(arr[3], 'parentId', line),
        score=_toInt(arr[4], 'score', line),
        tags=arr[5] if len(arr) == 6 and arr[5] != '' else None)

    if posting.postingType == QUESTION:
        if posting.parentId is not None:
            raise MalformedRecord(line, 'question with a parentId')
        if posting.tags is None:
            raise MalformedRecord(line, 'question without a tag')
    elif posting.postingType == ANSWER:
        if posting.parentId is None:
            raise MalformedRecord(line, 'answer without a parentId')
        if posting.tags is not None:
            raise MalformedRecord(line, 'answer with a tag')
    else:
        raise MalformedRecord(line, f'unknown postingType {posting.postingType}')
    return posting


def formatPosting(posting : Posting) -> str:
    """Serializes a Posting back into its line format, omitting a missing tag"""

    fields = [
        str(posting.postingType),
        str(posting.id),
        '' if posting.acceptedAnswer is None else str(posting.acceptedAnswer),
        '' if posting.parentId is None else str(posting.parentId),
        str(posting.score)]
    if posting.tags is not None:
        fields.append(posting.tags)
    return ','.join(fields)


def tryParsePosting(line : str) -> list:
    """Parses a line, returning an empty list instead of raising"""

    try:
        return [parsePosting(line)]
    except MalformedRecord as e:
        logger.warning('Dropping malformed record: %s', e)
        return []


def rawPostings(lines, strict : bool = True):
    """Loads postings from a Dataset of lines

    :param lines: A Dataset of raw text lines
    :param strict: Whether a malformed line aborts the run or is dropped
    :return: A Dataset of Posting
    """

    if strict:
        return lines.map(parsePosting)
    return lines.flatMap(tryParsePosting)
