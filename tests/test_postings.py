"""Tests for parsing posting lines."""

import pytest

from so_kmeans.dataset import LocalDataset
from so_kmeans.errors import MalformedRecord
from so_kmeans.postings import ANSWER, QUESTION, Posting, formatPosting, parsePosting, rawPostings


def test_parse_question() -> None:
    posting = parsePosting('1,27233496,27233500,,0,C#')
    assert posting == Posting(QUESTION, 27233496, 27233500, None, 0, 'C#')


def test_parse_answer_without_tag_field() -> None:
    posting = parsePosting('2,23698767,,9419744,2')
    assert posting == Posting(ANSWER, 23698767, None, 9419744, 2, None)


def test_parse_answer_with_empty_tag_and_newline() -> None:
    assert parsePosting('2,5484340,,5484335,-4,\n').tags is None


@pytest.mark.parametrize('line', [
    '1,27233496,,,0,C#',
    '2,23698767,,9419744,2',
    '1,5,6,,-3,Objective-C',
])
def test_format_round_trips(line : str) -> None:
    assert formatPosting(parsePosting(line)) == line


@pytest.mark.parametrize('line, reason', [
    ('1,2,3', 'fields'),
    ('1,2,,,3,Java,extra', 'fields'),
    ('x,2,,,3,Java', 'postingType'),
    ('1,2,,,high,Java', 'score'),
    ('1,2,abc,,3,Java', 'acceptedAnswer'),
    ('3,2,,,3,Java', 'unknown postingType'),
    ('1,2,,7,3,Java', 'parentId'),
    ('1,2,,,3', 'without a tag'),
    ('2,2,,,3', 'without a parentId'),
    ('2,2,,1,3,Java', 'with a tag'),
    ('1,1_0,,,3,Java', 'id'),
    ('1,2,,, 3,Java', 'score'),
    ('+1,2,,,3,Java', 'postingType'),
    ('1,\u0663,,,3,Java', 'id'),
    ('2,4,,1 ,3', 'parentId'),
])
def test_malformed_lines_raise(line : str, reason : str) -> None:
    with pytest.raises(MalformedRecord) as info:
        parsePosting(line)
    assert reason in info.value.reason
    assert info.value.line == line


def test_raw_postings_strict_aborts() -> None:
    lines = LocalDataset(['1,1,,,10,Java', 'garbage'])
    with pytest.raises(MalformedRecord):
        rawPostings(lines).collect()


def test_raw_postings_lenient_drops_malformed(caplog) -> None:
    lines = LocalDataset(['1,1,,,10,Java', 'garbage', '2,2,,1,4'])
    postings = rawPostings(lines, strict=False).collect()
    assert [posting.id for posting in postings] == [1, 2]
    assert 'Dropping malformed record' in caplog.text


def test_non_canonical_integers_do_not_round_trip_silently() -> None:
    with pytest.raises(MalformedRecord):
        formatPosting(parsePosting('1,1_0,,, 3,Java'))
