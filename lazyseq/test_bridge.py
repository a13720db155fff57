import operator

import pytest

from lazyseq.bridge import (array_to_stream, stream_to_array, iterable_to_stream, show, is_stream,
                            Seq, Cursor)
from lazyseq.config import StreamConfig
from lazyseq.cons import EMPTY, stream, tail
from lazyseq.sequences import integers, integers_from, primes


@pytest.mark.parametrize('items', [[], [1], [3, 1, 2], ['a', 'b'], [None, [1], (2,)]])
def test_round_trip(items):
    assert stream_to_array(array_to_stream(items)) == items


def test_array_to_stream_of_empty_sequence_is_empty():
    assert array_to_stream([]) is EMPTY
    assert array_to_stream(()) is EMPTY


def test_array_to_stream_accepts_any_sequence():
    assert stream_to_array(array_to_stream(range(4))) == [0, 1, 2, 3]
    assert stream_to_array(array_to_stream('abc')) == ['a', 'b', 'c']


def test_array_to_stream_rejects_non_sequences():
    with pytest.raises(TypeError):
        array_to_stream({1, 2, 3})
    with pytest.raises(TypeError):
        array_to_stream(42)


def test_array_to_stream_copies_the_sequence():
    items = [1, 2, 3]
    s = array_to_stream(items)
    items.append(4)
    assert stream_to_array(s) == [1, 2, 3]


def test_iterable_to_stream_pulls_on_demand():
    pulled = []

    def numbers():
        for n in range(5):
            pulled.append(n)
            yield n

    s = iterable_to_stream(numbers())
    assert pulled == [0]
    assert tail(s).head == 1
    assert tail(s).head == 1
    assert pulled == [0, 1]
    assert stream_to_array(s) == [0, 1, 2, 3, 4]


def test_iterable_to_stream_of_exhausted_iterator_is_empty():
    assert iterable_to_stream(iter([])) is EMPTY


def test_show():
    assert show(integers, 5) == '< 0 1 2 3 4 >'
    assert show(primes, 5) == '< 2 3 5 7 11 >'


def test_show_short_and_empty_streams():
    assert show(array_to_stream([1, 2]), 5) == '< 1 2 >'
    assert show(EMPTY, 3) == '< >'
    assert show(integers, 0) == '< >'


def test_show_does_not_force_past_n():
    s = stream(1, lambda: stream(2, lambda: stream(3, lambda: 1 / 0)))
    assert show(s, 3) == '< 1 2 3 >'


def test_show_uses_configured_preview_length():
    StreamConfig.set_defaults(preview_length=3)
    try:
        assert show(integers) == '< 0 1 2 >'
    finally:
        StreamConfig.set_defaults(preview_length=10)


def test_is_stream():
    assert is_stream(EMPTY)
    assert is_stream(integers)
    assert not is_stream([1, 2])


def test_seq_rejects_non_sequences():
    with pytest.raises(TypeError):
        Seq(42)
    with pytest.raises(TypeError):
        Seq({'a': 1})
    with pytest.raises(TypeError):
        Seq(x for x in range(3))


def test_seq_accepts_streams_sequences_and_seqs():
    assert Seq(integers).take(3) == [0, 1, 2]
    assert Seq([4, 5]).to_list() == [4, 5]
    assert Seq(Seq((6, 7))).to_list() == [6, 7]
    assert Seq(EMPTY).is_empty()


def test_seq_chain_is_lazy_on_infinite_streams():
    result = (Seq(integers_from(1))
              .map(lambda n: n * n)
              .filter(lambda n: n % 2 == 1)
              .reduce(operator.add, 0)
              .skip(1)
              .take(4))
    assert result == [1, 10, 35, 84]


def test_seq_map_over_several_sources():
    assert Seq([1, 2, 3]).map(lambda a, b, c: a * b * c, [10, 20], integers_from(1)).to_list() == [10, 80]


def test_seq_ref_iter_and_show():
    seq = Seq([3, 1, 4, 1, 5])
    assert seq.ref(2) == 4
    assert seq.ref(9) is EMPTY
    assert list(seq) == [3, 1, 4, 1, 5]
    assert seq.show(2) == '< 3 1 >'
    assert seq.stream is Seq(seq).stream


def test_seq_repr_does_not_force():
    seq = Seq(integers_from(100))
    assert repr(seq) == 'Seq(<100 ...>)'


def test_cursor_reads_batches():
    cursor = Cursor(integers_from(0)).take(3)
    assert cursor.next_batch() == [0, 1, 2]
    assert cursor.next_batch() == [3, 4, 5]
    assert cursor.skip(2).next_batch() == [8, 9, 10]
    assert cursor.stream.head == 11


def test_cursor_default_batch_is_one_element():
    cursor = Cursor([7, 8])
    assert cursor.next_batch() == [7]
    assert cursor.next_batch() == [8]
    assert cursor.next_batch() == []
    assert cursor.stream is EMPTY


def test_cursor_iterates_over_finite_stream():
    assert list(Cursor(list(range(7)), count=3)) == [[0, 1, 2], [3, 4, 5], [6]]


def test_cursor_iteration_needs_positive_batch():
    with pytest.raises(ValueError):
        list(Cursor([1, 2], count=0))


def test_seq_reduce_to_list_ends_with_the_fold():
    assert Seq([1, 2, 3, 4]).reduce(operator.add, 0).to_list() == [0, 1, 3, 6, 10]
