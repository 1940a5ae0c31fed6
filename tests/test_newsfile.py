import io

from voxlearn.hashmap import HashMap
from voxlearn.newsfile import WordFrequency, process_file


def test_counts_all_words_without_map():
    fp = io.StringIO("Hello, world! It's 42 degrees.\nSecond line here\n")
    count, indices = process_file(fp)
    assert count == 8
    assert indices == []


def test_words_are_lowercased_and_split_on_non_letters():
    hmap = HashMap(64, 128)
    fp = io.StringIO("King king's Kings, kings'\n")
    count, indices = process_file(fp, hmap, True, 64, None, 100)
    assert count == 4
    assert indices == [0, 0, 1, 1]
    assert hmap.inx2str(0) == "king"
    assert hmap.inx2str(1) == "kings"


def test_word_frequencies_counted():
    hmap = HashMap(64, 128)
    freq = [WordFrequency() for _ in range(64)]
    fp = io.StringIO("a b a c a b\n")
    count, _ = process_file(fp, hmap, True, 64, freq)
    assert count == 6
    a = hmap.str2inx("a", False)
    b = hmap.str2inx("b", False)
    assert freq[a] == WordFrequency(a, 3)
    assert freq[b] == WordFrequency(b, 2)


def test_unknown_words_skipped_without_add_new():
    hmap = HashMap(64, 128)
    hmap.str2inx("cat", True)
    fp = io.StringIO("the cat sat on the cat\n")
    count, indices = process_file(fp, hmap, False, 64, None, 10)
    assert count == 2
    assert indices == [0, 0]
    assert len(hmap) == 1


def test_indices_beyond_vocabulary_skipped():
    hmap = HashMap(64, 128)
    fp = io.StringIO("one two three one\n")
    count, indices = process_file(fp, hmap, True, 2, None, 10)
    assert indices == [0, 1, 0]
    assert count == 3


def test_stops_at_max_file_words():
    hmap = HashMap(64, 128)
    fp = io.StringIO("alpha beta gamma delta\n")
    count, indices = process_file(fp, hmap, True, 64, None, 2)
    assert count == 2
    assert indices == [0, 1]


def test_binary_file_supported():
    hmap = HashMap(64, 128)
    fp = io.BytesIO(b"Dog dog\ncat\n")
    count, indices = process_file(fp, hmap, True, 64, None, 10)
    assert count == 3
    assert [hmap.inx2str(i) for i in indices] == ["dog", "dog", "cat"]