"""Tokenising text files into word indices and word frequencies."""

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_WORD_TEXT = re.compile(r"[A-Za-z]+")
_WORD_BYTES = re.compile(rb"[A-Za-z]+")


@dataclass
class WordFrequency:
    """How often the word with hashmap index inx was seen."""

    inx: int = 0
    cnt: int = 0


def _words(fp):
    for line in fp:
        if isinstance(line, bytes):
            for word in _WORD_BYTES.findall(line):
                yield word.decode("ascii").lower()
        else:
            for word in _WORD_TEXT.findall(line):
                yield word.lower()


def process_file(fp, hmap=None, add_new=False, max_vocab=0,
                 word_freq=None, max_file_words=None):
    """Split a text file into lower-cased words of ASCII letters.

    Without hmap every word is just counted. With hmap (a HashMap) each
    word is looked up, and added when add_new is set; words with no index
    or an index of max_vocab or more are skipped. word_freq, a list of
    WordFrequency of length max_vocab, has its entries counted up. When
    max_file_words is given, the indices of the words kept are collected,
    and processing stops once that many have been collected.

    Returns (count, indices): the number of words counted and the list of
    collected indices.
    """
    count = 0
    indices = []
    for word in _words(fp):
        if hmap is None:
            count += 1
            continue
        inx = hmap.str2inx(word, add_new)
        if not 0 <= inx < max_vocab:
            continue
        if word_freq is not None:
            entry = word_freq[inx]
            entry.inx = inx
            entry.cnt += 1
        if max_file_words is not None:
            if count >= max_file_words:
                logger.warning("file contains more than %d words",
                               max_file_words)
                return count, indices
            indices.append(inx)
        count += 1
    return count, indices