#!/usr/bin/env python3
# Copyright 2026 The Runefinder Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
"""Search the Unicode Character Database (UnicodeData.txt) by name.

Each record of the database is a line of semicolon separated fields:

    0041;LATIN CAPITAL LETTER A;Lu;0;L;;;;;N;;;;0061;

A record matches a query when every word of the query is one of the words
of the character name. The Unicode 1.0 name, when present, is appended to the
name in parentheses and its words take part in the match:

    >>> rec = parse_record("0027;APOSTROPHE;Po;0;ON;;;;;N;APOSTROPHE-QUOTE;;;;")
    >>> rec.name
    'APOSTROPHE (APOSTROPHE-QUOTE)'
    >>> rec.tokens
    ['APOSTROPHE', 'QUOTE']
"""
from collections import namedtuple
import logging
import re
import sys

from runefinder.constants import (
    FIELD_CODEPOINT,
    FIELD_NAME,
    FIELD_UNICODE_1_NAME,
    REPLACEMENT_CHARACTER,
)

log = logging.getLogger(__name__)

UCDRecord = namedtuple("UCDRecord", ["codepoint", "name", "tokens"])

SEPARATORS = "-()"
_HEX = re.compile(r"[0-9A-Fa-f]+")


def is_separator(char):
    return char.isspace() or char in SEPARATORS


def tokenize(name):
    """Split a character name into words at runs of whitespace, hyphens
    and parentheses. Names are expected to be uppercase already."""
    words = []
    word = []
    for char in name:
        if is_separator(char):
            if word:
                words.append("".join(word))
                word = []
        else:
            word.append(char)
    if word:
        words.append("".join(word))
    return words


def remove_duplicates(items):
    seen = set()
    result = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        result.append(item)
    return result


def parse_codepoint(field):
    # Malformed fields fall back to 0 so that one bad record never stops a scan
    if not _HEX.fullmatch(field):
        log.debug("Malformed code point field %r, using 0", field)
        return 0
    return int(field, 16)


def parse_record(line):
    """Parse one non-blank UnicodeData.txt line into a UCDRecord."""
    fields = line.split(";")
    # Short lines are padded so the unicode 1 name lookup cannot fail
    fields += [""] * (FIELD_UNICODE_1_NAME + 1 - len(fields))
    name = fields[FIELD_NAME]
    unicode_1_name = fields[FIELD_UNICODE_1_NAME]
    if unicode_1_name:
        name = f"{name} ({unicode_1_name})"
    codepoint = parse_codepoint(fields[FIELD_CODEPOINT])
    return UCDRecord(codepoint, name, remove_duplicates(tokenize(name)))


def contains(tokens, word):
    return word in tokens


def contains_all(tokens, words):
    """True if every word is one of the tokens. An empty list of words is
    contained in anything."""
    return all(contains(tokens, word) for word in words)


def glyph(codepoint):
    if 0xD800 <= codepoint <= 0xDFFF or not 0 <= codepoint <= 0x10FFFF:
        return REPLACEMENT_CHARACTER
    return chr(codepoint)


def format_record(record):
    return "U+%04X\t%s\t%s" % (record.codepoint, glyph(record.codepoint), record.name)


def find_characters(lines, query):
    """Yield the records of `lines` whose names contain every word of
    `query`, in the order they appear."""
    words = query.upper().split()
    for line in lines:
        if isinstance(line, bytes):
            line = line.decode("utf-8")
        line = line.rstrip("\r\n")
        if not line.strip():
            continue
        record = parse_record(line)
        if contains_all(record.tokens, words):
            yield record


def list_characters(lines, query, out=None):
    """Print one line per matching character and return the number of
    matches."""
    if out is None:
        out = sys.stdout
    count = 0
    for record in find_characters(lines, query):
        print(format_record(record), file=out)
        count += 1
    log.debug("%d characters matched %r", count, query)
    return count
