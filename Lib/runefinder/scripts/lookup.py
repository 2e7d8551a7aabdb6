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
"""
runefinder:

Print the Unicode characters whose names contain every word of the query.

Usage:

$ runefinder cat smiling
U+1F638	😸	GRINNING CAT FACE WITH SMILING EYES
U+1F63A	😺	SMILING CAT FACE WITH OPEN MOUTH
U+1F63B	😻	SMILING CAT FACE WITH HEART-SHAPED EYES

The database is read from $UCD_PATH, or ~/UnicodeData.txt when unset. It is
downloaded from unicode.org on first use.
"""
import os
import sys

from runefinder.argparse import RFArgumentParser
from runefinder.logging import setup_logging
from runefinder.ucd import list_characters
from runefinder.utils import obtain_ucd_path, open_ucd


def print_dot():
    print(".", end="", file=sys.stderr, flush=True)


def main(args=None, environ=None):
    parser = RFArgumentParser(
        description="Find Unicode characters by name",
    )
    parser.add_argument("query", nargs="*", help="Words of the character name")
    args = parser.parse_args(args)
    setup_logging("runefinder", args, __name__)
    if environ is None:
        environ = os.environ

    path = obtain_ucd_path(environ)
    downloading = not path.exists()
    with open_ucd(path, on_tick=print_dot) as ucd:
        if downloading:
            print(file=sys.stderr)
        list_characters(ucd, " ".join(args.query))


if __name__ == "__main__":
    main()
