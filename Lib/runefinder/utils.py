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
from concurrent.futures import ThreadPoolExecutor, wait
from pathlib import Path
import logging
import os

import requests

from runefinder.constants import (
    DOWNLOAD_CHUNK_SIZE,
    PROGRESS_INTERVAL,
    UCD_FILENAME,
    UCD_PATH_ENV,
    UCD_URL,
)

log = logging.getLogger(__name__)


def obtain_ucd_path(environ=None):
    """Return the location of UnicodeData.txt.

    The UCD_PATH entry of `environ` wins; otherwise the file lives in the
    user's home directory."""
    if environ is None:
        environ = {}
    ucd_path = environ.get(UCD_PATH_ENV)
    if ucd_path:
        return Path(ucd_path)
    return Path.home() / UCD_FILENAME


def download_file(url, dst_path):
    """Download a file from a url to dst_path. A partially written file is
    removed if the download fails."""
    try:
        with requests.get(url, stream=True) as request:
            request.raise_for_status()
            with open(dst_path, "wb") as downloaded_file:
                for chunk in request.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
                    downloaded_file.write(chunk)
    except (OSError, requests.RequestException):
        if os.path.exists(dst_path):
            os.remove(dst_path)
        raise


def wait_for(future, on_tick=None, interval=PROGRESS_INTERVAL):
    """Block until `future` is done, calling `on_tick` every `interval`
    seconds meanwhile. Returns the future's result or raises its exception."""
    while True:
        done, _ = wait([future], timeout=interval)
        if done:
            return future.result()
        if on_tick is not None:
            on_tick()


def fetch_ucd(path, url=UCD_URL, on_tick=None):
    log.info("%s not found", path)
    log.info("Downloading %s...", url)
    with ThreadPoolExecutor(max_workers=1) as executor:
        future = executor.submit(download_file, url, path)
        wait_for(future, on_tick)
    log.info("Saved %s", path)


def open_ucd(path, url=UCD_URL, on_tick=None):
    """Open the database at `path` for reading, downloading it from `url`
    first if it does not exist yet."""
    path = Path(path)
    if not path.exists():
        fetch_ucd(path, url, on_tick)
    return open(path, "r", encoding="utf-8")
