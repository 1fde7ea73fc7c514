"""Shared test fixtures: sample patches, temp files, logger reset."""

from __future__ import annotations

import logging
import textwrap
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Undo setup_logging() so caplog sees records in every test."""
    yield
    logger = logging.getLogger("patchstat")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def simple_patch() -> bytes:
    """One file, one hunk: a context line, a deletion, two insertions."""
    return b"--- a\n+++ b\n@@ -1,2 +1,3 @@\n context\n-old\n+new1\n+new2\n"


@pytest.fixture
def binary_patch() -> bytes:
    return b"Binary files foo and bar differ\n"


@pytest.fixture
def git_patch() -> bytes:
    """A mailed git patch: commit prose, two text files, one binary file."""
    return textwrap.dedent("""\
        From 1234abcd Mon Sep 17 00:00:00 2001
        Subject: [PATCH] tidy greeting

        Reword the greeting and drop a stale helper.
        ---
        diff --git a/hello.py b/hello.py
        index e69de29..4b825dc 100644
        --- a/hello.py
        +++ b/hello.py
        @@ -1,2 +1,2 @@
         def greet(name):
        -    return "hi " + name
        +    return f"Hello, {name}!"
        @@ -10,2 +10,1 @@
         def helper():
        -    pass
        diff --git a/data.txt b/data.txt
        index 0000000..abc1234 100644
        --- a/data.txt
        +++ b/data.txt
        @@ -1 +1,2 @@
         first
        +second
        diff --git a/logo.png b/logo.png
        Binary files a/logo.png and b/logo.png differ
    """).encode("utf-8")


@pytest.fixture
def context_merge_patch() -> bytes:
    """Hunk using ``!`` modification markers and timestamped headers."""
    return (
        b"--- old/conf.ini\t2024-01-01 10:00:00\n"
        b"+++ new/conf.ini\t2024-01-02 11:30:00\n"
        b"@@ -1,3 +1,3 @@\n"
        b" [server]\n"
        b"!port = 8080\n"
        b" host = localhost\n"
    )


@pytest.fixture
def patch_file(tmp_path: Path, simple_patch: bytes) -> Path:
    path = tmp_path / "change.patch"
    path.write_bytes(simple_patch)
    return path
