"""
Tests for byte-range chunking.
"""

import math

import pytest

from chunkscribe.core.chunking import chunk_file
from chunkscribe.models import SourceFile

from conftest import MB


@pytest.mark.parametrize("size,max_bytes", [(1, 1), (10, 3), (10, 5), (10, 10), (10, 100), (1000, 7)])
def test_chunks_reconstitute_source(make_source, size, max_bytes):
    """Chunks joined in index order give back the original bytes."""
    data = bytes(i % 256 for i in range(size))
    source = make_source(data=data)

    chunks = chunk_file(source, max_bytes)

    assert b"".join(c.data for c in chunks) == data
    assert len(chunks) == math.ceil(size / max_bytes)
    assert [c.index for c in chunks] == list(range(len(chunks)))
    assert all(c.total == len(chunks) for c in chunks)


def test_only_last_chunk_may_be_smaller(make_source):
    chunks = chunk_file(make_source(data=b"x" * 23), 5)

    assert [c.size for c in chunks] == [5, 5, 5, 5, 3]
    assert all(c.size > 0 for c in chunks)
    assert [(c.start, c.end) for c in chunks] == [(0, 5), (5, 10), (10, 15), (15, 20), (20, 23)]


def test_chunks_inherit_parent_metadata():
    source = SourceFile(data=b"abcdefgh", media_type="video/quicktime", name="standup.mov")

    for chunk in chunk_file(source, 3):
        assert chunk.media_type == "video/quicktime"
        assert chunk.name == "standup.mov"


def test_empty_file_yields_no_chunks(make_source):
    assert chunk_file(make_source(data=b""), 10) == []


def test_non_positive_max_bytes_rejected(make_source):
    with pytest.raises(ValueError):
        chunk_file(make_source(), 0)


def test_chunking_is_idempotent(make_source):
    source = make_source(data=b"some audio bytes" * 10)

    assert chunk_file(source, 17) == chunk_file(source, 17)


def test_forty_mb_file_with_fifteen_mb_chunks(make_source):
    source = make_source(data=bytes(40 * MB))

    chunks = chunk_file(source, 15 * MB)

    assert [c.size for c in chunks] == [15 * MB, 15 * MB, 10 * MB]


def test_chunks_are_views_into_the_source_buffer(make_source):
    source = make_source(data=bytes(range(256)) * 4)

    chunks = chunk_file(source, 300)

    for chunk in chunks:
        assert isinstance(chunk.data, memoryview)
        assert chunk.data.obj is source.data
    assert bytes(chunks[1].data) == source.data[300:600]
