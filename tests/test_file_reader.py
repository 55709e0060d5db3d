import base64

import pytest

from compass_helpers.constants import PICTURE_FILE_TYPES, SCORE_FILE_TYPES
from compass_helpers.file_reader import CHUNK_SIZE, FileReadError, read_uploaded_file


class Upload:
    def __init__(self, name, content, type=""):
        self.name = name
        self.type = type
        self._content = content

    def getvalue(self):
        return self._content


def test_encodes_content_as_base64():
    content = b"Maths: A*\nPhysics: A\n"
    data = read_uploaded_file(Upload("report.pdf", content, "application/pdf"), SCORE_FILE_TYPES)
    assert data.name == "report.pdf"
    assert data.mime_type == "application/pdf"
    assert data.base64 == base64.b64encode(content).decode("ascii")
    assert data.raw_bytes() == content


def test_progress_is_reported_per_chunk_and_ends_at_100():
    content = b"x" * (CHUNK_SIZE * 2 + 10)
    seen = []
    data = read_uploaded_file(
        Upload("big.png", content, "image/png"), PICTURE_FILE_TYPES, on_progress=seen.append,
    )
    assert seen[0] == 0
    assert seen[-1] == 100
    assert len(seen) == 4
    assert seen == sorted(seen)
    assert data.raw_bytes() == content


def test_guesses_mime_type_from_name():
    data = read_uploaded_file(Upload("photo.jpg", b"\xff\xd8\xff"), PICTURE_FILE_TYPES)
    assert data.mime_type == "image/jpeg"


def test_rejects_disallowed_type():
    with pytest.raises(FileReadError, match="Unsupported file type"):
        read_uploaded_file(Upload("report.pdf", b"%PDF", "application/pdf"), PICTURE_FILE_TYPES)


def test_rejects_empty_file():
    with pytest.raises(FileReadError, match="empty"):
        read_uploaded_file(Upload("report.pdf", b"", "application/pdf"), SCORE_FILE_TYPES)


def test_rejects_oversized_file():
    with pytest.raises(FileReadError, match="limit"):
        read_uploaded_file(
            Upload("report.pdf", b"x" * 11, "application/pdf"), SCORE_FILE_TYPES, max_bytes=10,
        )
