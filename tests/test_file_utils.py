import pytest

from buildcast.utils import format_file_size, generate_id, get_file_type_category
from buildcast.utils.file_utils import is_valid_file_type, truncate_text


@pytest.mark.parametrize(
    "size, expected",
    [(0, "0 Bytes"), (500, "500 Bytes"), (1024, "1 KB"), (1536, "1.5 KB"), (10 * 1024 * 1024, "10 MB")],
)
def test_format_file_size(size, expected):
    assert format_file_size(size) == expected


def test_file_type_category():
    assert get_file_type_category("text/plain") == "text"
    assert get_file_type_category("application/pdf") == "pdf"
    assert get_file_type_category("image/png") == "image"
    assert get_file_type_category("application/zip") == "unknown"
    assert get_file_type_category("") == "unknown"


def test_is_valid_file_type():
    assert is_valid_file_type("image/jpg")
    assert not is_valid_file_type("image/gif")


def test_generate_id():
    ident = generate_id(12)
    assert len(ident) == 12
    assert ident.isalnum() and ident == ident.lower()
    assert generate_id() != generate_id()


def test_truncate_text():
    assert truncate_text("short", 10) == "short"
    assert truncate_text("a" * 20, 10) == "aaaaaaa..."
