import pytest


@pytest.fixture
def text_file(tmp_path):
    """Factory writing ``content`` to a file and returning its path as str."""

    def _write(content, name="input.txt"):
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return str(path)

    return _write
