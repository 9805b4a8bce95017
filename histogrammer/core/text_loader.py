"""Input file loading."""


def load_text(path: str) -> bytes:
    """Read the whole file at ``path`` as raw bytes.

    Raises:
        FileNotFoundError: If the path cannot be opened for reading
    """
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as exc:
        raise FileNotFoundError(f'File "{path}" not found') from exc
