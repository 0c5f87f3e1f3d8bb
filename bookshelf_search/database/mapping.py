# bookshelf_search/database/mapping.py
import stat
from pathlib import Path
from typing import Union

from bookshelf_search.config import DEFAULT_MAPPING_TEMPLATE
from bookshelf_search.errors import FileReadError

PathLike = Union[str, Path]


def mapping_path(index: str, mapping_dir: PathLike = ".", template: str = DEFAULT_MAPPING_TEMPLATE) -> Path:
    return Path(mapping_dir) / template.format(index)


def load_mapping_file(index: str, mapping_dir: PathLike = ".", template: str = DEFAULT_MAPPING_TEMPLATE) -> bytes:
    """
    Return the raw mapping blob for `index`, or b"" when no regular file
    exists for it. The content is not parsed.
    """
    path = mapping_path(index, mapping_dir, template)
    try:
        if not stat.S_ISREG(path.stat().st_mode):
            return b""
        return path.read_bytes()
    except (FileNotFoundError, NotADirectoryError):
        return b""
    except OSError as e:
        raise FileReadError(f"Error reading mapping file {path}: {e}") from e
