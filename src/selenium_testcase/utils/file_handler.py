import logging
from pathlib import Path
from typing import Union

from ..exceptions import InvalidArgument

logger = logging.getLogger(__name__)


class Filesystem:
    """Writes captured text (page sources and the like) to disk."""

    def __init__(self, encoding: str = 'utf-8'):
        self.encoding = encoding

    def put(self, path: Union[str, Path], content: str) -> bool:
        """
        Writes `content` to `path`, replacing any existing file.

        Missing parent directories are not created.

        Raises:
            InvalidArgument: if the path is a directory, its parent does not
                             exist, or the file cannot be written.
        """
        file_path = Path(path)
        try:
            if file_path.is_dir():
                raise InvalidArgument(f"Cannot write to {file_path}: path is a directory.")
            if not file_path.parent.is_dir():
                raise InvalidArgument(f"Cannot write to {file_path}: directory {file_path.parent} does not exist.")
            with file_path.open('w', encoding=self.encoding) as f:
                f.write(content)
        except InvalidArgument:
            raise
        except (OSError, ValueError) as e:
            # ValueError: embedded NUL byte
            raise InvalidArgument(f"Cannot write to {file_path}: {e}") from e

        logger.debug(f"Wrote {len(content)} characters to {file_path}")
        return True
