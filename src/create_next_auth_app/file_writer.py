"""Write generated files beneath the target directory."""

import os
import sys
from typing import Optional, TextIO

from create_next_auth_app.errors import FileSystemFailure


class FileWriter:
    """Writes text files relative to a root directory, creating parents."""

    def __init__(self, root: str):
        self.root = root

    def path_for(self, relative_path: str) -> str:
        return os.path.join(self.root, relative_path)

    def write(self, relative_path: str, content: str) -> str:
        """Write content to root/relative_path, replacing any existing file.

        Returns:
            The absolute path written.

        Raises:
            FileSystemFailure: If the directory or file cannot be written.
        """
        path = self.path_for(relative_path)
        try:
            # Encode before opening so an unencodable value leaves any existing file intact.
            # surrogateescape restores undecodable argv bytes as they were given.
            data = content.encode("utf-8", errors="surrogateescape")
            os.makedirs(os.path.dirname(path), exist_ok=True)
            with open(path, "wb") as f:
                f.write(data)
        except (OSError, UnicodeError) as e:
            raise FileSystemFailure(path, e) from e
        return path


class DryRunFileWriter(FileWriter):
    """Reports each write instead of touching the filesystem."""

    def __init__(self, root: str, output: Optional[TextIO] = None):
        super().__init__(root)
        self._output = output or sys.stdout

    def write(self, relative_path: str, content: str) -> str:
        path = self.path_for(relative_path)
        print(f"Would write: {path} ({len(content)} bytes)", file=self._output)
        return path
