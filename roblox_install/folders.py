""" The user's well known directories. """

from __future__ import annotations
import pathlib
from typing import Optional

import platformdirs


class KnownFolders:
    """ Looks up the user's home and Documents directories.
        Either lookup returns None if the directory cannot be determined.
    """

    def home(self) -> Optional[pathlib.Path]:
        try:
            return pathlib.Path.home()
        except RuntimeError:
            # Raised when neither HOME nor the password database give a home directory.
            return None

    def documents(self) -> Optional[pathlib.Path]:
        documents = platformdirs.user_documents_dir()
        if not documents:
            return None
        return pathlib.Path(documents)
