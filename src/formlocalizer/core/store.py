"""
Reading and writing language pack files.

Two load modes exist because the two callers want different failure behavior:
`load` never fails and is used when merging freshly extracted strings into a pack,
while `load_strict` reports a missing or malformed pack so the apply path can fall
back to the base language.
"""

import json
import logging
import shutil
import tempfile
from pathlib import Path
from typing import Union

from formlocalizer import constants
from .document import ResourceDocument
from .errors import PackMalformedError, PackMissingError, PackWriteError

logger = logging.getLogger("FormLocalizer.Store")


class ResourceStore:
    """Loads and saves `ResourceDocument`s as JSON pack files."""

    def load_strict(self, path: Union[str, Path]) -> ResourceDocument:
        """
        Reads and parses the pack at `path`.

        Raises:
            PackMissingError: If the file does not exist.
            PackMalformedError: If the file cannot be read, is not valid JSON, or
                its root is not an object.
        """
        path = Path(path)
        if not path.is_file():
            raise PackMissingError(path)
        try:
            with path.open("r", encoding=constants.i18n.PACK_READ_ENCODING) as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise PackMalformedError(path, f"invalid JSON at line {e.lineno} column {e.colno}") from e
        except UnicodeDecodeError as e:
            raise PackMalformedError(path, "file is not UTF-8 encoded") from e
        except OSError as e:
            raise PackMalformedError(path, str(e)) from e

        if not isinstance(data, dict):
            raise PackMalformedError(path, f"expected an object at the root, got {type(data).__name__}")
        return ResourceDocument.from_dict(data)

    def load(self, path: Union[str, Path]) -> ResourceDocument:
        """Like `load_strict`, but substitutes an empty document for any failure."""
        try:
            return self.load_strict(path)
        except PackMissingError:
            logger.info("No language pack at %s yet; starting from an empty document.", path)
        except PackMalformedError as e:
            logger.warning("%s. Starting from an empty document.", e)
        return ResourceDocument()

    def dumps(self, document: ResourceDocument) -> str:
        """Serializes `document` with sorted keys so equal documents give equal text."""
        return json.dumps(
            document.to_dict(),
            indent=constants.i18n.JSON_INDENT,
            ensure_ascii=False,
        ) + "\n"

    def save(self, path: Union[str, Path], document: ResourceDocument) -> None:
        """
        Atomically replaces the file at `path` with the serialized document.

        Raises:
            PackWriteError: If the directory or file cannot be written.
        """
        path = Path(path)
        payload = self.dumps(document)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", delete=False, dir=path.parent, encoding=constants.i18n.PACK_ENCODING,
                newline="\n", suffix=".tmp",
            ) as temp_f:
                temp_f.write(payload)
                temp_path = temp_f.name
            shutil.move(temp_path, path)
        except OSError as e:
            msg = f"Failed to save language pack to {path}: {e}"
            logger.error(msg)
            raise PackWriteError(msg) from e
        logger.info("Saved language pack %s (%d forms)", path, len(document.forms))
