"""Load arithmetic expressions from text files and archives."""
from pathlib import Path
import tarfile
import tempfile
from typing import Callable, Dict, List
import zipfile

import py7zr
from py7zr.exceptions import Bad7zFile
from pydantic import BaseModel, ConfigDict, Field, FilePath

from arithmetic_calculator.common.logger import logger


# Raised by the archive libraries on truncated or foreign data
ARCHIVE_ERRORS = (zipfile.BadZipFile, tarfile.TarError, Bad7zFile, EOFError)


def _is_text_member(name: str) -> bool:
    return name.endswith(".txt")


def _read_txt(path: Path) -> bytes:
    return path.read_bytes()


def _read_zip(path: Path) -> bytes:
    with zipfile.ZipFile(path) as zf:
        names = [name for name in zf.namelist() if _is_text_member(name)]
        if not names:
            raise ValueError(f"📄❌ {path.name} holds no .txt expression file")
        return zf.read(names[0])


def _read_tar_xz(path: Path) -> bytes:
    with tarfile.open(path, "r:xz") as tf:
        members = [m for m in tf.getmembers() if m.isfile() and _is_text_member(m.name)]
        if not members:
            raise ValueError(f"📄❌ {path.name} holds no .txt expression file")
        return tf.extractfile(members[0]).read()


def _read_7z(path: Path) -> bytes:
    with py7zr.SevenZipFile(path, mode="r") as archive:
        names = [name for name in archive.getnames() if _is_text_member(name)]
        if not names:
            raise ValueError(f"📄❌ {path.name} holds no .txt expression file")
        # py7zr only extracts to disk
        with tempfile.TemporaryDirectory() as tmpdir:
            archive.extract(path=tmpdir, targets=[names[0]])
            return (Path(tmpdir) / names[0]).read_bytes()


# Compound suffix of the input file -> reader returning the raw expression text
READERS: Dict[str, Callable[[Path], bytes]] = {
    ".txt": _read_txt,
    ".zip": _read_zip,
    ".tar.xz": _read_tar_xz,
    ".7z": _read_7z,
}


def input_format(path: Path) -> str:
    """
    Return the READERS key matching a file name.

    :param Path path: Input file
    :return: Format suffix, e.g. ".txt" or ".tar.xz"
    :rtype: str
    :raises ValueError: If no reader handles the file
    """
    suffixes = Path(path).suffixes
    for candidate in ("".join(suffixes[-2:]), "".join(suffixes[-1:])):
        if candidate in READERS:
            return candidate
    raise ValueError(f"📄❌ Unsupported input format: {''.join(suffixes) or path.name}")


class ExpressionLoader(BaseModel):
    """
    Read arithmetic expressions, one per line, from a file.

    Plain .txt files are read directly; .zip, .tar.xz and .7z archives
    contribute their first .txt member.
    """

    model_config = ConfigDict(frozen=True)

    encoding: str = Field(default="utf-8", description="Text encoding of the expression file")

    def read_text(self, input_file: FilePath) -> str:
        """
        Return the raw expression text of a file or archive.

        :raises ValueError: If the format is unsupported, the archive is corrupt or has no .txt member
        """
        input_file = Path(input_file)
        fmt = input_format(input_file)
        try:
            raw = READERS[fmt](input_file)
        except ARCHIVE_ERRORS as exc:
            raise ValueError(f"📄❌ Cannot read {fmt} file {input_file.name}: {exc}") from exc
        return raw.decode(self.encoding)

    def load(self, input_file: FilePath) -> List[str]:
        """
        Load the non-empty, stripped expression lines of a file or archive.

        :param FilePath input_file: Path to the input file or archive

        :return: List of expressions
        :rtype: List[str]
        """
        content = self.read_text(input_file)
        lines: List[str] = [line.strip() for line in content.splitlines() if line.strip()]
        logger.info(f"📄 Loaded {len(lines)} expressions from {input_file}")
        return lines
