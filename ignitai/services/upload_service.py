import random
import shutil
import time
from dataclasses import dataclass
from pathlib import Path

from fastapi import UploadFile

PUBLIC_PREFIX = "/uploads"


@dataclass
class StoredUpload:
    filename: str
    original_name: str
    path: Path
    public_path: str


class UploadStorage:
    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def _unique_name(self, original_name: str) -> str:
        suffix = f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}"
        return f"{suffix}-{original_name}"

    def save(self, upload: UploadFile) -> StoredUpload:
        self.directory.mkdir(parents=True, exist_ok=True)
        original_name = Path(upload.filename or "upload").name or "upload"
        filename = self._unique_name(original_name)
        target = self.directory / filename

        upload.file.seek(0)
        with target.open("wb") as out:
            shutil.copyfileobj(upload.file, out)

        return StoredUpload(
            filename=filename,
            original_name=original_name,
            path=target,
            public_path=f"{PUBLIC_PREFIX}/{filename}",
        )
