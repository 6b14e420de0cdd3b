from __future__ import annotations

import logging
from pathlib import Path

SAMPLE_ENV_CONTENT = "# Sample .env file\nAPI_KEY=your_key\nDATABASE_URL=your_url\n"

logger = logging.getLogger(__name__)


class SourceNotFoundError(FileNotFoundError):
    def __init__(self, path: Path):
        super().__init__(f"No '{path}' file found")
        self.path = path


class DestinationExistsError(FileExistsError):
    def __init__(self, path: Path):
        super().__init__(f"'{path}' already exists. Use --force to overwrite it")
        self.path = path


class SourceDecodeError(ValueError):
    def __init__(self, path: Path, reason: str):
        super().__init__(f"'{path}' is not valid UTF-8 text ({reason})")
        self.path = path


class EnvFileStore:
    """Reads env files and writes templates relative to a base directory."""

    def __init__(self, base_dir: Path | None = None):
        self.base_dir = base_dir or Path.cwd()

    def resolve(self, path: str | Path) -> Path:
        return (self.base_dir / path).resolve()

    def read_source(self, path: str | Path) -> str:
        source = self.resolve(path)
        if not source.is_file():
            raise SourceNotFoundError(Path(path))
        try:
            return source.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise SourceDecodeError(Path(path), exc.reason) from exc

    def ensure_writable(self, path: str | Path, force: bool = False) -> Path:
        destination = self.resolve(path)
        if destination.exists() and not force:
            raise DestinationExistsError(Path(path))
        return destination

    def write_destination(self, path: str | Path, content: str, force: bool = False) -> Path:
        destination = self.ensure_writable(path, force=force)
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(content, encoding="utf-8")
        logger.debug("Wrote %d bytes to %s", len(content), destination)
        return destination

    def create_sample(self, path: str | Path) -> bool:
        sample = self.resolve(path)
        if sample.exists():
            return False
        sample.parent.mkdir(parents=True, exist_ok=True)
        sample.write_text(SAMPLE_ENV_CONTENT, encoding="utf-8")
        logger.debug("Created sample env file at %s", sample)
        return True
