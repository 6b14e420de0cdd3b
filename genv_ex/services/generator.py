from __future__ import annotations

import logging

from genv_ex.config import Settings
from genv_ex.models.template_model import GenerationResult
from genv_ex.services.env_files import EnvFileStore
from genv_ex.services.transformer import render
from genv_ex.utils.time_utils import now_iso

logger = logging.getLogger(__name__)


def generate_env_example(settings: Settings | None = None, store: EnvFileStore | None = None) -> GenerationResult:
    """Render ``settings.env_file_path`` into ``settings.output_file_path``.

    The destination is checked before rendering. Dry runs skip both the
    check and the write.
    """
    settings = settings or Settings()
    store = store or EnvFileStore()

    source_text = store.read_source(settings.env_file_path)
    if not settings.dry_run:
        store.ensure_writable(settings.output_file_path, force=settings.force)

    result = render(source_text, settings.render_config(now_iso()))
    logger.info(
        "Rendered %s: %d keys, %d skipped",
        settings.env_file_path,
        len(result.keys),
        len(result.skipped_keys),
    )

    written = False
    if not settings.dry_run:
        store.write_destination(settings.output_file_path, result.output_text, force=settings.force)
        written = True

    return GenerationResult(
        content=result.output_text,
        written=written,
        output_path=settings.output_file_path,
        keys=result.keys,
        skipped_keys=result.skipped_keys,
    )
