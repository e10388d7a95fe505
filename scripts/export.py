import argparse
import asyncio
import logging
from pathlib import Path

from folio.services.exporter import export_site
from folio.settings import settings
from folio.store import build_store

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(description="Export site content as JSON")
    parser.add_argument("--out", default=settings.EXPORT_DIR, help="output directory")
    args = parser.parse_args()

    try:
        counts = asyncio.run(export_site(build_store(settings), Path(args.out)))
        logger.info(f"Export completed successfully: {counts}")
    except Exception as e:
        logger.error(f"Export failed: {e}", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
