from __future__ import annotations

import asyncio
import datetime

import uvloop
from loguru import logger

from giftdraw.core.config import Settings, load_settings
from giftdraw.core.logging import setup_logging
from giftdraw.db import init_engine
from giftdraw.services.draw_flow import REPORT_COMPLETED, run_scheduled_draws


async def run_scheduler_pass(settings: Settings) -> None:
    today = datetime.date.today()
    reports = await asyncio.to_thread(run_scheduled_draws, today, settings.draw_max_attempts)
    completed = sum(1 for report in reports if report.status == REPORT_COMPLETED)
    logger.info(
        "Auto-draw pass for {day}: {completed}/{total} completed",
        day=today,
        completed=completed,
        total=len(reports),
    )
    for report in reports:
        if report.status != REPORT_COMPLETED:
            logger.bind(event_id=report.event_id).warning(
                "Event {status}: {reason}", status=report.status, reason=report.reason
            )


async def main() -> None:
    settings = load_settings()
    setup_logging(settings.log_level, settings.log_path)
    init_engine(settings.database_url)

    logger.info("auto-draw scheduler starting...")
    logger.info("Interval     - {interval}s", interval=settings.auto_draw_interval)
    logger.info("Max attempts - {attempts}", attempts=settings.draw_max_attempts)

    try:
        while True:
            try:
                await run_scheduler_pass(settings)
            except Exception as exc:
                logger.exception("Auto-draw pass failed: {error}", error=str(exc))
            await asyncio.sleep(settings.auto_draw_interval)
    finally:
        logger.info("auto-draw scheduler stopped")


if __name__ == "__main__":
    if not getattr(asyncio, "debug", False):
        uvloop.install()

    asyncio.run(main())
