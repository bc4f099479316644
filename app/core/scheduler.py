import logging
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from app.core.cache import TTLCache
from app.core.config import settings

logger = logging.getLogger(__name__)

scheduler = AsyncIOScheduler()


def sweep_expired_entries(cache: TTLCache):
    try:
        removed = cache.sweep()
        if removed:
            logger.info(f"Cache sweep removed {removed} expired entries")
    except Exception as e:
        logger.error(f"Error sweeping cache: {e}")


def start_scheduler(cache: TTLCache):
    if settings.TESTING:
        logger.info("Scheduler disabled in test environment")
        return

    if not scheduler.running:
        scheduler.add_job(
            sweep_expired_entries,
            'interval',
            seconds=settings.CACHE_CHECK_PERIOD,
            args=[cache],
            id='cache_sweep',
            name='Sweep Expired Cache Entries',
            replace_existing=True
        )
        scheduler.start()
        logger.info(f"Scheduler started with cache sweep every {settings.CACHE_CHECK_PERIOD}s")


def stop_scheduler():
    if scheduler.running:
        scheduler.shutdown()
        logger.info("Scheduler stopped")
