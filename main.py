import logging
import signal
import threading
import argparse

from core.app_context import AppContext
from core.config_loader import load_config
from database.init_db import init_db

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

shutdown_event = threading.Event()


def signal_handler(sig, frame):
    logger.info("Shutdown signal received")
    shutdown_event.set()


def selected_schedulers(ctx: AppContext, mode: str):
    if mode == 'job-matcher':
        return [ctx.job_matcher]
    if mode == 'reminder':
        return [ctx.preference_reminder]
    return [
        scheduler for scheduler, enabled in (
            (ctx.job_matcher, ctx.config.job_matcher.enabled),
            (ctx.preference_reminder, ctx.config.preference_reminder.enabled),
        )
        if enabled
    ]


def main():
    parser = argparse.ArgumentParser(description="CareerMatch Scheduler Driver")
    parser.add_argument('--mode', type=str, choices=['all', 'job-matcher', 'reminder'], default='all',
                        help='Schedulers to run: all (default), job-matcher, or reminder')
    parser.add_argument('--config', type=str, default='config.yaml', help='Path to config.yaml')
    parser.add_argument('--run-once', action='store_true',
                        help='Run a single tick of each selected scheduler and exit')
    args = parser.parse_args()

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    logger.info(f"Main driver starting in {args.mode.upper()} mode...")

    # Initialize DB (with retry logic)
    init_db()

    config = load_config(args.config)
    ctx = AppContext.build(config)
    schedulers = selected_schedulers(ctx, args.mode)

    if not schedulers:
        logger.warning("No schedulers enabled, nothing to do")
        return

    if args.run_once:
        for scheduler in schedulers:
            logger.info(f"=== Running {scheduler.name} once ===")
            result = scheduler.run_once()
            logger.info(f"=== {scheduler.name} finished: {result} ===")
        return

    for scheduler in schedulers:
        scheduler.start()

    while not shutdown_event.wait(timeout=5):
        pass

    logger.info("Stopping schedulers...")
    for scheduler in schedulers:
        scheduler.stop(wait=True, timeout=30)
    logger.info("Shutdown complete")


if __name__ == "__main__":
    main()
