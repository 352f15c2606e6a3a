import asyncio, logging, sys

LOGGER_NAME = "msconverter"
LOG_FORMAT = "[%(asctime)s] %(levelname)s> %(message)s"


class AsyncQueueHandler(logging.Handler):
    """Non-blocking handler that puts formatted records on an asyncio queue."""

    def __init__(self, queue: asyncio.Queue):
        super().__init__()
        self.queue = queue

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            self.queue.put_nowait((record.levelno, msg))
        except Exception:
            self.handleError(record)


async def log_worker(
    queue: asyncio.Queue, stop_event: asyncio.Event, level=logging.INFO, stream=None
) -> None:
    """Drain ``queue`` to ``stream`` (stdout by default) until ``stop_event`` is set."""
    base_handler = logging.StreamHandler(stream or sys.stdout)
    base_handler.setFormatter(logging.Formatter(LOG_FORMAT, "%H:%M:%S"))

    while not stop_event.is_set() or not queue.empty():
        try:
            lvl, msg = await asyncio.wait_for(queue.get(), timeout=0.5)
        except asyncio.TimeoutError:
            continue
        try:
            if lvl >= level:
                record = logging.LogRecord(LOGGER_NAME, lvl, "", 0, msg, None, None)
                base_handler.emit(record)
        except Exception as e:
            sys.stderr.write(f"[log_worker error] {e}\n")
        finally:
            queue.task_done()

    base_handler.flush()


def get_logger(
    queue: asyncio.Queue, name: str = LOGGER_NAME, level=logging.INFO
) -> logging.Logger:
    logger = logging.getLogger(name)
    if not any(isinstance(h, AsyncQueueHandler) for h in logger.handlers):
        handler = AsyncQueueHandler(queue)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(level)
    return logger


def release_logger(name: str = LOGGER_NAME) -> None:
    """Detach queue handlers installed by :func:`get_logger`."""
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        if isinstance(handler, AsyncQueueHandler):
            logger.removeHandler(handler)
