import logging, sys

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(level: str = "INFO"):
    level = (level or "INFO").upper()
    for name in UVICORN_LOGGERS:
        logging.getLogger(name).setLevel(level)

    root = logging.getLogger()
    if root.handlers:
        # deja configurat (uvicorn --log-config, pytest etc.)
        return
    root.setLevel(level)
    h = logging.StreamHandler(sys.stdout)
    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s [%(threadName)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )
    h.setFormatter(fmt)
    root.addHandler(h)
