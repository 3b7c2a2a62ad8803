import logging
from backend.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

def setup_logging(level: str | None = None) -> None:
    root = logging.getLogger()
    if root.handlers:
        # already configured (uvicorn, pytest, repeated imports)
        root.setLevel((level or settings.log_level).upper())
        return
    logging.basicConfig(level=(level or settings.log_level).upper(), format=LOG_FORMAT)
