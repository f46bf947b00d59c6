# logging_config.py
import json
import logging
from datetime import datetime, timezone

from config import LOG_LEVEL


class JsonFormatter(logging.Formatter):
     def format(self, record: logging.LogRecord) -> str:
          payload = {
               "timestamp": datetime.now(timezone.utc).isoformat(),
               "level": record.levelname,
               "module": record.name,
               "message": record.getMessage(),
          }
          if record.exc_info:
               payload["exception"] = self.formatException(record.exc_info)
          return json.dumps(payload, ensure_ascii=False)


def configure_logging() -> None:
     """Install a single JSON stream handler on the root logger."""
     root_logger = logging.getLogger()
     root_logger.handlers.clear()
     root_logger.setLevel(LOG_LEVEL)

     handler = logging.StreamHandler()
     handler.setFormatter(JsonFormatter())
     root_logger.addHandler(handler)

     for logger_name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
          logging.getLogger(logger_name).setLevel(LOG_LEVEL)
     logging.getLogger("azure").setLevel(logging.WARNING)
