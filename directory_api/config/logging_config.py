# directory_api/config/logging_config.py
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    root.setLevel(level.upper())

    # create_app() may run more than once (tests); keep a single handler
    if not any(getattr(h, "_directory_api", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._directory_api = True  # type: ignore[attr-defined]
        root.addHandler(handler)

    logging.getLogger("werkzeug").setLevel(logging.WARNING)
