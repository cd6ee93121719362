# src/pdf_chunk_extractor/logging_config.py

"""Logging setup for the command-line entry point.

Library modules only create loggers; handlers are installed here.
"""

import logging.config


def configure_logging(level: str = "INFO") -> None:
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "stream": "ext://sys.stderr",
                },
            },
            "root": {"level": level.upper(), "handlers": ["default"]},
            "loggers": {
                # SDK request logs are noisy at INFO
                "httpx": {"level": "WARNING"},
                "pdfminer": {"level": "WARNING"},
            },
        }
    )
