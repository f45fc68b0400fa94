"""Root test configuration."""

import logging

import pytest
import structlog


def pytest_configure(config):
    """Configure structlog for tests to suppress debug/info output."""
    logging.basicConfig(level=logging.WARNING, force=True)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


@pytest.fixture(autouse=True)
def _restore_package_log_level(monkeypatch):
    """Undo log levels applied by AdiParse.from_settings and debug toggles."""
    package_logger = logging.getLogger("adiparse")
    previous = package_logger.level
    monkeypatch.setattr("adiparse.logging._level_before_debug", None)
    yield
    package_logger.setLevel(previous)


class FakeClock:
    """Manually advanced timer for cache expiry tests."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def main_section_payload() -> list[dict]:
    return [
        {"name": "header", "title": "Sunstream"},
        {
            "name": "main",
            "logoUrl": "L",
            "sectionMain1Description": "D",
            "sectionMain1Background2ImageUrl": "B",
            "lastUpdated": "2024-05-01T12:00:00Z",
        },
        {"name": "footer", "copyright": "2024"},
    ]
