import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.configuration`) works during pytest collection
# regardless of the directory pytest is invoked from.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402
import structlog  # noqa: E402

from infrastructure.i18n import StaticLocaleDirectory  # noqa: E402
from infrastructure.persistence import InMemoryRecordStore  # noqa: E402
from infrastructure.services import providers  # noqa: E402
from modules.localization import (  # noqa: E402
    HandlerPipeline,
    LocalizationIndexProvider,
    LocalizationManager,
)
from tests.factories.content import SequentialIdGenerator  # noqa: E402


@pytest.fixture(autouse=True)
def _clear_request_context():
    """Every test starts and ends without a bound request locale."""
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def reset_providers():
    """Clear cached application singletons before and after a test."""

    def _clear():
        for provider in (
            providers.get_settings,
            providers.get_locale_directory,
            providers.get_locale_resolver,
            providers.get_id_generator,
            providers.get_record_store,
            providers.get_content_definitions,
            providers.get_handler_pipeline,
            providers.get_localization_manager,
        ):
            provider.cache_clear()

    _clear()
    yield
    _clear()


@pytest.fixture
def locale_directory():
    return StaticLocaleDirectory(
        supported=["en-US", "fr-CA", "de-DE"], default="en-US"
    )


@pytest.fixture
def record_store():
    return InMemoryRecordStore(index_providers=[LocalizationIndexProvider()])


@pytest.fixture
def id_generator():
    return SequentialIdGenerator()


@pytest.fixture
def pipeline():
    return HandlerPipeline()


@pytest.fixture
def manager(record_store, locale_directory, id_generator, pipeline):
    """LocalizationManager over an in-memory store, with no request locale."""
    return LocalizationManager(
        store=record_store,
        locales=locale_directory,
        id_generator=id_generator,
        pipeline=pipeline,
    )
