"""Content localization manager.

Groups records that translate one another into localization sets,
creates new translations, and picks the best record of each set for a
locale.

Usage:
    manager = LocalizationManager(
        store=store,
        locales=SettingsLocaleDirectory(settings.localization),
        id_generator=RandomIdGenerator(),
        pipeline=HandlerPipeline([LoggingLocalizationHandler()]),
    )

    french = await manager.localize(record, "fr-CA")
"""

from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from infrastructure.i18n.directory import LocaleDirectory
from infrastructure.i18n.locales import canonical_locale, is_supported
from infrastructure.logging import get_module_logger, get_request_locale
from infrastructure.models.content import ContentRecord
from infrastructure.persistence.identifiers import IdentifierGenerator
from infrastructure.persistence.store import RecordStore
from modules.localization.exceptions import UnsupportedLocaleError
from modules.localization.handlers import HandlerPipeline
from modules.localization.locks import KeyedLock
from modules.localization.merge import MergeArrayHandling, merge_json
from modules.localization.models import (
    LocalizationContext,
    LocalizationIndexEntry,
    LocalizationPart,
)
from modules.localization.resolver import resolve_single_per_set

logger = get_module_logger()


class LocalizationManager:
    """Coordinates lookups, translation creation and set resolution.

    Args:
        store: Record store with a LocalizationIndexEntry index registered.
        locales: Supported and default locales.
        id_generator: Source of set ids and ids for cloned records.
        pipeline: Handlers notified around translation creation.
        request_locale_provider: Returns the current request's locale, or
            None outside a request. Defaults to the locale bound in the
            logging context by the HTTP middleware.
    """

    def __init__(
        self,
        store: RecordStore,
        locales: LocaleDirectory,
        id_generator: IdentifierGenerator,
        pipeline: Optional[HandlerPipeline] = None,
        request_locale_provider: Callable[[], Optional[str]] = get_request_locale,
    ):
        self._store = store
        self._locales = locales
        self._ids = id_generator
        self._pipeline = pipeline or HandlerPipeline()
        self._request_locale = request_locale_provider
        self._locks = KeyedLock()

    @property
    def pipeline(self) -> HandlerPipeline:
        return self._pipeline

    # Lookups

    async def get_record(
        self, localization_set: str, locale: str
    ) -> Optional[ContentRecord]:
        """Return the member of a set in the given locale, or None."""
        return await self._store.query_first(
            LocalizationIndexEntry,
            localization_set=localization_set,
            locale=canonical_locale(locale),
        )

    async def get_records_for_set(self, localization_set: str) -> List[ContentRecord]:
        """Return every member of a set, in no particular order."""
        return await self._store.query(
            LocalizationIndexEntry, localization_set=localization_set
        )

    async def get_records_for_sets(
        self, localization_sets: Iterable[str], locale: str
    ) -> List[ContentRecord]:
        """Return the members of many sets that are in one locale."""
        sets = list(localization_sets)
        if not sets:
            return []
        return await self._store.query(
            LocalizationIndexEntry,
            localization_set=sets,
            locale=canonical_locale(locale),
        )

    # Translation creation

    async def localize(self, record: ContentRecord, target_locale: str) -> ContentRecord:
        """Return the translation of ``record`` in ``target_locale``.

        Creates the translation if the record's set has none in that
        locale yet; otherwise returns the existing member unchanged.

        Raises:
            UnsupportedLocaleError: If the locale is not supported. Nothing
                is written in that case.
        """
        supported = await self._locales.list_supported_locales()
        if not is_supported(target_locale, supported):
            logger.warning(
                "unsupported_locale_requested",
                content_item_id=record.content_item_id,
                locale=target_locale,
            )
            raise UnsupportedLocaleError(target_locale, supported)

        locale = canonical_locale(target_locale)
        localization_set = await self._ensure_anchored(record)

        async with self._locks.hold(localization_set):
            existing = await self.get_record(localization_set, locale)
            if existing is not None:
                logger.debug(
                    "translation_already_exists",
                    localization_set=localization_set,
                    locale=locale,
                    content_item_id=existing.content_item_id,
                )
                return existing

            cloned = record.clone(self._ids.new_id())
            cloned_part = cloned.get_part(LocalizationPart)
            cloned_part.locale = locale
            cloned_part.localization_set = localization_set
            cloned.apply_part(cloned_part)

            context = LocalizationContext(
                content_item=cloned,
                original=record,
                localization_set=localization_set,
                locale=locale,
            )

            await self._pipeline.run_before(context)
            await self._store.save(context.content_item)
            await self._pipeline.run_after(context)

        logger.info(
            "localized_content_item",
            context_id=context.context_id,
            localization_set=localization_set,
            locale=locale,
            source_item_id=record.content_item_id,
            content_item_id=context.content_item.content_item_id,
        )
        return context.content_item

    async def _ensure_anchored(self, record: ContentRecord) -> str:
        """Return the record's set id, assigning one on first localization.

        An unanchored record joins a new set in the default locale and is
        saved. The stored copy is re-read under a per-record lock so two
        concurrent first localizations agree on one set.
        """
        part = record.get_part(LocalizationPart)
        if part.is_anchored:
            return part.localization_set

        async with self._locks.hold(f"item:{record.content_item_id}"):
            stored = await self._store.get(record.content_item_id)
            if stored is not None:
                stored_part = stored.get_part(LocalizationPart)
                if stored_part.is_anchored:
                    record.apply_part(stored_part)
                    return stored_part.localization_set

            part.localization_set = self._ids.new_id()
            part.locale = await self._locales.get_default_locale()
            record.apply_part(part)
            await self._store.save(record)

        logger.info(
            "localization_set_created",
            localization_set=part.localization_set,
            locale=part.locale,
            content_item_id=record.content_item_id,
        )
        return part.localization_set

    # Bulk maintenance

    async def sync_fields(
        self,
        localization_set: str,
        patch: Dict[str, Any],
        array_handling: MergeArrayHandling = MergeArrayHandling.REPLACE,
    ) -> List[ContentRecord]:
        """Merge ``patch`` into the content of every member of a set.

        By default arrays in the patch replace existing arrays. The
        LocalizationPart of each record is left as it was.

        Returns:
            The updated records.
        """
        records = await self.get_records_for_set(localization_set)
        for record in records:
            part = record.get_part(LocalizationPart)
            merge_json(record.content, patch, array_handling=array_handling)
            record.apply_part(part)
            await self._store.save(record)

        logger.info(
            "localization_set_synced",
            localization_set=localization_set,
            record_count=len(records),
            fields=sorted(patch.keys()),
        )
        return records

    # Set resolution

    async def _preferred_locales(self) -> Tuple[str, str]:
        default_locale = canonical_locale(await self._locales.get_default_locale())
        request_locale = self._request_locale()
        current = canonical_locale(request_locale) if request_locale else default_locale
        return current, default_locale

    async def deduplicate_records(
        self, records: Iterable[ContentRecord]
    ) -> Dict[str, ContentRecord]:
        """Keep one record per localization set for the current request.

        Each set is represented by its record in the request locale, else
        the default locale, else any member present in ``records``.
        Records that belong to no set are left out.

        Returns:
            Set id -> chosen record, drawn from ``records``.
        """
        by_id = {record.content_item_id: record for record in records}
        if not by_id:
            return {}

        entries = await self._store.query_index(
            LocalizationIndexEntry, content_item_id=list(by_id)
        )
        current, default_locale = await self._preferred_locales()

        deduplicated: Dict[str, ContentRecord] = {}
        for entry in resolve_single_per_set(entries, current, default_locale):
            deduplicated[entry.localization_set] = by_id[entry.content_item_id]
        return deduplicated

    async def get_first_item_id_for_sets(
        self, localization_sets: Iterable[str]
    ) -> Dict[str, str]:
        """Resolve one content item id per set, in the caller's set order.

        Sets without any member are skipped.

        Returns:
            Set id -> content item id, iterating in ``localization_sets`` order.
        """
        sets = list(localization_sets)
        if not sets:
            return {}

        entries = await self._store.query_index(
            LocalizationIndexEntry, localization_set=sets
        )
        current, default_locale = await self._preferred_locales()
        resolved = {
            entry.localization_set: entry.content_item_id
            for entry in resolve_single_per_set(entries, current, default_locale)
        }

        first_items: Dict[str, str] = {}
        for localization_set in sets:
            if localization_set in resolved:
                first_items[localization_set] = resolved[localization_set]
        return first_items
