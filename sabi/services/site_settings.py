"""Site settings: stored key/value overrides on top of built-in defaults."""

from sabi.models.site_settings import SiteSettings, SiteSettingsUpdate
from sabi.services.mapping import settings_from_rows, settings_to_rows
from sabi.services.store import CollectionStore
from sabi.utils.ids import utc_now
from sabi.utils.logging import get_structured_logger

logger = get_structured_logger(__name__)


async def get_site_settings(store: CollectionStore) -> SiteSettings:
    return settings_from_rows(await store.list())


async def update_site_settings(store: CollectionStore, data: SiteSettingsUpdate) -> SiteSettings:
    changes = data.changes()
    if changes:
        await store.upsert(settings_to_rows(changes, utc_now().isoformat()))
        logger.info("Site settings updated", keys=sorted(changes))
    return await get_site_settings(store)
