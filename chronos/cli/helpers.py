# chronos/cli/helpers.py
# Shared CLI helpers for building the persistence gateway from settings

from __future__ import annotations

from ..chronos_io.persistence import JsonFileGateway
from ..config.settings import ChronosSettings
from ..core.gateway import InMemoryGateway, PersistenceGateway


# * Durable JSON gateway unless persistence is disabled in settings
def build_gateway(settings: ChronosSettings) -> PersistenceGateway:
    if not settings.persist_laps:
        return InMemoryGateway()
    return JsonFileGateway(
        settings.state_path,
        laps_filename=settings.laps_filename,
        preferences_filename=settings.preferences_filename,
    )
