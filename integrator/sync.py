import logging
import threading
from functools import partial

from django.apps import apps
from django.conf import settings
from django.db import connection, transaction
from django.utils import timezone
from django.utils.module_loading import import_string

from integrator.clients.base import ENTITIES
from integrator.models import Picklist, Product, SyncStatus, Warehouse
from integrator.transforms import TRANSFORMS, record_id

logger = logging.getLogger(__name__)

ENTITY_MODELS = {
    'products': Product,
    'picklists': Picklist,
    'warehouses': Warehouse,
}

ALREADY_RUNNING = 'Sync already in progress'


def sync_entity(client, entity):
    """Replace every local row of ``entity`` with the current remote snapshot.

    Delete and inserts are not wrapped in one transaction: a failure after the
    delete leaves the table empty until the next successful run.
    """
    model = ENTITY_MODELS[entity]
    transform = TRANSFORMS[entity]

    try:
        logger.info("Syncing %s...", entity)
        records = client.fetch(entity)
        logger.info("Retrieved %d %s from Picqer", len(records), entity)

        model.objects.all().delete()

        now = timezone.now()
        inserted = 0
        for raw in records:
            try:
                with transaction.atomic():
                    model.objects.create(sync_date=now, **transform(raw))
                inserted += 1
            except Exception as exc:
                logger.error("Error inserting %s %s: %s", entity, record_id(entity, raw), exc)

        SyncStatus.record_success(entity, inserted, timezone.now())

        logger.info("Synced %d %s successfully", inserted, entity)
        return {'success': True, 'count': inserted}
    except Exception as exc:
        message = str(exc)
        logger.error("Error syncing %s: %s", entity, message)
        try:
            SyncStatus.record_error(entity, message, timezone.now())
        except Exception as status_exc:
            logger.error("Error updating sync status for %s: %s", entity, status_exc)
        return {'success': False, 'error': message}


class SyncOrchestrator:
    def __init__(self, client):
        self.client = client
        self.in_progress = False
        self.last_results = {}
        self._lock = threading.Lock()

    def sync_entity(self, entity):
        return sync_entity(self.client, entity)

    def run(self):
        with self._lock:
            if self.in_progress:
                logger.info("Sync already in progress, skipping request")
                return {'success': False, 'error': ALREADY_RUNNING}
            self.in_progress = True

        logger.info("Starting sync for all entities...")
        try:
            results = {entity: self.sync_entity(entity) for entity in ENTITIES}
            self.last_results = {
                'timestamp': timezone.now().isoformat(),
                **results,
                'success': any(result['success'] for result in results.values()),
            }
            logger.info("Sync completed for all entities")
        except Exception as exc:
            logger.exception("Error in full sync")
            self.last_results = {
                'timestamp': timezone.now().isoformat(),
                'error': str(exc),
                'success': False,
            }
        finally:
            self.in_progress = False
        return self.last_results

    def start_full_sync(self):
        return self._spawn(self.run, 'all')

    def start_entity_sync(self, entity):
        if entity not in ENTITY_MODELS:
            raise ValueError(f"Unknown entity type: {entity}")
        return self._spawn(partial(self.sync_entity, entity), entity)

    def _spawn(self, target, label):
        thread = threading.Thread(
            target=self._run_guarded,
            args=(target, label),
            name=f'sync-{label}',
            daemon=True,
        )
        thread.start()
        return thread

    def _run_guarded(self, target, label):
        try:
            target()
        except Exception:
            logger.exception("Error in background %s sync", label)
        finally:
            connection.close()


def build_orchestrator():
    client_class = import_string(settings.SYNC_CLIENT_CLASS)
    return SyncOrchestrator(client=client_class())


def get_orchestrator():
    return apps.get_app_config('integrator').orchestrator
