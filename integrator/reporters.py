from django.conf import settings
from django.db import connection
from django.db.utils import DatabaseError
from django.utils import timezone

from integrator.clients.base import ENTITIES
from integrator.models import SyncStatus

NOT_SYNCED = 'Not synced yet'


def get_sync_stats():
    stats = {
        row.entity: {
            'lastSyncDate': row.last_sync,
            'totalCount': row.record_count,
            'status': row.status,
        }
        for row in SyncStatus.objects.all()
    }
    for entity in ENTITIES:
        stats.setdefault(entity, {'lastSyncDate': None, 'totalCount': 0, 'status': NOT_SYNCED})
    return stats


def get_sync_results(orchestrator):
    return {
        'inProgress': orchestrator.in_progress,
        'lastResults': orchestrator.last_results,
    }


def database_state():
    try:
        connection.ensure_connection()
    except DatabaseError:
        return 'disconnected'
    return 'connected'


def get_service_status(orchestrator):
    return {
        'online': True,
        'version': settings.APP_VERSION,
        'timestamp': timezone.now().isoformat(),
        'database': database_state(),
        'picqer': 'configured' if orchestrator.client.configured else 'not configured',
    }
