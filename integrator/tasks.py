import logging

from celery import shared_task

from integrator.sync import get_orchestrator

logger = logging.getLogger(__name__)


@shared_task
def sync_all_entities():
    result = get_orchestrator().run()
    logger.info("Scheduled sync finished: success=%s", result.get('success'))
    return result


@shared_task
def sync_single_entity(entity):
    return get_orchestrator().sync_entity(entity)
