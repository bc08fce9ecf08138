import logging

from django.http import JsonResponse
from django.shortcuts import render
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from integrator.reporters import get_service_status, get_sync_results, get_sync_stats
from integrator.sync import ENTITY_MODELS, get_orchestrator

logger = logging.getLogger(__name__)


def _error_response(exc):
    return JsonResponse({'success': False, 'error': str(exc)}, status=500)


@require_GET
def dashboard(request):
    return render(request, 'integrator/dashboard.html')


@require_GET
def status(request):
    return JsonResponse(get_service_status(get_orchestrator()))


@csrf_exempt
@require_POST
def sync_all(request):
    try:
        get_orchestrator().start_full_sync()
    except Exception as exc:
        logger.exception("Error in sync endpoint")
        return _error_response(exc)
    return JsonResponse({
        'success': True,
        'message': 'Sync started for all entities',
        'background': True,
    })


@csrf_exempt
@require_POST
def sync_entity(request, entity):
    logger.info("%s sync request received", entity)
    if entity not in ENTITY_MODELS:
        return JsonResponse(
            {'success': False, 'message': f'Unknown entity type: {entity}'},
            status=400,
        )
    try:
        get_orchestrator().start_entity_sync(entity)
    except Exception as exc:
        logger.exception("Error in %s sync endpoint", entity)
        return _error_response(exc)
    return JsonResponse({
        'success': True,
        'message': f'Sync started for {entity}',
        'background': True,
    })


@csrf_exempt
@require_http_methods(['GET', 'POST'])
def sync_results(request):
    # POST falls through to the entity trigger, which rejects "results"
    if request.method == 'POST':
        return sync_entity(request, 'results')
    return JsonResponse(get_sync_results(get_orchestrator()))


@require_GET
def stats(request):
    orchestrator = get_orchestrator()
    try:
        entity_stats = get_sync_stats()
    except Exception as exc:
        logger.exception("Error in stats endpoint")
        return _error_response(exc)
    return JsonResponse({
        'success': True,
        'stats': entity_stats,
        'syncInProgress': orchestrator.in_progress,
    })
