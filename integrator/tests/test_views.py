from unittest.mock import patch

from django.db import DatabaseError
from django.test import TestCase
from django.utils import timezone

from integrator.clients.picqer_client import PicqerClient
from integrator.models import Product, SyncStatus
from integrator.sync import SyncOrchestrator
from integrator.tests.fakes import FakeClient


class ViewTestCase(TestCase):
    def setUp(self):
        self.orchestrator = SyncOrchestrator(FakeClient())
        patcher = patch('integrator.views.get_orchestrator', return_value=self.orchestrator)
        patcher.start()
        self.addCleanup(patcher.stop)


class TestStatusEndpoint(ViewTestCase):
    def test_status(self):
        response = self.client.get('/api/status')

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(body['online'])
        self.assertEqual(body['version'], '1.0.0')
        self.assertEqual(body['database'], 'connected')
        self.assertEqual(body['picqer'], 'configured')
        self.assertIn('timestamp', body)

    def test_status_without_picqer_url(self):
        self.orchestrator.client = PicqerClient(base_url='')

        body = self.client.get('/api/status').json()

        self.assertEqual(body['picqer'], 'not configured')

    def test_status_with_database_down(self):
        with patch('integrator.reporters.connection') as conn:
            conn.ensure_connection.side_effect = DatabaseError('refused')
            body = self.client.get('/api/status').json()

        self.assertEqual(body['database'], 'disconnected')


class TestSyncTriggers(ViewTestCase):
    def test_sync_all_starts_in_background(self):
        with patch.object(self.orchestrator, 'start_full_sync') as start:
            response = self.client.post('/api/sync')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {
            'success': True,
            'message': 'Sync started for all entities',
            'background': True,
        })
        start.assert_called_once_with()

    def test_sync_all_requires_post(self):
        self.assertEqual(self.client.get('/api/sync').status_code, 405)

    def test_sync_all_failure_to_start(self):
        with patch.object(self.orchestrator, 'start_full_sync', side_effect=RuntimeError("can't start new thread")):
            with self.assertLogs('integrator.views', level='ERROR'):
                response = self.client.post('/api/sync')

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {'success': False, 'error': "can't start new thread"})

    def test_sync_single_entity(self):
        with patch.object(self.orchestrator, 'start_entity_sync') as start:
            response = self.client.post('/api/sync/warehouses')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {
            'success': True,
            'message': 'Sync started for warehouses',
            'background': True,
        })
        start.assert_called_once_with('warehouses')

    def test_unknown_entity(self):
        with patch.object(self.orchestrator, 'start_entity_sync') as start:
            response = self.client.post('/api/sync/foobar')

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {'success': False, 'message': 'Unknown entity type: foobar'})
        start.assert_not_called()

    def test_post_to_results_is_an_unknown_entity(self):
        with patch.object(self.orchestrator, 'start_entity_sync') as start:
            response = self.client.post('/api/sync/results')

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {'success': False, 'message': 'Unknown entity type: results'})
        start.assert_not_called()


class TestResultsEndpoint(ViewTestCase):
    def test_before_any_sync(self):
        response = self.client.get('/api/sync/results')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {'inProgress': False, 'lastResults': {}})

    def test_after_sync(self):
        self.orchestrator.run()

        body = self.client.get('/api/sync/results').json()

        self.assertFalse(body['inProgress'])
        self.assertTrue(body['lastResults']['success'])
        self.assertEqual(body['lastResults']['products'], {'success': True, 'count': 3})

    def test_reports_in_flight_flag(self):
        self.orchestrator.in_progress = True

        body = self.client.get('/api/sync/results').json()

        self.assertTrue(body['inProgress'])


class TestStatsEndpoint(ViewTestCase):
    def test_never_synced_defaults(self):
        body = self.client.get('/api/stats').json()

        self.assertTrue(body['success'])
        self.assertFalse(body['syncInProgress'])
        for entity in ('products', 'picklists', 'warehouses'):
            self.assertEqual(body['stats'][entity], {
                'lastSyncDate': None,
                'totalCount': 0,
                'status': 'Not synced yet',
            })

    def test_synced_entity_matches_table(self):
        self.orchestrator.sync_entity('products')

        stats = self.client.get('/api/stats').json()['stats']

        self.assertEqual(stats['products']['totalCount'], Product.objects.count())
        self.assertEqual(stats['products']['status'], 'success')
        self.assertIsNotNone(stats['products']['lastSyncDate'])
        self.assertEqual(stats['picklists']['status'], 'Not synced yet')

    def test_error_status_reported(self):
        SyncStatus.record_error('warehouses', 'timeout', timezone.now())

        stats = self.client.get('/api/stats').json()['stats']

        self.assertEqual(stats['warehouses']['status'], 'error: timeout')

    def test_database_failure(self):
        with patch('integrator.views.get_sync_stats', side_effect=DatabaseError('gone')):
            with self.assertLogs('integrator.views', level='ERROR'):
                response = self.client.get('/api/stats')

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {'success': False, 'error': 'gone'})


class TestDashboard(ViewTestCase):
    def test_root_serves_dashboard(self):
        response = self.client.get('/')

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'Picqer Mirror Dashboard')

    def test_dashboard_path(self):
        self.assertEqual(self.client.get('/dashboard/').status_code, 200)
