from django.urls import path

from integrator import views

urlpatterns = [
    path('', views.dashboard, name='dashboard'),
    path('dashboard/', views.dashboard, name='dashboard-page'),
    path('api/status', views.status, name='status'),
    path('api/stats', views.stats, name='stats'),
    path('api/sync', views.sync_all, name='sync-all'),
    # before the <entity> pattern so "results" is never taken for an entity
    path('api/sync/results', views.sync_results, name='sync-results'),
    path('api/sync/<str:entity>', views.sync_entity, name='sync-entity'),
]
