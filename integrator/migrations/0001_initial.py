from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Product',
            fields=[
                ('id', models.IntegerField(primary_key=True, serialize=False)),
                ('idproduct', models.CharField(max_length=255)),
                ('name', models.CharField(max_length=255, null=True, blank=True)),
                ('sku', models.CharField(blank=True, default='', max_length=255)),
                ('barcode', models.CharField(blank=True, default='', max_length=255)),
                ('price', models.DecimalField(decimal_places=2, default=0, max_digits=10)),
                ('stock', models.IntegerField(default=0)),
                ('sync_date', models.DateTimeField()),
            ],
            options={
                'db_table': 'products',
            },
        ),
        migrations.CreateModel(
            name='Picklist',
            fields=[
                ('id', models.IntegerField(primary_key=True, serialize=False)),
                ('idpicklist', models.CharField(max_length=255)),
                ('status', models.CharField(blank=True, default='', max_length=50)),
                ('created', models.DateTimeField()),
                ('completed', models.DateTimeField(blank=True, null=True)),
                ('warehouse_id', models.IntegerField(default=0)),
                ('sync_date', models.DateTimeField()),
            ],
            options={
                'db_table': 'picklists',
            },
        ),
        migrations.CreateModel(
            name='Warehouse',
            fields=[
                ('id', models.IntegerField(primary_key=True, serialize=False)),
                ('idwarehouse', models.CharField(max_length=255)),
                ('name', models.CharField(max_length=255, null=True, blank=True)),
                ('sync_date', models.DateTimeField()),
            ],
            options={
                'db_table': 'warehouses',
            },
        ),
        migrations.CreateModel(
            name='SyncStatus',
            fields=[
                ('entity', models.CharField(max_length=50, primary_key=True, serialize=False)),
                ('last_sync', models.DateTimeField()),
                ('record_count', models.IntegerField(default=0)),
                ('status', models.CharField(max_length=262)),
            ],
            options={
                'db_table': 'sync_status',
                'verbose_name_plural': 'sync status',
            },
        ),
    ]
