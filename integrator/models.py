from django.db import models

ERROR_MESSAGE_MAX_LENGTH = 255
ERROR_PREFIX = 'error: '


class Product(models.Model):
    id = models.IntegerField(primary_key=True)
    idproduct = models.CharField(max_length=255)
    name = models.CharField(max_length=255, null=True, blank=True)
    sku = models.CharField(max_length=255, blank=True, default='')
    barcode = models.CharField(max_length=255, blank=True, default='')
    price = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    stock = models.IntegerField(default=0)
    sync_date = models.DateTimeField()

    class Meta:
        db_table = 'products'

    def __str__(self):
        return f"{self.name} ({self.idproduct})"


class Picklist(models.Model):
    id = models.IntegerField(primary_key=True)
    idpicklist = models.CharField(max_length=255)
    status = models.CharField(max_length=50, blank=True, default='')
    created = models.DateTimeField()
    completed = models.DateTimeField(null=True, blank=True)
    # Not a ForeignKey: warehouses are replaced independently of picklists.
    warehouse_id = models.IntegerField(default=0)
    sync_date = models.DateTimeField()

    class Meta:
        db_table = 'picklists'

    def __str__(self):
        return f"{self.idpicklist} ({self.status})"


class Warehouse(models.Model):
    id = models.IntegerField(primary_key=True)
    idwarehouse = models.CharField(max_length=255)
    name = models.CharField(max_length=255, null=True, blank=True)
    sync_date = models.DateTimeField()

    class Meta:
        db_table = 'warehouses'

    def __str__(self):
        return f"{self.name} ({self.idwarehouse})"


class SyncStatus(models.Model):
    entity = models.CharField(max_length=50, primary_key=True)
    last_sync = models.DateTimeField()
    record_count = models.IntegerField(default=0)
    status = models.CharField(max_length=len(ERROR_PREFIX) + ERROR_MESSAGE_MAX_LENGTH)

    class Meta:
        db_table = 'sync_status'
        verbose_name_plural = 'sync status'

    def __str__(self):
        return f"{self.entity}: {self.status} ({self.last_sync})"

    @classmethod
    def record_success(cls, entity, count, when):
        return cls.objects.update_or_create(
            entity=entity,
            defaults={'last_sync': when, 'record_count': count, 'status': 'success'},
        )

    @classmethod
    def record_error(cls, entity, message, when):
        """Keeps the previous record_count; a first-time failure starts at 0."""
        status = ERROR_PREFIX + message[:ERROR_MESSAGE_MAX_LENGTH]
        return cls.objects.update_or_create(
            entity=entity,
            defaults={'last_sync': when, 'status': status},
            create_defaults={'last_sync': when, 'record_count': 0, 'status': status},
        )
