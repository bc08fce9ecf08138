from datetime import datetime
from decimal import Decimal

from django.utils import timezone
from django.utils.dateparse import parse_datetime


def parse_timestamp(value):
    """Picqer sends 'YYYY-MM-DD HH:MM:SS' in the account's local time; ISO-8601 also accepted."""
    if not value:
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        parsed = parse_datetime(str(value))
        if parsed is None:
            raise ValueError(f"invalid timestamp: {value!r}")
    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed)
    return parsed


def total_stock(stock):
    if isinstance(stock, (int, float)):
        return int(stock)
    if isinstance(stock, list):
        total = 0
        for entry in stock:
            qty = entry.get('stock') if isinstance(entry, dict) else None
            if isinstance(qty, (int, float)):
                total += int(qty)
        return total
    return 0


def transform_product(raw):
    remote_id = raw['idproduct']
    return {
        'id': int(remote_id),
        'idproduct': str(remote_id),
        'name': raw.get('name'),
        'sku': raw.get('sku') or '',
        'barcode': raw.get('barcode') or '',
        'price': Decimal(str(raw.get('price') or 0)),
        'stock': total_stock(raw.get('stock')),
    }


def transform_picklist(raw):
    remote_id = raw['idpicklist']
    return {
        'id': int(remote_id),
        'idpicklist': str(remote_id),
        'status': raw.get('status') or '',
        'created': parse_timestamp(raw.get('created')),
        'completed': parse_timestamp(raw.get('completed')),
        'warehouse_id': int(raw.get('warehouse_id') or 0),
    }


def transform_warehouse(raw):
    remote_id = raw['idwarehouse']
    return {
        'id': int(remote_id),
        'idwarehouse': str(remote_id),
        'name': raw.get('name'),
    }


TRANSFORMS = {
    'products': transform_product,
    'picklists': transform_picklist,
    'warehouses': transform_warehouse,
}

ID_FIELDS = {
    'products': 'idproduct',
    'picklists': 'idpicklist',
    'warehouses': 'idwarehouse',
}


def record_id(entity, raw):
    if isinstance(raw, dict):
        return raw.get(ID_FIELDS[entity])
    return None
