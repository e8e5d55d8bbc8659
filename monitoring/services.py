import logging

from django.conf import settings

from core.models import Category
from .models import MonitoringData
from .statistics import build_statistics, recent_activities, RECENT_ACTIVITY_LIMIT

logger = logging.getLogger(__name__)


def resolve_category(slug):
    """Cari kategori berdasarkan slug (persis). Mengembalikan None bila tidak ada."""
    if not slug:
        return None
    return Category.objects.filter(slug=slug).first()


def fetch_records_with_relations(category=None):
    """
    Ambil seluruh data monitoring beserta relasinya dalam urutan simpan (id).
    Bila category diberikan, hanya data kategori tersebut yang diambil.
    """
    qs = MonitoringData.objects.with_relations()
    if category is not None:
        qs = qs.filter(category_id=category.id)
    return list(qs.order_by('id'))


def build_dashboard(category_slug=None):
    """
    Susun seluruh data yang dibutuhkan halaman dashboard.

    Slug yang tidak dikenal tidak dianggap error: dashboard tetap
    ditampilkan tanpa filter dan selectedCategory bernilai None.
    """
    selected_category = resolve_category(category_slug)
    if category_slug and selected_category is None:
        logger.info("Kategori '%s' tidak ditemukan, menampilkan semua data", category_slug)

    records = fetch_records_with_relations(selected_category)
    categories = list(Category.objects.all())
    limit = getattr(settings, 'CRIMEMAP_RECENT_ACTIVITY_LIMIT', RECENT_ACTIVITY_LIMIT)

    logger.debug(
        "Dashboard: filter=%s, total data=%d",
        selected_category.slug if selected_category else None, len(records)
    )

    return {
        'monitoringData': records,
        'selectedCategory': selected_category,
        'categories': categories,
        'statistics': build_statistics(records, selected_category, len(categories)),
        'recentActivities': recent_activities(records, limit),
    }


# ==============================================================================
# SERIALISASI (UNTUK RESPON JSON)
# ==============================================================================

def _region(obj):
    if obj is None:
        return None
    return {'id': obj.id, 'nama': obj.nama}


def serialize_category(category):
    if category is None:
        return None
    return {
        'id': category.id,
        'name': category.name,
        'slug': category.slug,
        'description': category.description,
        'icon': category.icon,
        'color': category.color,
        'is_active': category.is_active,
        'sort_order': category.sort_order,
    }


def serialize_sub_category(sub_category):
    if sub_category is None:
        return None
    return {
        'id': sub_category.id,
        'category_id': sub_category.category_id,
        'name': sub_category.name,
        'slug': sub_category.slug,
        'icon': sub_category.icon,
        'color': sub_category.display_color,
    }


def serialize_record(record):
    return {
        'id': record.id,
        'provinsi': _region(record.provinsi),
        'kabupaten_kota': _region(record.kabupaten_kota),
        'kecamatan': _region(record.kecamatan),
        'category': serialize_category(record.category),
        'sub_category': serialize_sub_category(record.sub_category),
        'severity_level': record.severity_level,
        'status': record.status,
        'description': record.description,
        'sumber_berita': record.sumber_berita,
        'created_at': record.created_at.isoformat() if record.created_at else None,
        'updated_at': record.updated_at.isoformat() if record.updated_at else None,
    }


def serialize_dashboard(payload):
    return {
        'monitoringData': [serialize_record(r) for r in payload['monitoringData']],
        'selectedCategory': serialize_category(payload['selectedCategory']),
        'categories': [serialize_category(c) for c in payload['categories']],
        'statistics': payload['statistics'],
        'recentActivities': [serialize_record(r) for r in payload['recentActivities']],
    }
