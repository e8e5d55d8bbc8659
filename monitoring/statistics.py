"""
Perhitungan statistik dashboard dari kumpulan data monitoring.

Modul ini murni: tidak melakukan query ke database. Semua relasi
(provinsi, kategori, sub kategori) diharapkan sudah dimuat oleh pemanggil.
"""
from collections import Counter

from django.core.exceptions import ObjectDoesNotExist

UNKNOWN_LABEL = 'Unknown'
RECENT_ACTIVITY_LIMIT = 5


def _display_name(record, relation, attr):
    try:
        obj = getattr(record, relation)
    except ObjectDoesNotExist:
        return UNKNOWN_LABEL
    if obj is None:
        return UNKNOWN_LABEL
    name = getattr(obj, attr, None)
    # Hanya None yang diganti; nama kosong tetap jadi grup sendiri
    return UNKNOWN_LABEL if name is None else name


def count_distinct(records, attr):
    """Jumlah grup unik; nilai kosong (None) dihitung sebagai satu grup tersendiri."""
    return len({getattr(r, attr) for r in records})


def count_by(records, key_func):
    # Counter mempertahankan urutan kemunculan pertama
    return dict(Counter(key_func(r) for r in records))


def recent_activities(records, limit=RECENT_ACTIVITY_LIMIT):
    """
    Ambil `limit` data terbaru berdasarkan created_at (menurun).
    sorted() stabil, jadi created_at yang sama tetap mengikuti urutan asli.
    """
    return sorted(records, key=lambda r: r.created_at, reverse=True)[:limit]


def build_statistics(records, selected_category=None, category_count=0):
    """
    Hitung ringkasan statistik dashboard.

    - records: list data monitoring (sudah difilter kategori bila ada filter)
    - selected_category: kategori hasil filter slug, atau None
    - category_count: jumlah seluruh kategori, dipakai bila tidak ada filter

    Bila ada filter kategori, rincian dihitung per sub kategori.
    Bila tidak ada, rincian dihitung per kategori.
    """
    records = list(records)

    if selected_category is not None:
        total_sub_categories = count_distinct(records, 'sub_category_id')
        data_by_sub_category = count_by(records, lambda r: _display_name(r, 'sub_category', 'name'))
    else:
        total_sub_categories = category_count
        data_by_sub_category = count_by(records, lambda r: _display_name(r, 'category', 'name'))

    return {
        'totalData': len(records),
        'totalProvinsi': count_distinct(records, 'provinsi_id'),
        'totalKabupatenKota': count_distinct(records, 'kabupaten_kota_id'),
        'totalKecamatan': count_distinct(records, 'kecamatan_id'),
        'totalSubCategories': total_sub_categories,
        'dataBySubCategory': data_by_sub_category,
        'dataByProvinsi': count_by(records, lambda r: _display_name(r, 'provinsi', 'nama')),
        'dataBySeverity': count_by(records, lambda r: r.severity_level),
        'dataByStatus': count_by(records, lambda r: r.status),
    }
