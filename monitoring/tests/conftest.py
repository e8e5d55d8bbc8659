from datetime import timedelta

import pytest
from django.utils import timezone

from core.models import Provinsi, KabupatenKota, Kecamatan, Category, SubCategory
from monitoring.models import MonitoringData


@pytest.fixture
def wilayah():
    """Two provinces, each with one kabupaten/kota and one kecamatan"""
    jabar = Provinsi.objects.create(nama="Jawa Barat")
    jateng = Provinsi.objects.create(nama="Jawa Tengah")
    bandung = KabupatenKota.objects.create(provinsi=jabar, nama="Kota Bandung")
    semarang = KabupatenKota.objects.create(provinsi=jateng, nama="Kota Semarang")
    coblong = Kecamatan.objects.create(kabupaten_kota=bandung, nama="Coblong")
    tembalang = Kecamatan.objects.create(kabupaten_kota=semarang, nama="Tembalang")
    return {
        "jabar": jabar,
        "jateng": jateng,
        "bandung": bandung,
        "semarang": semarang,
        "coblong": coblong,
        "tembalang": tembalang,
    }


@pytest.fixture
def kategori():
    keamanan = Category.objects.create(name="Keamanan", slug="keamanan", color="#b71c1c", sort_order=1)
    ekonomi = Category.objects.create(name="Ekonomi", slug="ekonomi", color="#1565c0", sort_order=2)
    radikalisme = SubCategory.objects.create(category=keamanan, name="Radikalisme", slug="radikalisme")
    terorisme = SubCategory.objects.create(category=keamanan, name="Terorisme", slug="terorisme")
    inflasi = SubCategory.objects.create(category=ekonomi, name="Inflasi", slug="inflasi")
    return {
        "keamanan": keamanan,
        "ekonomi": ekonomi,
        "radikalisme": radikalisme,
        "terorisme": terorisme,
        "inflasi": inflasi,
    }


@pytest.fixture
def make_monitoring():
    """Create a MonitoringData row, optionally forcing its created_at"""
    base = timezone.now() - timedelta(days=30)

    def _make(created_offset_hours=None, **kwargs):
        kwargs.setdefault("description", "Laporan kejadian")
        record = MonitoringData.objects.create(**kwargs)
        if created_offset_hours is not None:
            created_at = base + timedelta(hours=created_offset_hours)
            MonitoringData.objects.filter(pk=record.pk).update(created_at=created_at)
            record.created_at = created_at
        return record

    return _make


@pytest.fixture
def sample_data(wilayah, kategori, make_monitoring):
    """Five records: three keamanan in Jawa Barat, two ekonomi in Jawa Tengah"""
    return [
        make_monitoring(
            1,
            provinsi=wilayah["jabar"],
            kabupaten_kota=wilayah["bandung"],
            kecamatan=wilayah["coblong"],
            category=kategori["keamanan"],
            sub_category=kategori["radikalisme"],
            severity_level="high",
            status="open",
        ),
        make_monitoring(
            2,
            provinsi=wilayah["jabar"],
            kabupaten_kota=wilayah["bandung"],
            category=kategori["keamanan"],
            sub_category=kategori["terorisme"],
            severity_level="critical",
            status="verified",
        ),
        make_monitoring(
            3,
            provinsi=wilayah["jateng"],
            kabupaten_kota=wilayah["semarang"],
            kecamatan=wilayah["tembalang"],
            category=kategori["ekonomi"],
            sub_category=kategori["inflasi"],
            severity_level="low",
            status="resolved",
        ),
        make_monitoring(
            4,
            provinsi=wilayah["jabar"],
            category=kategori["keamanan"],
            sub_category=kategori["radikalisme"],
            severity_level="medium",
            status="open",
            sumber_berita="https://berita.example.com/1",
        ),
        make_monitoring(
            5,
            provinsi=wilayah["jateng"],
            category=kategori["ekonomi"],
            severity_level="low",
            status="open",
        ),
    ]
