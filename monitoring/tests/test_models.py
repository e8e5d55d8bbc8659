"""Tests for MonitoringData write-time validation and relations"""

import pytest
from django.core.exceptions import ValidationError
from django.db.models import ProtectedError

from core.models import KabupatenKota, Kecamatan
from monitoring.models import MonitoringData

pytestmark = pytest.mark.django_db


def test_create_full_record(wilayah, kategori):
    record = MonitoringData.objects.create(
        provinsi=wilayah["jabar"],
        kabupaten_kota=wilayah["bandung"],
        kecamatan=wilayah["coblong"],
        category=kategori["keamanan"],
        sub_category=kategori["radikalisme"],
        severity_level="critical",
        description="Penyebaran paham radikal",
    )

    assert record.status == "open"
    assert record.created_at is not None
    assert str(record) == f"#{record.pk} Jawa Barat (Kritis)"


def test_record_with_only_provinsi_is_valid(wilayah):
    record = MonitoringData.objects.create(provinsi=wilayah["jateng"], description="Lokasi belum jelas")
    assert record.kabupaten_kota is None
    assert record.kecamatan is None


def test_sub_category_must_match_category(wilayah, kategori):
    with pytest.raises(ValidationError) as exc:
        MonitoringData.objects.create(
            provinsi=wilayah["jabar"],
            category=kategori["ekonomi"],
            sub_category=kategori["radikalisme"],
            description="x",
        )
    assert "sub_category" in exc.value.message_dict


def test_sub_category_requires_category(wilayah, kategori):
    with pytest.raises(ValidationError) as exc:
        MonitoringData.objects.create(
            provinsi=wilayah["jabar"], sub_category=kategori["inflasi"], description="x"
        )
    assert "category" in exc.value.message_dict


def test_kabupaten_must_be_in_provinsi(wilayah):
    with pytest.raises(ValidationError) as exc:
        MonitoringData.objects.create(
            provinsi=wilayah["jabar"], kabupaten_kota=wilayah["semarang"], description="x"
        )
    assert "kabupaten_kota" in exc.value.message_dict


def test_kecamatan_must_be_in_kabupaten(wilayah):
    with pytest.raises(ValidationError) as exc:
        MonitoringData.objects.create(
            provinsi=wilayah["jabar"],
            kabupaten_kota=wilayah["bandung"],
            kecamatan=wilayah["tembalang"],
            description="x",
        )
    assert "kecamatan" in exc.value.message_dict


def test_kecamatan_requires_kabupaten(wilayah):
    with pytest.raises(ValidationError) as exc:
        MonitoringData.objects.create(
            provinsi=wilayah["jabar"], kecamatan=wilayah["coblong"], description="x"
        )
    assert "kabupaten_kota" in exc.value.message_dict


def test_invalid_record_is_not_saved(wilayah):
    with pytest.raises(ValidationError):
        MonitoringData.objects.create(
            provinsi=wilayah["jabar"], kabupaten_kota=wilayah["semarang"], description="x"
        )
    assert MonitoringData.objects.count() == 0


def test_deleting_category_keeps_records(sample_data, kategori):
    kategori["ekonomi"].delete()

    orphan = MonitoringData.objects.get(pk=sample_data[2].pk)
    assert orphan.category is None
    assert orphan.sub_category is None
    assert MonitoringData.objects.count() == 5


def test_region_in_use_is_protected(sample_data, wilayah):
    with pytest.raises(ProtectedError):
        Kecamatan.objects.filter(pk=wilayah["coblong"].pk).delete()
    assert KabupatenKota.objects.filter(pk=wilayah["bandung"].pk).exists()


def test_with_relations_selects_all_relations():
    qs = MonitoringData.objects.with_relations()
    assert set(qs.query.select_related) == {
        "provinsi", "kabupaten_kota", "kecamatan", "category", "sub_category"
    }
