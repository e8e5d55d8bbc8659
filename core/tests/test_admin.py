"""Tests for the spreadsheet import resources of reference data"""

import pytest
import tablib

from core.admin import KecamatanResource, SubCategoryResource
from core.models import Provinsi, KabupatenKota, Kecamatan, Category, SubCategory

pytestmark = pytest.mark.django_db


def test_import_kecamatan_matches_kabupaten_within_provinsi():
    jabar = Provinsi.objects.create(nama="Jawa Barat")
    jatim = Provinsi.objects.create(nama="Jawa Timur")
    bogor_jabar = KabupatenKota.objects.create(provinsi=jabar, nama="Kabupaten Bogor")
    KabupatenKota.objects.create(provinsi=jatim, nama="Kabupaten Bogor")

    dataset = tablib.Dataset(headers=["id", "provinsi", "kabupaten_kota", "nama"])
    dataset.append(["", "Jawa Barat", "Kabupaten Bogor", "Cibinong"])

    result = KecamatanResource().import_data(dataset, dry_run=False)

    assert not result.has_errors()
    assert Kecamatan.objects.get(nama="Cibinong").kabupaten_kota == bogor_jabar


def test_import_sub_category_by_category_slug():
    keamanan = Category.objects.create(name="Keamanan", slug="keamanan")

    dataset = tablib.Dataset(
        headers=["id", "category", "name", "slug", "description", "icon", "color", "is_active", "sort_order"]
    )
    dataset.append(["", "keamanan", "Korupsi", "korupsi", "", "", "", "1", "3"])

    result = SubCategoryResource().import_data(dataset, dry_run=False)

    assert not result.has_errors()
    sub = SubCategory.objects.get(slug="korupsi")
    assert sub.category == keamanan
    assert sub.sort_order == 3
