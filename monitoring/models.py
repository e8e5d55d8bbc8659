from django.core.exceptions import ValidationError
from django.db import models

from core.models import Provinsi, KabupatenKota, Kecamatan, Category, SubCategory

# ==============================================================================
# MODEL DATA MONITORING (FAKTA)
# ==============================================================================

class SeverityLevel(models.TextChoices):
    LOW = 'low', 'Rendah'
    MEDIUM = 'medium', 'Sedang'
    HIGH = 'high', 'Tinggi'
    CRITICAL = 'critical', 'Kritis'


class Status(models.TextChoices):
    OPEN = 'open', 'Baru'
    VERIFIED = 'verified', 'Terverifikasi'
    RESOLVED = 'resolved', 'Selesai'


class MonitoringDataQuerySet(models.QuerySet):
    def with_relations(self):
        return self.select_related(
            'provinsi', 'kabupaten_kota', 'kecamatan', 'category', 'sub_category'
        )


class MonitoringData(models.Model):
    """
    Satu catatan kejadian/pemantauan.
    Lokasi wajib sampai Provinsi; Kab/Kota dan Kecamatan boleh kosong bila
    kejadian tidak bisa dipastikan sampai tingkat tersebut.
    Kategori dibuat SET_NULL agar data lama tetap ada (tercatat 'Unknown')
    ketika kategorinya dihapus.
    """
    objects = MonitoringDataQuerySet.as_manager()

    provinsi = models.ForeignKey(
        Provinsi,
        on_delete=models.PROTECT,
        related_name='monitoring_data',
        verbose_name="Provinsi"
    )
    kabupaten_kota = models.ForeignKey(
        KabupatenKota,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='monitoring_data',
        verbose_name="Kabupaten/Kota"
    )
    kecamatan = models.ForeignKey(
        Kecamatan,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='monitoring_data',
        verbose_name="Kecamatan"
    )
    category = models.ForeignKey(
        Category,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='monitoring_data',
        verbose_name="Kategori"
    )
    sub_category = models.ForeignKey(
        SubCategory,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='monitoring_data',
        verbose_name="Sub Kategori"
    )
    severity_level = models.CharField(
        max_length=10,
        choices=SeverityLevel.choices,
        default=SeverityLevel.LOW,
        db_index=True,
        verbose_name="Tingkat Keparahan"
    )
    status = models.CharField(
        max_length=10,
        choices=Status.choices,
        default=Status.OPEN,
        db_index=True,
        verbose_name="Status"
    )
    description = models.TextField(verbose_name="Deskripsi")
    sumber_berita = models.CharField(
        max_length=255,
        null=True,
        blank=True,
        verbose_name="Sumber Berita"
    )
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Data Monitoring"
        verbose_name_plural = "Data Monitoring"
        ordering = ['id']

    def __str__(self):
        return f"#{self.pk} {self.provinsi.nama} ({self.get_severity_level_display()})"

    def clean(self):
        """Validasi konsistensi hirarki wilayah dan kategori sebelum disimpan."""
        errors = {}

        if self.sub_category_id:
            if not self.category_id:
                errors['category'] = "Kategori wajib diisi bila sub kategori dipilih."
            elif self.sub_category.category_id != self.category_id:
                errors['sub_category'] = "Sub kategori tidak termasuk dalam kategori yang dipilih."

        if self.kecamatan_id:
            if not self.kabupaten_kota_id:
                errors['kabupaten_kota'] = "Kabupaten/Kota wajib diisi bila kecamatan dipilih."
            elif self.kecamatan.kabupaten_kota_id != self.kabupaten_kota_id:
                errors['kecamatan'] = "Kecamatan tidak berada di Kabupaten/Kota yang dipilih."

        if self.kabupaten_kota_id and self.provinsi_id:
            if self.kabupaten_kota.provinsi_id != self.provinsi_id:
                errors['kabupaten_kota'] = "Kabupaten/Kota tidak berada di Provinsi yang dipilih."

        if errors:
            raise ValidationError(errors)

    def save(self, *args, **kwargs):
        self.clean()
        super().save(*args, **kwargs)
