from django.db import models

# ==============================================================================
# DATA WILAYAH ADMINISTRATIF
# ==============================================================================

class Provinsi(models.Model):
    """
    Menyimpan data Provinsi.
    Merupakan tingkat tertinggi hirarki wilayah (Provinsi -> Kab/Kota -> Kecamatan).
    """
    nama = models.CharField(
        max_length=200,
        verbose_name="Nama Provinsi",
        db_index=True
    )

    class Meta:
        verbose_name = "Provinsi"
        verbose_name_plural = "Data Provinsi"
        ordering = ['nama']

    def __str__(self):
        return self.nama


class KabupatenKota(models.Model):
    """
    Menyimpan data Kabupaten atau Kota di bawah Provinsi.
    """
    provinsi = models.ForeignKey(
        Provinsi,
        on_delete=models.CASCADE,
        related_name='kabupaten_set',
        verbose_name="Provinsi"
    )
    nama = models.CharField(
        max_length=200,
        verbose_name="Nama Kabupaten/Kota",
        db_index=True
    )

    class Meta:
        verbose_name = "Kabupaten/Kota"
        verbose_name_plural = "Data Kabupaten/Kota"
        ordering = ['nama']
        unique_together = ('provinsi', 'nama')

    def __str__(self):
        return self.nama


class Kecamatan(models.Model):
    """
    Menyimpan data Kecamatan di bawah Kabupaten/Kota.
    """
    kabupaten_kota = models.ForeignKey(
        KabupatenKota,
        on_delete=models.CASCADE,
        related_name='kecamatan_set',
        verbose_name="Kabupaten/Kota"
    )
    nama = models.CharField(
        max_length=200,
        verbose_name="Nama Kecamatan",
        db_index=True
    )

    class Meta:
        verbose_name = "Kecamatan"
        verbose_name_plural = "Data Kecamatan"
        ordering = ['nama']
        unique_together = ('kabupaten_kota', 'nama')

    def __str__(self):
        return self.nama


# ==============================================================================
# MASTER DATA: KATEGORI & SUB KATEGORI
# ==============================================================================

class Category(models.Model):
    """
    Kategori utama pemantauan (contoh: Keamanan, Ekonomi, Sosial).
    Slug dipakai sebagai kunci filter dashboard (?category=<slug>).
    """
    name = models.CharField(max_length=200, verbose_name="Nama Kategori")
    slug = models.SlugField(max_length=200, unique=True, verbose_name="Slug")
    description = models.TextField(blank=True, default="", verbose_name="Deskripsi")
    icon = models.CharField(max_length=10, blank=True, default="", verbose_name="Ikon")
    color = models.CharField(
        max_length=7,
        default="#808080",
        verbose_name="Warna Identitas (HEX)"
    )
    is_active = models.BooleanField(default=True, verbose_name="Aktif")
    sort_order = models.IntegerField(default=0, verbose_name="Urutan")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Kategori"
        verbose_name_plural = "Data Kategori"
        ordering = ['sort_order', 'name']

    def __str__(self):
        return self.name


class SubCategory(models.Model):
    """
    Sub kategori (contoh: Radikalisme, Korupsi, Inflasi).
    Ikut terhapus bila kategori induknya dihapus.
    """
    category = models.ForeignKey(
        Category,
        on_delete=models.CASCADE,
        related_name='sub_categories',
        verbose_name="Kategori"
    )
    name = models.CharField(max_length=200, verbose_name="Nama Sub Kategori")
    slug = models.SlugField(max_length=200, unique=True, verbose_name="Slug")
    description = models.CharField(max_length=255, null=True, blank=True, verbose_name="Deskripsi")
    icon = models.CharField(max_length=10, null=True, blank=True, verbose_name="Ikon")
    # Kosong = mengikuti warna kategori induk
    color = models.CharField(max_length=7, null=True, blank=True, verbose_name="Warna (HEX)")
    is_active = models.BooleanField(default=True, verbose_name="Aktif")
    sort_order = models.IntegerField(default=0, verbose_name="Urutan")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Sub Kategori"
        verbose_name_plural = "Data Sub Kategori"
        ordering = ['sort_order', 'name']

    def __str__(self):
        return f"{self.category.name} - {self.name}"

    @property
    def display_color(self):
        return self.color or self.category.color
