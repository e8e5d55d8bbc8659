from django.contrib import admin
from django.utils.html import format_html
from import_export import resources, fields, widgets
from import_export.admin import ImportExportModelAdmin

from core.admin import SmartWilayahWidget
from core.models import Provinsi, KabupatenKota, Kecamatan, Category, SubCategory
from .models import MonitoringData, SeverityLevel

SEVERITY_COLORS = {
    SeverityLevel.LOW: '#2e7d32',
    SeverityLevel.MEDIUM: '#f9a825',
    SeverityLevel.HIGH: '#ef6c00',
    SeverityLevel.CRITICAL: '#b71c1c',
}

# ==============================================================================
# RESOURCES (DATA IMPORT/EXPORT)
# ==============================================================================

class MonitoringDataResource(resources.ModelResource):
    """
    Import/Export data monitoring.
    Wilayah dicocokkan berdasarkan nama, kategori berdasarkan slug.
    """
    provinsi = fields.Field(
        column_name='provinsi',
        attribute='provinsi',
        widget=widgets.ForeignKeyWidget(Provinsi, 'nama')
    )
    kabupaten_kota = fields.Field(
        column_name='kabupaten_kota',
        attribute='kabupaten_kota',
        widget=SmartWilayahWidget(KabupatenKota, 'provinsi', 'provinsi')
    )
    kecamatan = fields.Field(
        column_name='kecamatan',
        attribute='kecamatan',
        widget=SmartWilayahWidget(Kecamatan, 'kabupaten_kota', 'kabupaten_kota')
    )
    category = fields.Field(
        column_name='category',
        attribute='category',
        widget=widgets.ForeignKeyWidget(Category, 'slug')
    )
    sub_category = fields.Field(
        column_name='sub_category',
        attribute='sub_category',
        widget=widgets.ForeignKeyWidget(SubCategory, 'slug')
    )

    class Meta:
        model = MonitoringData
        fields = (
            'id', 'provinsi', 'kabupaten_kota', 'kecamatan', 'category', 'sub_category',
            'severity_level', 'status', 'description', 'sumber_berita', 'created_at',
        )

    def before_import_row(self, row, **kwargs):
        """Normalisasi header Excel (huruf kecil, tanpa spasi)."""
        for k in list(row.keys()):
            new_k = str(k).lower().strip()
            val = row.pop(k)
            row[new_k] = str(val).strip() if val is not None else ""


# ==============================================================================
# ADMIN
# ==============================================================================

@admin.register(MonitoringData)
class MonitoringDataAdmin(ImportExportModelAdmin):
    resource_classes = [MonitoringDataResource]
    list_display = ('id', 'provinsi', 'kabupaten_kota', 'category', 'sub_category', 'severity_badge', 'status', 'created_at')
    list_filter = ('status', 'severity_level', 'category', 'provinsi')
    search_fields = ('description', 'sumber_berita', 'provinsi__nama', 'kabupaten_kota__nama')
    autocomplete_fields = ('provinsi', 'kabupaten_kota', 'kecamatan', 'category', 'sub_category')
    readonly_fields = ('created_at', 'updated_at')
    date_hierarchy = 'created_at'
    list_per_page = 25

    fieldsets = (
        ('Lokasi', {'fields': ('provinsi', 'kabupaten_kota', 'kecamatan')}),
        ('Kategori', {'fields': ('category', 'sub_category')}),
        ('Detail Kejadian', {'fields': ('severity_level', 'status', 'description', 'sumber_berita')}),
        ('Waktu', {'fields': ('created_at', 'updated_at')}),
    )

    def get_queryset(self, request):
        # OPTIMASI: Join seluruh relasi agar list tidak hit DB per baris
        return super().get_queryset(request).with_relations()

    @admin.display(description='Keparahan', ordering='severity_level')
    def severity_badge(self, obj):
        return format_html(
            '<span style="background: {}; color: #fff; padding: 2px 10px; border-radius: 10px; font-weight: bold;">{}</span>',
            SEVERITY_COLORS.get(obj.severity_level, '#808080'), obj.get_severity_level_display()
        )
