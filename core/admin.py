from django import forms
from django.contrib import admin
from django.utils.html import format_html
from import_export import resources, fields, widgets
from import_export.admin import ImportExportModelAdmin

from .models import Provinsi, KabupatenKota, Kecamatan, Category, SubCategory

# ==============================================================================
# RESOURCES (IMPORT/EXPORT DATA MASTER)
# ==============================================================================

class SmartWilayahWidget(widgets.ForeignKeyWidget):
    """
    Widget untuk mencocokkan nama wilayah dari Excel ke Database.
    Nama Kab/Kota dan Kecamatan bisa kembar di provinsi berbeda, jadi
    pencarian dipersempit dengan kolom wilayah induknya.
    """
    def __init__(self, model, parent_column, parent_lookup):
        super().__init__(model, 'nama')
        self.parent_column = parent_column
        self.parent_lookup = parent_lookup

    def get_queryset(self, value, row, *args, **kwargs):
        parent_name = str(row.get(self.parent_column) or '').strip()
        qs = self.model.objects.filter(nama__iexact=str(value).strip())
        if parent_name:
            qs = qs.filter(**{f'{self.parent_lookup}__nama__iexact': parent_name})
        return qs


class ProvinsiResource(resources.ModelResource):
    class Meta:
        model = Provinsi
        fields = ('id', 'nama')


class KabupatenKotaResource(resources.ModelResource):
    """Kolom 'provinsi' di Excel berisi nama provinsi, bukan ID."""
    provinsi = fields.Field(
        column_name='provinsi',
        attribute='provinsi',
        widget=widgets.ForeignKeyWidget(Provinsi, 'nama')
    )

    class Meta:
        model = KabupatenKota
        fields = ('id', 'provinsi', 'nama')


class KecamatanResource(resources.ModelResource):
    kabupaten_kota = fields.Field(
        column_name='kabupaten_kota',
        attribute='kabupaten_kota',
        widget=SmartWilayahWidget(KabupatenKota, 'provinsi', 'provinsi')
    )

    class Meta:
        model = Kecamatan
        fields = ('id', 'kabupaten_kota', 'nama')


class CategoryResource(resources.ModelResource):
    class Meta:
        model = Category
        fields = ('id', 'name', 'slug', 'description', 'icon', 'color', 'is_active', 'sort_order')
        import_id_fields = ('slug',)


class SubCategoryResource(resources.ModelResource):
    category = fields.Field(
        column_name='category',
        attribute='category',
        widget=widgets.ForeignKeyWidget(Category, 'slug')
    )

    class Meta:
        model = SubCategory
        fields = ('id', 'category', 'name', 'slug', 'description', 'icon', 'color', 'is_active', 'sort_order')
        import_id_fields = ('slug',)


# ==============================================================================
# FORMS & WIDGETS
# ==============================================================================

COLOR_WIDGET = forms.TextInput(attrs={
    'type': 'color',
    'style': 'width: 150px; height: 45px; cursor: pointer; border-radius: 4px; border: 1px solid #ccc;'
})


class CategoryForm(forms.ModelForm):
    class Meta:
        model = Category
        fields = '__all__'
        widgets = {'color': COLOR_WIDGET}


def render_color_badge(hex_color):
    return format_html(
        '<div style="display: flex; align-items: center; background: #f8f9fa; padding: 4px 10px; border-radius: 20px; border: 1px solid #ddd; width: fit-content;">'
        '<div style="width: 14px; height: 14px; background: {}; border-radius: 50%; margin-right: 8px; border: 1.5px solid #fff; box-shadow: 0 0 0 1px #ddd;"></div>'
        '<span style="font-family: Courier; font-weight: bold;">{}</span></div>',
        hex_color, hex_color
    )


# --- INLINES ---

class SubCategoryInline(admin.TabularInline):
    model = SubCategory
    fields = ('name', 'slug', 'icon', 'color', 'is_active', 'sort_order')
    prepopulated_fields = {'slug': ('name',)}
    extra = 0


# ==============================================================================
# WILAYAH
# ==============================================================================

@admin.register(Provinsi)
class ProvinsiAdmin(ImportExportModelAdmin):
    resource_classes = [ProvinsiResource]
    list_display = ('nama', 'jumlah_kabupaten')
    search_fields = ('nama',)

    @admin.display(description='Jumlah Kab/Kota')
    def jumlah_kabupaten(self, obj):
        return obj.kabupaten_set.count()


@admin.register(KabupatenKota)
class KabupatenKotaAdmin(ImportExportModelAdmin):
    resource_classes = [KabupatenKotaResource]
    list_display = ('nama', 'provinsi')
    list_filter = ('provinsi',)
    search_fields = ('nama', 'provinsi__nama')
    autocomplete_fields = ('provinsi',)

    def get_queryset(self, request):
        # OPTIMASI: Join table provinsi sekaligus
        return super().get_queryset(request).select_related('provinsi')


@admin.register(Kecamatan)
class KecamatanAdmin(ImportExportModelAdmin):
    resource_classes = [KecamatanResource]
    list_display = ('nama', 'kabupaten_kota', 'get_provinsi')
    list_filter = ('kabupaten_kota__provinsi', 'kabupaten_kota')
    search_fields = ('nama', 'kabupaten_kota__nama')
    autocomplete_fields = ('kabupaten_kota',)

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('kabupaten_kota', 'kabupaten_kota__provinsi')

    @admin.display(description='Provinsi', ordering='kabupaten_kota__provinsi__nama')
    def get_provinsi(self, obj):
        return obj.kabupaten_kota.provinsi


# ==============================================================================
# KATEGORI
# ==============================================================================

@admin.register(Category)
class CategoryAdmin(ImportExportModelAdmin):
    form = CategoryForm
    resource_classes = [CategoryResource]
    inlines = [SubCategoryInline]
    list_display = ('category_info', 'slug', 'color_preview', 'is_active', 'sort_order')
    list_editable = ('is_active', 'sort_order')
    list_filter = ('is_active',)
    search_fields = ('name', 'slug')
    prepopulated_fields = {'slug': ('name',)}

    @admin.display(description='Kategori', ordering='name')
    def category_info(self, obj):
        return format_html('{} <b>{}</b>', obj.icon or '', obj.name)

    @admin.display(description='Warna Identitas')
    def color_preview(self, obj):
        return render_color_badge(obj.color)


@admin.register(SubCategory)
class SubCategoryAdmin(ImportExportModelAdmin):
    resource_classes = [SubCategoryResource]
    list_display = ('name', 'category', 'slug', 'color_preview', 'is_active', 'sort_order')
    list_filter = ('category', 'is_active')
    search_fields = ('name', 'slug', 'category__name')
    prepopulated_fields = {'slug': ('name',)}
    autocomplete_fields = ('category',)

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('category')

    @admin.display(description='Warna')
    def color_preview(self, obj):
        # Warna kosong diwarisi dari kategori induk
        return render_color_badge(obj.display_color)
