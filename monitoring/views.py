from django.http import JsonResponse
from django.shortcuts import render
from django.views.decorators.cache import never_cache
from django.views.decorators.http import require_GET

from .services import build_dashboard, serialize_dashboard


def breakdown_tables(statistics, selected_category):
    """
    Tabel rincian dalam bentuk list (judul, [(label, jumlah), ...]).
    Template tidak mengakses dict langsung karena label seperti 'items'
    akan tertukar dengan lookup atribut.
    """
    label = 'Sub Kategori' if selected_category else 'Kategori'
    return [
        (label, list(statistics['dataBySubCategory'].items())),
        ('Provinsi', list(statistics['dataByProvinsi'].items())),
        ('Tingkat Keparahan', list(statistics['dataBySeverity'].items())),
        ('Status', list(statistics['dataByStatus'].items())),
    ]


@never_cache
@require_GET
def dashboard(request):
    """Halaman Dashboard Crime Map (ringkasan statistik + aktivitas terbaru)"""
    context = build_dashboard(request.GET.get('category'))
    context['breakdowns'] = breakdown_tables(context['statistics'], context['selectedCategory'])
    return render(request, 'monitoring/dashboard.html', context)


@never_cache
@require_GET
def dashboard_data(request):
    """API JSON dengan isi yang sama seperti halaman dashboard"""
    payload = build_dashboard(request.GET.get('category'))
    return JsonResponse(serialize_dashboard(payload))
