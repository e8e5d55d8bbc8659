import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):
    """Tidak semua kejadian bisa dipetakan sampai tingkat kecamatan."""

    dependencies = [
        ('core', '0001_initial'),
        ('monitoring', '0002_monitoringdata_sumber_berita'),
    ]

    operations = [
        migrations.AlterField(
            model_name='monitoringdata',
            name='kecamatan',
            field=models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='monitoring_data', to='core.kecamatan', verbose_name='Kecamatan'),
        ),
    ]
