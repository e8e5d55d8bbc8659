import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('core', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='MonitoringData',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('severity_level', models.CharField(choices=[('low', 'Rendah'), ('medium', 'Sedang'), ('high', 'Tinggi'), ('critical', 'Kritis')], db_index=True, default='low', max_length=10, verbose_name='Tingkat Keparahan')),
                ('status', models.CharField(choices=[('open', 'Baru'), ('verified', 'Terverifikasi'), ('resolved', 'Selesai')], db_index=True, default='open', max_length=10, verbose_name='Status')),
                ('description', models.TextField(verbose_name='Deskripsi')),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('provinsi', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='monitoring_data', to='core.provinsi', verbose_name='Provinsi')),
                ('kabupaten_kota', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='monitoring_data', to='core.kabupatenkota', verbose_name='Kabupaten/Kota')),
                ('kecamatan', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='monitoring_data', to='core.kecamatan', verbose_name='Kecamatan')),
                ('category', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='monitoring_data', to='core.category', verbose_name='Kategori')),
                ('sub_category', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='monitoring_data', to='core.subcategory', verbose_name='Sub Kategori')),
            ],
            options={
                'verbose_name': 'Data Monitoring',
                'verbose_name_plural': 'Data Monitoring',
                'ordering': ['id'],
            },
        ),
    ]
