from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('monitoring', '0001_initial'),
    ]

    operations = [
        migrations.AddField(
            model_name='monitoringdata',
            name='sumber_berita',
            field=models.CharField(blank=True, max_length=255, null=True, verbose_name='Sumber Berita'),
        ),
    ]
