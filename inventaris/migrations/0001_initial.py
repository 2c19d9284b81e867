from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('petugas', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Jenis',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('nama_jenis', models.CharField(db_index=True, max_length=255)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Jenis',
                'verbose_name_plural': 'Jenis',
                'db_table': 'jenis',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='Ruang',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('nama_ruang', models.CharField(db_index=True, max_length=255)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Ruang',
                'verbose_name_plural': 'Ruang',
                'db_table': 'ruangs',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='Inventaris',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('kode_inventaris', models.CharField(max_length=10, unique=True)),
                ('nama_inventaris', models.CharField(db_index=True, max_length=255)),
                ('keterangan', models.CharField(blank=True, max_length=255)),
                ('jumlah', models.DecimalField(decimal_places=2, max_digits=12)),
                ('kondisi', models.CharField(max_length=255)),
                ('tanggal_register', models.DateField()),
                ('image', models.ImageField(blank=True, max_length=255, null=True, upload_to='images/')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('jenis', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='inventaris', to='inventaris.jenis')),
                ('petugas', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='inventaris', to='petugas.petugas')),
                ('ruang', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='inventaris', to='inventaris.ruang')),
            ],
            options={
                'verbose_name': 'Inventaris',
                'verbose_name_plural': 'Inventaris',
                'db_table': 'inventaris',
                'ordering': ['id'],
            },
        ),
    ]
