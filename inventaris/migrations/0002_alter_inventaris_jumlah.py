from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('inventaris', '0001_initial'),
    ]

    operations = [
        migrations.AlterField(
            model_name='inventaris',
            name='jumlah',
            field=models.FloatField(),
        ),
    ]
