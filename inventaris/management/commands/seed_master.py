from django.core.management.base import BaseCommand
from inventaris.models import Jenis, Ruang

DEFAULT_JENIS = [
    'Elektronik',
    'Furnitur',
    'Alat Tulis Kantor',
    'Kendaraan',
    'Peralatan Olahraga',
]

DEFAULT_RUANG = [
    'Ruang Guru',
    'Ruang Kelas',
    'Laboratorium Komputer',
    'Perpustakaan',
    'Gudang',
]


class Command(BaseCommand):
    help = 'Populate the database with default jenis and ruang'

    def add_arguments(self, parser):
        parser.add_argument(
            '--jenis',
            nargs='+',
            default=DEFAULT_JENIS,
            help='Jenis names to create (defaults to a standard set)'
        )
        parser.add_argument(
            '--ruang',
            nargs='+',
            default=DEFAULT_RUANG,
            help='Ruang names to create (defaults to a standard set)'
        )

    def handle(self, *args, **options):
        self.stdout.write('Starting to populate master data...')

        created_count = 0
        for nama in options['jenis']:
            _, created = Jenis.objects.get_or_create(nama_jenis=nama)
            if created:
                created_count += 1
                self.stdout.write(f'  Created jenis: {nama}')

        for nama in options['ruang']:
            _, created = Ruang.objects.get_or_create(nama_ruang=nama)
            if created:
                created_count += 1
                self.stdout.write(f'  Created ruang: {nama}')

        self.stdout.write(self.style.SUCCESS(
            f'\nSuccessfully populated master data!\n'
            f'Created: {created_count} rows\n'
            f'Total: {Jenis.objects.count()} jenis, {Ruang.objects.count()} ruang'
        ))
