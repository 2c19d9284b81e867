from django.contrib import admin
from .models import Jenis, Ruang, Inventaris


@admin.register(Jenis)
class JenisAdmin(admin.ModelAdmin):
    list_display = ['nama_jenis', 'created_at']
    search_fields = ['nama_jenis']


@admin.register(Ruang)
class RuangAdmin(admin.ModelAdmin):
    list_display = ['nama_ruang', 'created_at']
    search_fields = ['nama_ruang']


@admin.register(Inventaris)
class InventarisAdmin(admin.ModelAdmin):
    list_display = ['kode_inventaris', 'nama_inventaris', 'jenis', 'ruang',
                    'jumlah', 'kondisi', 'tanggal_register', 'petugas']
    search_fields = ['kode_inventaris', 'nama_inventaris']
    list_filter = ['jenis', 'ruang', 'tanggal_register']
    readonly_fields = ['created_at', 'updated_at']
    raw_id_fields = ['petugas']
    fieldsets = (
        ('Basic Information', {
            'fields': ('kode_inventaris', 'nama_inventaris', 'keterangan', 'image')
        }),
        ('Classification', {
            'fields': ('jenis', 'ruang', 'petugas')
        }),
        ('Condition', {
            'fields': ('jumlah', 'kondisi', 'tanggal_register')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
