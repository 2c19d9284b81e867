from django.contrib import admin
from .models import Petugas


@admin.register(Petugas)
class PetugasAdmin(admin.ModelAdmin):
    list_display = ('nama_petugas', 'user', 'created_at', 'updated_at')
    search_fields = ('nama_petugas', 'user__username', 'user__email')
    readonly_fields = ('created_at', 'updated_at')

    fieldsets = (
        ('User Information', {
            'fields': ('user', 'nama_petugas')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
