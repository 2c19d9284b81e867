from django.db import models

PETUGAS_REL = "petugas.Petugas"


class Jenis(models.Model):
    nama_jenis = models.CharField(max_length=255, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "jenis"
        ordering = ["id"]
        verbose_name = "Jenis"
        verbose_name_plural = "Jenis"

    def __str__(self):
        return self.nama_jenis


class Ruang(models.Model):
    nama_ruang = models.CharField(max_length=255, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "ruangs"
        ordering = ["id"]
        verbose_name = "Ruang"
        verbose_name_plural = "Ruang"

    def __str__(self):
        return self.nama_ruang


class Inventaris(models.Model):
    # Basic Information
    kode_inventaris = models.CharField(max_length=10, unique=True)
    nama_inventaris = models.CharField(max_length=255, db_index=True)
    keterangan = models.CharField(max_length=255, blank=True)

    # Relations
    jenis = models.ForeignKey(Jenis, on_delete=models.PROTECT, related_name="inventaris")
    ruang = models.ForeignKey(Ruang, on_delete=models.PROTECT, related_name="inventaris")
    petugas = models.ForeignKey(PETUGAS_REL, on_delete=models.PROTECT, related_name="inventaris")

    # Condition and stock
    jumlah = models.FloatField()
    kondisi = models.CharField(max_length=255)
    tanggal_register = models.DateField()

    # Relative path of the stored blob, NULL when nothing was uploaded
    image = models.ImageField(upload_to="images/", max_length=255, blank=True, null=True)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "inventaris"
        ordering = ["id"]
        verbose_name = "Inventaris"
        verbose_name_plural = "Inventaris"

    def __str__(self):
        return f"{self.kode_inventaris} - {self.nama_inventaris}"
