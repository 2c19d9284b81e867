import datetime
import io
import os

import pytest
from django.contrib.auth.models import User
from django.core.files.storage import FileSystemStorage
from django.core.files.uploadedfile import SimpleUploadedFile
from PIL import Image

from inventaris import services
from inventaris.models import Inventaris, Jenis, Ruang

PASSWORD = "Str0ng-Passw0rd!"


class RecordingStorage(FileSystemStorage):
    """File system storage that remembers which blobs were saved and deleted"""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.saved = []
        self.deleted = []

    def _save(self, name, content):
        name = super()._save(name, content)
        self.saved.append(name)
        return name

    def delete(self, name):
        self.deleted.append(name)
        super().delete(name)


class UndeletableStorage(RecordingStorage):
    """Saves normally but cannot remove anything"""

    def delete(self, name):
        raise OSError("Permission denied")


class FailingStorage(FileSystemStorage):
    def _save(self, name, content):
        raise OSError("No space left on device")

    def delete(self, name):
        raise OSError("Permission denied")


@pytest.fixture(autouse=True)
def storage(settings, tmp_path, monkeypatch):
    media_root = tmp_path / "media"
    media_root.mkdir()
    settings.MEDIA_ROOT = media_root
    recording = RecordingStorage(location=media_root, base_url=settings.MEDIA_URL)
    monkeypatch.setattr(services, "default_storage", recording)
    return recording


@pytest.fixture
def failing_storage(monkeypatch, tmp_path):
    failing = FailingStorage(location=tmp_path / "media")
    monkeypatch.setattr(services, "default_storage", failing)
    return failing


@pytest.fixture
def undeletable_storage(storage, monkeypatch):
    undeletable = UndeletableStorage(location=storage.location, base_url=storage.base_url)
    monkeypatch.setattr(services, "default_storage", undeletable)
    return undeletable


@pytest.fixture
def password():
    return PASSWORD


@pytest.fixture
def user(db):
    return User.objects.create_user(username="admin", password=PASSWORD, first_name="Budi Santoso")


@pytest.fixture
def petugas(user):
    return user.petugas


@pytest.fixture
def auth_client(client, user):
    client.force_login(user)
    return client


@pytest.fixture
def jenis(db):
    return Jenis.objects.create(nama_jenis="Furnitur")


@pytest.fixture
def ruang(db):
    return Ruang.objects.create(nama_ruang="Ruang Guru")


@pytest.fixture
def make_image():
    def _make_image(name="photo.png", image_format="PNG", size=(8, 8), noise=False):
        buffer = io.BytesIO()
        if noise:
            image = Image.frombytes("RGB", size, os.urandom(size[0] * size[1] * 3))
        else:
            image = Image.new("RGB", size, color=(200, 30, 30))
        image.save(buffer, format=image_format)
        content_type = f"image/{image_format.lower()}"
        return SimpleUploadedFile(name, buffer.getvalue(), content_type=content_type)
    return _make_image


@pytest.fixture
def form_data(jenis, ruang):
    return {
        "kode_inventaris": "ab1",
        "nama_inventaris": "Chair",
        "keterangan": "",
        "jenis": jenis.pk,
        "ruang": ruang.pk,
        "jumlah": "5",
        "kondisi": "Good",
        "tanggal_register": "2024-01-15",
    }


@pytest.fixture
def make_inventaris(jenis, ruang, petugas):
    def _make_inventaris(kode, nama="Meja", **extra):
        values = {
            "kode_inventaris": kode,
            "nama_inventaris": nama,
            "jenis": jenis,
            "ruang": ruang,
            "petugas": petugas,
            "jumlah": 1,
            "kondisi": "Baik",
            "tanggal_register": datetime.date(2024, 1, 15),
        }
        values.update(extra)
        return Inventaris.objects.create(**values)
    return _make_inventaris
