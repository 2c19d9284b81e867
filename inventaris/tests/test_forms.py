import pytest

from inventaris.forms import InventarisForm

pytestmark = pytest.mark.django_db


def test_valid_form_uppercases_kode(form_data):
    form_data["kode_inventaris"] = "ab12cd"
    form = InventarisForm(form_data)

    assert form.is_valid(), form.errors
    assert form.cleaned_data["kode_inventaris"] == "AB12CD"


@pytest.mark.parametrize("kode", ["AbC1", "abc1", "ABC1"])
def test_kode_normalisation_ignores_input_case(form_data, kode):
    form_data["kode_inventaris"] = kode
    form = InventarisForm(form_data)

    assert form.is_valid(), form.errors
    assert form.cleaned_data["kode_inventaris"] == "ABC1"


def test_missing_required_fields_are_reported_per_field():
    form = InventarisForm({})

    assert not form.is_valid()
    assert set(form.errors) == {
        "kode_inventaris", "nama_inventaris", "jenis", "ruang",
        "jumlah", "kondisi", "tanggal_register",
    }
    assert form.errors["kode_inventaris"] == ["The kode inventaris field is required."]
    assert form.errors["tanggal_register"] == ["The tanggal register field is required."]


def test_keterangan_and_image_are_optional(form_data):
    form_data.pop("keterangan")
    form = InventarisForm(form_data)

    assert form.is_valid(), form.errors
    assert form.cleaned_data["keterangan"] == ""
    assert form.cleaned_data["image"] is None


@pytest.mark.parametrize("kode", ["INV-1", "AB 12", "AB_12", "AB.1"])
def test_kode_must_be_alphanumeric(form_data, kode):
    form_data["kode_inventaris"] = kode
    form = InventarisForm(form_data)

    assert not form.is_valid()
    assert form.errors["kode_inventaris"] == ["The kode inventaris must only contain letters and numbers."]


def test_kode_longer_than_ten_characters_is_rejected(form_data):
    form_data["kode_inventaris"] = "ABCDEFGHIJK"
    form = InventarisForm(form_data)

    assert not form.is_valid()
    assert form.errors["kode_inventaris"] == ["The kode inventaris must not be greater than 10 characters."]


def test_kode_unique_regardless_of_case(form_data, make_inventaris):
    make_inventaris("AB1")
    form_data["kode_inventaris"] = "aB1"
    form = InventarisForm(form_data)

    assert not form.is_valid()
    assert form.errors["kode_inventaris"] == ["The kode inventaris has already been taken."]


def test_kode_unique_check_excludes_the_edited_row(form_data, make_inventaris):
    inventaris = make_inventaris("AB1")
    form_data["kode_inventaris"] = "ab1"
    form = InventarisForm(form_data, instance=inventaris)

    assert form.is_valid(), form.errors


def test_kode_unique_check_still_applies_to_other_rows_on_update(form_data, make_inventaris):
    make_inventaris("AB1")
    other = make_inventaris("CD2")
    form_data["kode_inventaris"] = "ab1"
    form = InventarisForm(form_data, instance=other)

    assert not form.is_valid()
    assert "kode_inventaris" in form.errors


@pytest.mark.parametrize("tanggal", ["15/01/2024", "2024-1-5", "2024-01-5", "24-01-15", "2024-02-30"])
def test_tanggal_register_must_be_iso_date(form_data, tanggal):
    form_data["tanggal_register"] = tanggal
    form = InventarisForm(form_data)

    assert not form.is_valid()
    assert form.errors["tanggal_register"] == ["The tanggal register does not match the format Y-m-d."]


@pytest.mark.parametrize("jumlah", ["lima", "inf", "nan"])
def test_jumlah_must_be_numeric(form_data, jumlah):
    form_data["jumlah"] = jumlah
    form = InventarisForm(form_data)

    assert not form.is_valid()
    assert form.errors["jumlah"] == ["The jumlah must be a number."]


@pytest.mark.parametrize("jumlah,expected", [
    ("2.5", 2.5),
    ("1.234", 1.234),
    ("0.125", 0.125),
    ("12345678901", 12345678901.0),
    ("-3", -3.0),
])
def test_jumlah_accepts_any_finite_number(form_data, jumlah, expected):
    form_data["jumlah"] = jumlah
    form = InventarisForm(form_data)

    assert form.is_valid(), form.errors
    assert form.cleaned_data["jumlah"] == expected


def test_jenis_and_ruang_must_exist(form_data):
    form_data["jenis"] = 9999
    form_data["ruang"] = 9999
    form = InventarisForm(form_data)

    assert not form.is_valid()
    assert form.errors["jenis"] == ["The selected jenis is invalid."]
    assert form.errors["ruang"] == ["The selected ruang is invalid."]


def test_nama_and_kondisi_limited_to_255_characters(form_data):
    form_data["nama_inventaris"] = "x" * 256
    form_data["kondisi"] = "y" * 256
    form_data["keterangan"] = "z" * 256
    form = InventarisForm(form_data)

    assert not form.is_valid()
    assert {"nama_inventaris", "kondisi", "keterangan"} <= set(form.errors)


def test_petugas_is_not_a_form_field(form_data, petugas):
    form_data["petugas"] = petugas.pk
    form = InventarisForm(form_data)

    assert "petugas" not in form.fields
    assert form.is_valid(), form.errors
    assert "petugas" not in form.cleaned_data


@pytest.mark.parametrize("name,image_format,extension", [
    ("photo.png", "PNG", "png"),
    ("photo.jpg", "JPEG", "jpg"),
    ("photo.jpeg", "JPEG", "jpg"),
    ("photo.gif", "GIF", "gif"),
])
def test_accepted_image_types(form_data, make_image, name, image_format, extension):
    form = InventarisForm(form_data, {"image": make_image(name, image_format)})

    assert form.is_valid(), form.errors
    assert form.image_extension == extension


def test_image_of_other_format_is_rejected(form_data, make_image):
    form = InventarisForm(form_data, {"image": make_image("photo.bmp", "BMP")})

    assert not form.is_valid()
    assert form.errors["image"] == ["The image must be a file of type: jpeg, png, jpg, gif."]


def test_non_image_upload_is_rejected(form_data):
    from django.core.files.uploadedfile import SimpleUploadedFile

    upload = SimpleUploadedFile("notes.png", b"not really an image", content_type="image/png")
    form = InventarisForm(form_data, {"image": upload})

    assert not form.is_valid()
    assert "image" in form.errors


def test_image_larger_than_limit_is_rejected(form_data, make_image, settings):
    settings.INVENTARIS_IMAGE_MAX_KB = 1
    upload = make_image("big.png", "PNG", size=(64, 64), noise=True)
    assert upload.size > 1024

    form = InventarisForm(form_data, {"image": upload})

    assert not form.is_valid()
    assert form.errors["image"] == ["The image must not be greater than 1 kilobytes."]
