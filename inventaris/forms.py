import re

from django import forms
from django.conf import settings
from django.core.exceptions import ValidationError

from .models import Inventaris

# Decoded Pillow format -> extension used for the stored blob name
IMAGE_EXTENSIONS = {
    "JPEG": "jpg",
    "PNG": "png",
    "GIF": "gif",
}

ALPHA_NUM_RE = re.compile(r"^[^\W_]+$")
ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

FIELD_LABELS = {
    "kode_inventaris": "kode inventaris",
    "nama_inventaris": "nama inventaris",
    "keterangan": "keterangan",
    "jenis": "jenis",
    "ruang": "ruang",
    "jumlah": "jumlah",
    "kondisi": "kondisi",
    "tanggal_register": "tanggal register",
    "image": "image",
}


class IsoDateField(forms.DateField):
    """DateField that only takes zero-padded YYYY-MM-DD strings"""

    def to_python(self, value):
        if isinstance(value, str) and value.strip() and not ISO_DATE_RE.match(value.strip()):
            raise ValidationError(self.error_messages["invalid"], code="invalid")
        return super().to_python(value)


class InventarisForm(forms.ModelForm):
    """Form for creating and updating inventaris.

    Only the fields listed in ``Meta.fields`` are read from the request;
    the registering petugas is always supplied by the caller, never by the
    client. The uploaded image is validated here but stored by
    ``services`` so that blob failures can be handled explicitly.
    """

    tanggal_register = IsoDateField(
        input_formats=["%Y-%m-%d"],
        widget=forms.DateInput(attrs={"class": "form-control", "type": "date"}, format="%Y-%m-%d"),
        error_messages={"invalid": "The tanggal register does not match the format Y-m-d."},
    )
    image = forms.ImageField(
        required=False,
        widget=forms.FileInput(attrs={"class": "form-control-file", "accept": "image/*"}),
        error_messages={"invalid_image": "The image must be an image."},
    )

    class Meta:
        model = Inventaris
        fields = [
            "kode_inventaris", "nama_inventaris", "keterangan", "jenis", "ruang",
            "jumlah", "kondisi", "tanggal_register",
        ]
        widgets = {
            "kode_inventaris": forms.TextInput(attrs={"class": "form-control", "placeholder": "e.g., INV001"}),
            "nama_inventaris": forms.TextInput(attrs={"class": "form-control"}),
            "keterangan": forms.TextInput(attrs={"class": "form-control"}),
            "jenis": forms.Select(attrs={"class": "form-control"}),
            "ruang": forms.Select(attrs={"class": "form-control"}),
            "jumlah": forms.NumberInput(attrs={"class": "form-control", "step": "any"}),            "kondisi": forms.TextInput(attrs={"class": "form-control", "placeholder": "e.g., Baik"}),
        }
        error_messages = {
            "kode_inventaris": {
                "unique": "The kode inventaris has already been taken.",
                "max_length": "The kode inventaris must not be greater than 10 characters.",
            },
            "jenis": {"invalid_choice": "The selected jenis is invalid."},
            "ruang": {"invalid_choice": "The selected ruang is invalid."},
            "jumlah": {"invalid": "The jumlah must be a number."},
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for name, field in self.fields.items():
            field.error_messages["required"] = f"The {FIELD_LABELS[name]} field is required."

    def clean_kode_inventaris(self):
        kode = self.cleaned_data.get("kode_inventaris")
        if not ALPHA_NUM_RE.match(kode):
            raise ValidationError("The kode inventaris must only contain letters and numbers.")
        # Normalised before the unique check so codes differing by case collide
        return kode.lower().upper()

    def clean_image(self):
        image = self.cleaned_data.get("image")
        if not image:
            return None

        max_kb = settings.INVENTARIS_IMAGE_MAX_KB
        if image.size > max_kb * 1024:
            raise ValidationError(f"The image must not be greater than {max_kb} kilobytes.")

        image_format = getattr(getattr(image, "image", None), "format", None)
        if image_format not in IMAGE_EXTENSIONS:
            raise ValidationError("The image must be a file of type: jpeg, png, jpg, gif.")
        return image

    @property
    def image_extension(self):
        image = self.cleaned_data.get("image")
        if not image:
            return None
        return IMAGE_EXTENSIONS[image.image.format]


class SearchForm(forms.Form):
    search = forms.CharField(
        required=False,
        widget=forms.TextInput(attrs={"class": "form-control", "placeholder": "Search kode or nama inventaris..."}),
    )
