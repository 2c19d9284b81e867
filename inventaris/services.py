"""Inventory record operations behind the inventaris views.

The views own the HTTP side (forms, messages, redirects); everything that
reads or writes inventaris rows or their image blobs goes through here.
"""
import logging
from urllib.parse import urlencode

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.files.storage import default_storage
from django.core.paginator import Paginator
from django.db import IntegrityError, transaction
from django.db.models import F, Q
from django.shortcuts import get_object_or_404
from django.utils.crypto import get_random_string

from .exceptions import StorageFailure
from .models import Inventaris, Jenis, Ruang

logger = logging.getLogger(__name__)

IMAGE_NAMESPACE = "images"
DISPLAY_DATE_FORMAT = "%d/%m/%Y"
DUPLICATE_KODE_MESSAGE = "The kode inventaris has already been taken."

LISTING_FIELDS = (
    "id",
    "keterangan",
    "kode_inventaris",
    "nama_inventaris",
    "nama_jenis",
    "nama_ruang",
    "nama_petugas",
    "tanggal_register",
    "kondisi",
    "jumlah",
    "image",
)


# ==================== Listing ====================

def list_inventaris(search=None, page=None):
    """Return one page of denormalised inventaris rows.

    ``search`` matches ``kode_inventaris`` or ``nama_inventaris`` as a
    case-insensitive substring. Rows are ordered by id. The returned
    ``querystring`` carries the search term into the pagination links.
    """
    search = (search or "").strip()

    rows = (
        Inventaris.objects
        .annotate(
            nama_jenis=F("jenis__nama_jenis"),
            nama_ruang=F("ruang__nama_ruang"),
            nama_petugas=F("petugas__nama_petugas"),
        )
        .values(*LISTING_FIELDS)
        .order_by("id")
    )

    if search:
        rows = rows.filter(
            Q(kode_inventaris__icontains=search) |
            Q(nama_inventaris__icontains=search)
        )

    paginator = Paginator(rows, settings.INVENTARIS_PER_PAGE)
    page_obj = paginator.get_page(page)
    page_obj.object_list = [_display_row(row) for row in page_obj.object_list]

    return {
        "inventaris": page_obj,
        "search": search,
        "querystring": urlencode({"search": search}) if search else "",
    }


def _display_row(row):
    row["tanggal_register"] = row["tanggal_register"].strftime(DISPLAY_DATE_FORMAT)
    return row


# ==================== Form data ====================

def get_form_options():
    """Full Jenis and Ruang lists as value/option pairs for the select inputs"""
    return {
        "jenis": list(Jenis.objects.order_by("id").values(value=F("id"), option=F("nama_jenis"))),
        "ruang": list(Ruang.objects.order_by("id").values(value=F("id"), option=F("nama_ruang"))),
    }


def get_inventaris_or_404(pk):
    return get_object_or_404(Inventaris.objects.select_related("jenis", "ruang", "petugas"), pk=pk)


# ==================== Blob store ====================

def _store_image(upload, extension):
    name = f"{IMAGE_NAMESPACE}/{get_random_string(40)}.{extension}"
    try:
        path = default_storage.save(name, upload)
    except Exception as exc:
        logger.exception("Failed to store inventaris image %s", name)
        raise StorageFailure("Failed to store the image.", original_exception=exc) from exc
    logger.info("Stored inventaris image %s", path)
    return path


def _delete_image(path):
    try:
        default_storage.delete(path)
    except Exception as exc:
        logger.exception("Failed to delete inventaris image %s", path)
        raise StorageFailure("Failed to delete the image.", original_exception=exc) from exc
    logger.info("Deleted inventaris image %s", path)


def _discard_image(path):
    """Remove a blob whose row never got written"""
    try:
        _delete_image(path)
    except StorageFailure:
        logger.error("Orphaned inventaris image left in storage: %s", path)


def _save_checked(inventaris, save, new_image=None):
    """Run ``save`` atomically, turning a kode collision into a field error.

    The unique index on ``kode_inventaris`` is the final guard when two
    requests pass form validation with the same code at the same time.
    """
    try:
        with transaction.atomic():
            return save()
    except IntegrityError:
        if new_image:
            _discard_image(new_image)
        duplicate = (
            Inventaris.objects
            .filter(kode_inventaris=inventaris.kode_inventaris)
            .exclude(pk=inventaris.pk)
            .exists()
        )
        if duplicate:
            raise ValidationError({"kode_inventaris": [DUPLICATE_KODE_MESSAGE]})
        raise


# ==================== Create / Update / Delete ====================

def store_inventaris(form, petugas):
    """Create an inventaris from a valid ``InventarisForm``.

    ``petugas`` is the authenticated staff member registering the item.
    The image, when uploaded, is stored before the row is written; a
    storage failure raises ``StorageFailure`` and nothing is persisted.
    """
    if petugas is None:
        raise ValueError("An authenticated petugas is required to register inventaris.")

    inventaris = form.save(commit=False)
    inventaris.petugas = petugas

    image_path = None
    upload = form.cleaned_data.get("image")
    if upload:
        image_path = _store_image(upload, form.image_extension)
        inventaris.image = image_path

    _save_checked(inventaris, inventaris.save, new_image=image_path)
    logger.info("Inventaris %s stored by %s", inventaris.kode_inventaris, petugas)
    return inventaris


def update_inventaris(inventaris, form):
    """Overwrite every field of ``inventaris`` from a valid form.

    A new image is stored first and the row saved before the previous blob
    is removed, so a failed upload leaves the record and its old image
    untouched. Without an upload the current image is kept.
    """
    old_image = inventaris.image.name if inventaris.image else None

    new_image = None
    upload = form.cleaned_data.get("image")
    if upload:
        new_image = _store_image(upload, form.image_extension)
        inventaris.image = new_image

    inventaris = _save_checked(inventaris, form.save, new_image=new_image)

    if new_image and old_image:
        try:
            _delete_image(old_image)
        except StorageFailure:
            logger.error("Previous image of inventaris %s left in storage: %s",
                         inventaris.kode_inventaris, old_image)

    logger.info("Inventaris %s updated", inventaris.kode_inventaris)
    return inventaris


def destroy_inventaris(inventaris):
    """Delete the image blob, then the row. The row stays if the blob can't be removed."""
    if inventaris.image:
        _delete_image(inventaris.image.name)

    kode = inventaris.kode_inventaris
    inventaris.delete()
    logger.info("Inventaris %s deleted", kode)
