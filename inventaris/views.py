import logging

from django.contrib import messages
from django.core.exceptions import ValidationError
from django.http import Http404, HttpResponseNotAllowed, QueryDict
from django.shortcuts import render, redirect
from django.utils.datastructures import MultiValueDict
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.cache import never_cache

from petugas.views import petugas_required

from . import services
from .exceptions import StorageFailure
from .forms import InventarisForm, SearchForm

logger = logging.getLogger(__name__)

SPOOFABLE_METHODS = ("PUT", "PATCH", "DELETE")


def _request_method(request):
    """HTML forms can only POST, so honour a ``_method`` field on POST requests"""
    if request.method == "POST":
        override = request.POST.get("_method", "").upper()
        if override in SPOOFABLE_METHODS:
            return override
    return request.method


def _request_payload(request):
    """Form data and files for POST as well as raw PUT/PATCH requests"""
    if request.method == "POST":
        return request.POST, request.FILES
    if request.content_type.startswith("multipart/"):
        return request.parse_file_upload(request.META, request)
    return QueryDict(request.body, encoding=request.encoding), MultiValueDict()


def _back_url(request):
    referer = request.META.get("HTTP_REFERER")
    if referer and url_has_allowed_host_and_scheme(
        referer, allowed_hosts={request.get_host()}, require_https=request.is_secure()
    ):
        return referer
    return "inventaris:index"


def _render_form(request, template, form, inventaris=None, status=200):
    context = {
        "title": "Edit Inventaris" if inventaris else "Tambah Inventaris",
        "form": form,
        "inventaris": inventaris,
        **services.get_form_options(),
    }
    return render(request, template, context, status=status)


# ==================== Collection: /inventaris ====================

@never_cache
@petugas_required
def index(request):
    """GET lists and searches inventaris, POST registers a new one"""
    if request.method == "POST":
        return store(request)
    if request.method not in ("GET", "HEAD"):
        return HttpResponseNotAllowed(["GET", "POST"])

    search_form = SearchForm(request.GET or None)
    search = search_form.cleaned_data.get("search") if search_form.is_valid() else ""

    context = {
        "title": "Data Inventaris",
        "search_form": search_form,
        **services.list_inventaris(search, request.GET.get("page")),
    }
    return render(request, "inventaris/index.html", context)


@never_cache
@petugas_required
def create(request):
    """Blank form for registering inventaris"""
    return _render_form(request, "inventaris/create.html", InventarisForm())


def store(request):
    form = InventarisForm(request.POST, request.FILES)
    if form.is_valid():
        try:
            services.store_inventaris(form, petugas=request.user.petugas)
        except ValidationError as exc:
            form.add_error(None, exc)
        except StorageFailure as exc:
            logger.warning("Storing inventaris by %s failed: %s", request.user.username, exc)
            messages.error(request, f"Failed to add inventaris: {exc}")
            return _render_form(request, "inventaris/create.html", form, status=503)
        else:
            messages.success(request, "success store")
            return redirect("inventaris:index")

    return _render_form(request, "inventaris/create.html", form)


# ==================== Member: /inventaris/<pk> ====================

@never_cache
@petugas_required
def edit(request, pk):
    """Edit form pre-filled with the stored inventaris"""
    inventaris = services.get_inventaris_or_404(pk)
    return _render_form(request, "inventaris/edit.html", InventarisForm(instance=inventaris), inventaris)


@never_cache
@petugas_required
def detail(request, pk):
    """PUT/PATCH updates, DELETE removes. There is no detail page."""
    method = _request_method(request)
    if method in ("PUT", "PATCH"):
        return update(request, pk)
    if method == "DELETE":
        return destroy(request, pk)
    if method in ("GET", "HEAD"):
        raise Http404("Inventaris detail page is not available.")
    return HttpResponseNotAllowed(["GET", "PUT", "PATCH", "DELETE"])


def update(request, pk):
    inventaris = services.get_inventaris_or_404(pk)
    data, files = _request_payload(request)

    form = InventarisForm(data, files, instance=inventaris)
    if form.is_valid():
        try:
            services.update_inventaris(inventaris, form)
        except ValidationError as exc:
            form.add_error(None, exc)
        except StorageFailure as exc:
            logger.warning("Updating inventaris %s failed: %s", pk, exc)
            messages.error(request, f"Failed to update inventaris: {exc}")
            return _render_form(request, "inventaris/edit.html", form,
                                services.get_inventaris_or_404(pk), status=503)
        else:
            messages.success(request, "success update")
            return redirect("inventaris:index")

    # Binding wrote the rejected values onto the instance
    return _render_form(request, "inventaris/edit.html", form, services.get_inventaris_or_404(pk))


def destroy(request, pk):
    inventaris = services.get_inventaris_or_404(pk)
    try:
        services.destroy_inventaris(inventaris)
    except StorageFailure as exc:
        logger.warning("Deleting inventaris %s failed: %s", pk, exc)
        messages.error(request, f"Failed to delete inventaris: {exc}")
    else:
        messages.success(request, "success delete")
    return redirect(_back_url(request))
