import logging
from functools import wraps

from django.contrib import messages
from django.contrib.auth import authenticate, login, logout
from django.contrib.auth.views import redirect_to_login
from django.shortcuts import render, redirect
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.cache import never_cache
from django.views.decorators.http import require_POST

from .forms import LoginForm, RegisterForm
from .models import Petugas

logger = logging.getLogger(__name__)

# Two weeks, Django's default session age
REMEMBER_ME_SECONDS = 1209600


def petugas_required(view_func):
    """Decorator to check the user is signed in and has a Petugas profile"""

    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        if not request.user.is_authenticated:
            return redirect_to_login(request.get_full_path())

        try:
            request.user.petugas
        except Petugas.DoesNotExist:
            logout(request)
            messages.error(request, 'Your account is not registered as petugas.')
            return redirect('petugas:login')

        return view_func(request, *args, **kwargs)

    return wrapper


def _next_url(request):
    next_url = request.POST.get('next') or request.GET.get('next')
    if next_url and url_has_allowed_host_and_scheme(
        next_url, allowed_hosts={request.get_host()}, require_https=request.is_secure()
    ):
        return next_url
    return None


@never_cache
def user_login(request):
    """Handle petugas sign in"""
    if request.user.is_authenticated:
        return redirect('inventaris:index')

    if request.method == "POST":
        form = LoginForm(request.POST)
        if form.is_valid():
            username = form.cleaned_data['username']
            password = form.cleaned_data['password']

            user = authenticate(request, username=username, password=password)

            if user is not None:
                login(request, user)
                if not form.cleaned_data['remember']:
                    request.session.set_expiry(0)
                else:
                    request.session.set_expiry(REMEMBER_ME_SECONDS)

                logger.info("Petugas %s signed in", user.username)
                return redirect(_next_url(request) or 'inventaris:index')

            logger.warning("Failed sign in for %s", username)
            form.add_error('username', "These credentials do not match our records.")
    else:
        form = LoginForm()

    context = {
        "title": "Admin Sign In",
        "login": True,
        "form": form,
        "next": _next_url(request),
    }
    return render(request, "petugas/login.html", context)


@require_POST
def logout_view(request):
    logout(request)
    request.session.flush()
    return redirect('petugas:login')


@never_cache
def register(request):
    """Sign up a new petugas account"""
    if request.user.is_authenticated:
        return redirect('inventaris:index')

    if request.method == "POST":
        form = RegisterForm(request.POST)
        if form.is_valid():
            user = form.save()
            login(request, user)
            logger.info("Petugas %s registered", user.username)
            messages.success(request, 'success register')
            return redirect('inventaris:index')
    else:
        form = RegisterForm()

    context = {
        "title": "Admin Sign Up",
        "login": True,
        "form": form,
    }
    return render(request, "petugas/register.html", context)
