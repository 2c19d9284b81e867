from django.urls import path
from . import views

app_name = "inventaris"

urlpatterns = [
    path("inventaris", views.index, name="index"),
    path("inventaris/create", views.create, name="create"),
    path("inventaris/<int:pk>", views.detail, name="detail"),
    path("inventaris/<int:pk>/edit", views.edit, name="edit"),
]
