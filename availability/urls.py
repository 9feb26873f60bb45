from django.urls import path
from . import views

app_name = "availability"

urlpatterns = [
    # Player availability
    path("api/availability/my-status/", views.my_status_endpoint, name="my_status_api"),
    path("api/availability/names/", views.names_endpoint, name="names_api"),
    path("api/availability/summary/", views.summary_endpoint, name="summary_api"),
    path("api/availability/set/", views.set_availability_endpoint, name="set_availability_api"),

    # Grade ladder and results
    path("api/data/grade/", views.grade_data_endpoint, name="grade_data_api"),
]
