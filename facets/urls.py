""" expose facet http interface """

from django.urls import path

from . import views

# urlpatterns is the standard name to use here
urlpatterns = [
    path('facet/', views.facet_terms, name='facet_terms'),
]
